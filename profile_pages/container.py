"""Process-wide access point for the profile registry."""

from dataclasses import dataclass
from typing import Optional

from .repositories.interfaces.profile_repository import IProfileRepository


@dataclass(frozen=True)
class Container:
    """Profile registry shared by the resolver and page builders."""

    profiles: IProfileRepository


_container: Optional[Container] = None


def get_container() -> Container:
    """Returns the registry installed by the build entry point.

    Raises:
        RuntimeError: If no registry has been installed yet.
    """
    if _container is None:
        raise RuntimeError(
            "Profile registry not initialized. "
            "Call set_container(create_memory_container()) before resolving slugs."
        )
    return _container


def set_container(container: Container) -> Optional[Container]:
    """Installs the registry and returns the one it replaces, if any."""
    global _container
    previous, _container = _container, container
    return previous


def reset_container() -> None:
    global _container
    _container = None
