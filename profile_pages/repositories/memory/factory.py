"""Factory for creating Container with the in-memory registry."""

from typing import Iterable, Optional

from ...container import Container
from ...db.seed import load_profiles
from ...domain.user import User
from .profile_repository import InMemoryProfileRepository


def create_memory_container(users: Optional[Iterable[User]] = None) -> Container:
    """Creates a Container backed by an in-memory profile registry.

    Args:
        users: Profiles to register. Uses the bundled records if not specified.

    Returns:
        Container: Configured with the in-memory repository.
    """
    if users is None:
        users = load_profiles()

    return Container(profiles=InMemoryProfileRepository(users))
