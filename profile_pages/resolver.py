"""Profile resolution: slug in, User out."""

from typing import Optional

from .config import logger as log
from .container import get_container
from .domain.user import User
from .exceptions import ProfileNotFoundError
from .repositories.interfaces.profile_repository import IProfileRepository, normalize_slug


def _repository(repository: Optional[IProfileRepository]) -> IProfileRepository:
    return repository if repository is not None else get_container().profiles


def find_profile(
    slug: str, repository: Optional[IProfileRepository] = None
) -> Optional[User]:
    """Looks up a profile, returning None for unknown slugs."""
    return _repository(repository).get_by_slug(normalize_slug(slug))


def resolve(slug: str, repository: Optional[IProfileRepository] = None) -> User:
    """Resolves a slug to its profile, case-insensitively.

    Args:
        slug: Path parameter of the page, in any casing.
        repository: Registry to search. Uses the global container if not specified.

    Raises:
        ProfileNotFoundError: If no profile is registered under the slug.
    """
    user = find_profile(slug, repository)
    if user is None:
        log.warn("resolver", "Profile not found", slug=slug)
        raise ProfileNotFoundError(slug)
    log.debug("resolver", "Profile resolved", slug=user.slug, name=user.name)
    return user


def static_params(repository: Optional[IProfileRepository] = None) -> list[dict]:
    """Path parameters of every page to generate at build time."""
    return [{"slug": slug} for slug in _repository(repository).list_slugs()]
