"""In-memory implementation of ProfileRepository."""

from types import MappingProxyType
from typing import Iterable, Optional

from ..interfaces.profile_repository import IProfileRepository, normalize_slug
from ...config import logger as log
from ...domain.user import User
from ...exceptions import ProfileDataError


class InMemoryProfileRepository(IProfileRepository):
    """Fixed registry of profiles, indexed by lower-cased slug.

    The registry is built once and never mutated afterwards, so a single
    instance can be shared across concurrent builds.
    """

    def __init__(self, users: Iterable[User]):
        users = tuple(users)
        index = {}
        for user in users:
            key = normalize_slug(user.slug)
            if key in index:
                raise ProfileDataError(
                    "Duplicate profile slug",
                    details={"slug": user.slug, "existing": index[key].slug},
                )
            index[key] = user

        self._users = users
        self._index = MappingProxyType(index)
        log.debug("repo.profile", "registry loaded", count=len(users))

    def get_by_slug(self, slug: str) -> Optional[User]:
        """Gets a profile by slug, case-insensitively."""
        key = normalize_slug(slug)
        result = self._index.get(key)
        log.debug(
            "repo.profile",
            "get_by_slug",
            slug=slug,
            found=result is not None,
            name=result.name if result else None,
        )
        return result

    def get_all(self) -> list[User]:
        """Gets all profiles in registration order."""
        return list(self._users)

    def list_slugs(self) -> list[str]:
        """Gets the slug of every profile in registration order."""
        return [user.slug for user in self._users]
