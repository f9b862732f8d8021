"""Interface for profile repository."""

from abc import ABC, abstractmethod
from typing import Optional

from ...domain.user import User


def normalize_slug(slug: Optional[str]) -> str:
    """Case-folds a slug; every implementation indexes and looks up with it."""
    return (slug or "").lower()


class IProfileRepository(ABC):
    """Contract for read-only profile data access."""

    @abstractmethod
    def get_by_slug(self, slug: str) -> Optional[User]:
        """Gets a profile by slug, case-insensitively."""
        pass

    @abstractmethod
    def get_all(self) -> list[User]:
        """Gets all profiles in registration order."""
        pass

    @abstractmethod
    def list_slugs(self) -> list[str]:
        """Gets the slug of every profile in registration order."""
        pass
