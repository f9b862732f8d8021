"""Application exceptions for profile page generation."""

from typing import Any, Optional


class ProfilePagesError(Exception):
    """Base exception for profile page generation."""

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: Optional[Any] = None,
    ):
        self.message = message
        self.code = code
        self.details = details
        super().__init__(self.message)


class ProfileNotFoundError(ProfilePagesError):
    """Raised when no profile is registered under the requested slug.

    Terminal: the page does not exist, callers must not retry.
    """

    def __init__(self, slug: str, message: str = "Profile not found"):
        self.slug = slug
        super().__init__(message, code="NOT_FOUND", details={"slug": slug})


class ProfileDataError(ProfilePagesError):
    """Raised when a registry record is malformed or conflicts with another."""

    def __init__(
        self, message: str = "Invalid profile data", details: Optional[Any] = None
    ):
        super().__init__(message, code="INVALID_PROFILE_DATA", details=details)
