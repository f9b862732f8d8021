"""
Consultant profile pages

Resolves a profile by slug and derives the data its static page renders:
contact links, visible sections and schema.org JSON-LD.
"""

from .exceptions import ProfileDataError, ProfileNotFoundError, ProfilePagesError
from .pages import ProfilePage, build_all_pages, build_page
from .resolver import find_profile, resolve, static_params
from .state import SkillCloudState

__all__ = [
    "ProfileDataError",
    "ProfileNotFoundError",
    "ProfilePagesError",
    "ProfilePage",
    "build_all_pages",
    "build_page",
    "find_profile",
    "resolve",
    "static_params",
    "SkillCloudState",
]
