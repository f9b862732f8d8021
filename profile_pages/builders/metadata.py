"""SEO metadata of a profile page."""

from typing import Optional

from ..config.env import get_site_url
from ..constants.page_constants import PageDefaults, PageTexts
from ..domain.user import User
from ..models.metadata import OpenGraph, OpenGraphImage, PageMetadata


def page_title(user: User) -> str:
    if user.title:
        return f"{user.name}{PageTexts.TITLE_SEPARATOR}{user.title}"
    return user.name


def page_description(user: User) -> str:
    return user.summary or PageTexts.META_DESCRIPTION.format(name=user.name)


def build_metadata(user: User, base_url: Optional[str] = None) -> PageMetadata:
    """Builds title, description, Open Graph and canonical data.

    Args:
        user: Resolved profile.
        base_url: Base URL for absolute links. Read from configuration if
            not specified.
    """
    title = page_title(user)
    description = page_description(user)

    return PageMetadata(
        metadata_base=base_url or get_site_url(),
        title=title,
        description=description,
        open_graph=OpenGraph(
            title=title,
            description=description,
            images=[OpenGraphImage(url=user.cover_url)] if user.cover_url else None,
            site_name=user.brand or PageDefaults.SITE_NAME,
        ),
        canonical=user.site_url,
    )
