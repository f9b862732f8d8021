"""Page assembly: resolve a slug and derive everything its page renders."""

from typing import Optional

from pydantic import BaseModel

from .builders.metadata import build_metadata
from .builders.structured_data import to_json_ld_script
from .builders.view_model import build_view_model
from .models.metadata import PageMetadata
from .models.view_model import ProfileViewModel
from .repositories.interfaces.profile_repository import IProfileRepository
from .resolver import resolve, static_params


class ProfilePage(BaseModel):
    """Render payload of one page: view model plus head metadata."""

    view_model: ProfileViewModel
    metadata: PageMetadata

    def json_ld_scripts(self) -> list[str]:
        """Serialized JSON-LD documents, the FAQ one only when present."""
        documents = [self.view_model.service_json_ld, self.view_model.faq_json_ld]
        return [to_json_ld_script(doc) for doc in documents if doc is not None]


def build_page(
    slug: str,
    repository: Optional[IProfileRepository] = None,
    base_url: Optional[str] = None,
) -> ProfilePage:
    """Builds the complete payload of a profile page.

    Raises:
        ProfileNotFoundError: If the slug is unknown. Nothing is built then.
    """
    user = resolve(slug, repository)
    return ProfilePage(
        view_model=build_view_model(user),
        metadata=build_metadata(user, base_url),
    )


def build_all_pages(
    repository: Optional[IProfileRepository] = None,
    base_url: Optional[str] = None,
) -> list[ProfilePage]:
    """Builds every registered page, in registration order."""
    return [
        build_page(params["slug"], repository, base_url)
        for params in static_params(repository)
    ]
