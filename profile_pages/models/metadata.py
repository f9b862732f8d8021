"""
PageMetadata - SEO head values of a profile page
"""

from typing import Optional
from pydantic import BaseModel, Field


class OpenGraphImage(BaseModel):
    url: str


class OpenGraph(BaseModel):
    title: str
    description: str
    images: Optional[list[OpenGraphImage]] = None
    type: str = "profile"
    site_name: str


class PageMetadata(BaseModel):
    """Title, description and social preview data of one page."""

    metadata_base: str = Field(..., description="Base URL for absolute links")
    title: str
    description: str
    open_graph: OpenGraph
    canonical: Optional[str] = None
