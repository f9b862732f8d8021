"""
ProfileViewModel - display-ready values of one profile page

Computed once per build from an immutable User. The presentation layer maps
these fields onto its layout without re-deriving anything.
"""

from typing import Any, Optional
from pydantic import BaseModel, Field


class ThemeTokens(BaseModel):
    """Resolved colours, exposed to the stylesheet as CSS variables."""

    primary: str
    accent: str


class StatCard(BaseModel):
    key: str = Field(..., description="years, clients or satisfaction")
    value: str = Field(..., description="Formatted metric, e.g. '200+' or '%94'")
    label: str


class ServiceCard(BaseModel):
    title: str
    desc: str
    duration_label: str = Field(..., description="Duration or the generic session label")
    price: Optional[str] = None


class TrainingCard(BaseModel):
    title: str
    meta: Optional[str] = Field(None, description="Organisation and year")


class TestimonialCard(BaseModel):
    name: str
    text: str


class FaqItem(BaseModel):
    q: str
    a: str


class AvailabilityItem(BaseModel):
    days: str
    hours: str


class SocialLink(BaseModel):
    network: str
    label: str
    url: str


class SectionVisibility(BaseModel):
    """Which optional page sections are rendered."""

    specialties: bool = False
    stats: bool = False
    methods: bool = False
    credentials: bool = False
    approach: bool = Field(False, description="Yaklaşım / Eğitim block")
    trainings: bool = False
    skills: bool = False
    certificates: bool = Field(False, description="Sertifikalar / Yetkinlikler block")
    services: bool = False
    availability: bool = False
    testimonials: bool = False
    faqs: bool = False
    contact: bool = False
    social: bool = False


class ProfileViewModel(BaseModel):
    """Everything a profile page needs, derived from one User."""

    slug: str
    name: str
    title: Optional[str] = None
    summary: Optional[str] = None
    city: Optional[str] = None
    hero_subtitle: Optional[str] = None
    avatar_url: Optional[str] = None
    cover_url: Optional[str] = None

    theme: ThemeTokens

    # Contact
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    whatsapp_href: Optional[str] = None
    mail_href: Optional[str] = None
    phone_href: Optional[str] = None
    map_src: Optional[str] = None
    map_embed_src: str = Field(..., description="map_src or the default embed")
    social_links: list[SocialLink] = Field(default_factory=list)

    # Content
    specialties: list[str] = Field(default_factory=list)
    stats: list[StatCard] = Field(default_factory=list)
    methods: list[str] = Field(default_factory=list)
    credentials: list[str] = Field(default_factory=list)
    trainings: list[TrainingCard] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    skill_cloud_limit: int = Field(..., gt=0, description="Skills shown while collapsed")
    services: list[ServiceCard] = Field(default_factory=list)
    availability: list[AvailabilityItem] = Field(default_factory=list)
    testimonials: list[TestimonialCard] = Field(default_factory=list)
    faqs: list[FaqItem] = Field(default_factory=list)

    online: bool = False
    modality_note: Optional[str] = None
    footer_brand: str

    sections: SectionVisibility

    # JSON-LD
    service_json_ld: dict[str, Any]
    faq_json_ld: Optional[dict[str, Any]] = None
