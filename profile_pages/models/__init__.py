"""
Render payload models for profile pages
"""
from .view_model import (
    AvailabilityItem,
    FaqItem,
    ProfileViewModel,
    SectionVisibility,
    ServiceCard,
    SocialLink,
    StatCard,
    TestimonialCard,
    ThemeTokens,
    TrainingCard,
)
from .metadata import OpenGraph, OpenGraphImage, PageMetadata

__all__ = [
    "AvailabilityItem",
    "FaqItem",
    "ProfileViewModel",
    "SectionVisibility",
    "ServiceCard",
    "SocialLink",
    "StatCard",
    "TestimonialCard",
    "ThemeTokens",
    "TrainingCard",
    "OpenGraph",
    "OpenGraphImage",
    "PageMetadata",
]
