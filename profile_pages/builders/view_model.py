"""Builds the display-ready view model of a profile page."""

from typing import Optional

from ..config import logger as log
from ..config.env import get_skill_cloud_limit
from ..constants.page_constants import PageDefaults, PageTexts
from ..domain.user import Number, Stats, User
from ..models.view_model import (
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
from .links import build_mail_href, build_map_src, build_phone_href, build_whatsapp_href
from .structured_data import build_faq_json_ld, build_service_json_ld

SOCIAL_LABELS = {"instagram": "Instagram", "linkedin": "LinkedIn"}


def resolve_theme(user: User) -> ThemeTokens:
    return ThemeTokens(
        primary=user.theme.primary or PageDefaults.PRIMARY_COLOR,
        accent=user.theme.accent or PageDefaults.ACCENT_COLOR,
    )


def hero_subtitle(user: User) -> Optional[str]:
    """'title – city', either part alone, or None."""
    parts = [p for p in (user.title, user.city) if p]
    return PageTexts.TITLE_SEPARATOR.join(parts) if parts else None


def format_metric(value: Number) -> str:
    """Whole floats render without a fractional part (2.0 -> "2")."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def stat_cards(stats: Stats) -> list[StatCard]:
    cards = []
    if stats.years is not None:
        cards.append(
            StatCard(
                key="years",
                value=f"{format_metric(stats.years)}+",
                label=PageTexts.STAT_YEARS,
            )
        )
    if stats.clients is not None:
        cards.append(
            StatCard(
                key="clients",
                value=f"{format_metric(stats.clients)}+",
                label=PageTexts.STAT_CLIENTS,
            )
        )
    if stats.satisfaction is not None:
        cards.append(
            StatCard(
                key="satisfaction",
                value=f"%{format_metric(stats.satisfaction)}",
                label=PageTexts.STAT_SATISFACTION,
            )
        )
    return cards


def section_visibility(user: User, contact_visible: bool) -> SectionVisibility:
    return SectionVisibility(
        specialties=bool(user.specialties),
        stats=user.stats.has_any,
        methods=bool(user.methods),
        credentials=bool(user.credentials),
        approach=bool(user.methods or user.credentials),
        trainings=bool(user.trainings),
        skills=bool(user.skills),
        certificates=bool(user.trainings or user.skills),
        services=bool(user.services),
        availability=bool(user.availability),
        testimonials=bool(user.testimonials),
        faqs=bool(user.faqs),
        contact=contact_visible,
        social=bool(user.social.links()),
    )


def build_view_model(user: User, skill_cloud_limit: Optional[int] = None) -> ProfileViewModel:
    """Derives every display value of a profile page.

    Pure: reads the user and configuration, returns a fresh model.

    Args:
        user: Resolved profile.
        skill_cloud_limit: Skills shown while the skill cloud is collapsed.
            Read from configuration if not specified.

    Returns:
        ProfileViewModel: Complete render payload.

    Raises:
        pydantic.ValidationError: If skill_cloud_limit is not positive.
    """
    if skill_cloud_limit is None:
        skill_cloud_limit = get_skill_cloud_limit()

    map_src = build_map_src(user)
    contact_visible = bool(user.phone or user.email or user.address or map_src)

    view_model = ProfileViewModel(
        slug=user.slug,
        name=user.name,
        title=user.title,
        summary=user.summary,
        city=user.city,
        hero_subtitle=hero_subtitle(user),
        avatar_url=user.avatar_url,
        cover_url=user.cover_url,
        theme=resolve_theme(user),
        phone=user.phone,
        email=user.email,
        address=user.address,
        whatsapp_href=build_whatsapp_href(user),
        mail_href=build_mail_href(user),
        phone_href=build_phone_href(user),
        map_src=map_src,
        map_embed_src=map_src or PageDefaults.MAP_EMBED_URL,
        social_links=[
            SocialLink(network=network, label=SOCIAL_LABELS[network], url=url)
            for network, url in user.social.links()
        ],
        specialties=list(user.specialties),
        stats=stat_cards(user.stats),
        methods=list(user.methods),
        credentials=list(user.credentials),
        trainings=[TrainingCard(title=t.title, meta=t.meta_line) for t in user.trainings],
        skills=list(user.skills),
        skill_cloud_limit=skill_cloud_limit,
        services=[
            ServiceCard(
                title=s.title,
                desc=s.desc,
                duration_label=s.duration or PageDefaults.SERVICE_DURATION,
                price=s.price,
            )
            for s in user.services
        ],
        availability=[AvailabilityItem(days=a.days, hours=a.hours) for a in user.availability],
        testimonials=[TestimonialCard(name=t.name, text=t.text) for t in user.testimonials],
        faqs=[FaqItem(q=f.q, a=f.a) for f in user.faqs],
        online=user.modalities.online,
        modality_note=PageTexts.ONLINE_SESSIONS if user.modalities.online else None,
        footer_brand=user.brand or PageDefaults.SITE_NAME,
        sections=section_visibility(user, contact_visible),
        service_json_ld=build_service_json_ld(user),
        faq_json_ld=build_faq_json_ld(user),
    )

    log.debug(
        "view_model",
        "built",
        slug=user.slug,
        whatsapp=view_model.whatsapp_href is not None,
        mail=view_model.mail_href is not None,
        map=map_src is not None,
        faq_json_ld=view_model.faq_json_ld is not None,
    )
    return view_model
