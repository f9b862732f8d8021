"""User entity - a consultant whose profile page is generated."""

from dataclasses import dataclass, field
from typing import Optional, Union

from ..exceptions import ProfileDataError
from .faq import FAQ
from .service import Service
from .testimonial import Testimonial
from .training import Training

Number = Union[int, float]


def _text(data: dict, key: str) -> Optional[str]:
    """Returns a string field, treating missing and empty values alike."""
    value = data.get(key)
    return value if value else None


def _strings(data: dict, key: str) -> tuple[str, ...]:
    return tuple(s for s in (data.get(key) or ()) if s)


def _number(value) -> Optional[Number]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


@dataclass(frozen=True)
class Theme:
    """Optional brand colours; defaults are resolved by the view model."""

    primary: Optional[str] = None
    accent: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "Theme":
        data = data or {}
        return cls(primary=_text(data, "primary"), accent=_text(data, "accent"))

    def to_dict(self) -> dict:
        return {"primary": self.primary, "accent": self.accent}


@dataclass(frozen=True)
class Social:
    instagram: Optional[str] = None
    linkedin: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "Social":
        data = data or {}
        return cls(instagram=_text(data, "instagram"), linkedin=_text(data, "linkedin"))

    def to_dict(self) -> dict:
        return {"instagram": self.instagram, "linkedin": self.linkedin}

    def links(self) -> list[tuple[str, str]]:
        """Non-empty (network, url) pairs in declaration order."""
        pairs = [("instagram", self.instagram), ("linkedin", self.linkedin)]
        return [(network, url) for network, url in pairs if url]


@dataclass(frozen=True)
class Modalities:
    online: bool = False
    in_person: bool = False

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "Modalities":
        data = data or {}
        return cls(
            online=bool(data.get("online")),
            in_person=bool(data.get("in_person")),
        )

    def to_dict(self) -> dict:
        return {"online": self.online, "in_person": self.in_person}


@dataclass(frozen=True)
class Stats:
    """Persuasion metrics. Each one is independently optional."""

    years: Optional[Number] = None
    clients: Optional[Number] = None
    satisfaction: Optional[Number] = None

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "Stats":
        data = data or {}
        return cls(
            years=_number(data.get("years")),
            clients=_number(data.get("clients")),
            satisfaction=_number(data.get("satisfaction")),
        )

    def to_dict(self) -> dict:
        return {
            "years": self.years,
            "clients": self.clients,
            "satisfaction": self.satisfaction,
        }

    @property
    def has_any(self) -> bool:
        """True if at least one metric holds a number."""
        return any(
            _number(v) is not None for v in (self.years, self.clients, self.satisfaction)
        )


@dataclass(frozen=True)
class AvailabilitySlot:
    days: str
    hours: str

    @classmethod
    def from_dict(cls, data: dict) -> "AvailabilitySlot":
        return cls(days=data["days"], hours=data["hours"])

    def to_dict(self) -> dict:
        return {"days": self.days, "hours": self.hours}


@dataclass(frozen=True)
class User:
    """A consultant profile. Only slug and name are required."""

    slug: str
    name: str

    title: Optional[str] = None
    summary: Optional[str] = None
    city: Optional[str] = None

    avatar_url: Optional[str] = None
    cover_url: Optional[str] = None

    phone: Optional[str] = None
    whatsapp: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    map_embed_url: Optional[str] = None

    specialties: tuple[str, ...] = ()
    services: tuple[Service, ...] = ()
    credentials: tuple[str, ...] = ()
    methods: tuple[str, ...] = ()
    testimonials: tuple[Testimonial, ...] = ()
    faqs: tuple[FAQ, ...] = ()

    social: Social = field(default_factory=Social)
    theme: Theme = field(default_factory=Theme)
    brand: Optional[str] = None
    site_url: Optional[str] = None

    skills: tuple[str, ...] = ()
    trainings: tuple[Training, ...] = ()
    modalities: Modalities = field(default_factory=Modalities)
    availability: tuple[AvailabilitySlot, ...] = ()
    stats: Stats = field(default_factory=Stats)

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        """Creates a User from a registry record.

        Records use the camelCase keys of the page data files
        (``avatarUrl``, ``mapEmbedUrl``...).

        Raises:
            ProfileDataError: If ``slug`` or ``name`` is missing.
        """
        missing = [key for key in ("slug", "name") if not data.get(key)]
        if missing:
            raise ProfileDataError(
                "Profile record is missing required fields",
                details={"missing": missing, "slug": data.get("slug")},
            )

        return cls(
            slug=data["slug"],
            name=data["name"],
            title=_text(data, "title"),
            summary=_text(data, "summary"),
            city=_text(data, "city"),
            avatar_url=_text(data, "avatarUrl"),
            cover_url=_text(data, "coverUrl"),
            phone=_text(data, "phone"),
            whatsapp=_text(data, "whatsapp"),
            email=_text(data, "email"),
            address=_text(data, "address"),
            map_embed_url=_text(data, "mapEmbedUrl"),
            specialties=_strings(data, "specialties"),
            services=tuple(Service.from_dict(s) for s in data.get("services") or ()),
            credentials=_strings(data, "credentials"),
            methods=_strings(data, "methods"),
            testimonials=tuple(
                Testimonial.from_dict(t) for t in data.get("testimonials") or ()
            ),
            faqs=tuple(FAQ.from_dict(f) for f in data.get("faqs") or ()),
            social=Social.from_dict(data.get("social")),
            theme=Theme.from_dict(data.get("theme")),
            brand=_text(data, "brand"),
            site_url=_text(data, "siteUrl"),
            skills=_strings(data, "skills"),
            trainings=tuple(Training.from_dict(t) for t in data.get("trainings") or ()),
            modalities=Modalities.from_dict(data.get("modalities")),
            availability=tuple(
                AvailabilitySlot.from_dict(a) for a in data.get("availability") or ()
            ),
            stats=Stats.from_dict(data.get("stats")),
        )

    def to_dict(self) -> dict:
        """Converts back to a registry record."""
        return {
            "slug": self.slug,
            "name": self.name,
            "title": self.title,
            "summary": self.summary,
            "city": self.city,
            "avatarUrl": self.avatar_url,
            "coverUrl": self.cover_url,
            "phone": self.phone,
            "whatsapp": self.whatsapp,
            "email": self.email,
            "address": self.address,
            "mapEmbedUrl": self.map_embed_url,
            "specialties": list(self.specialties),
            "services": [s.to_dict() for s in self.services],
            "credentials": list(self.credentials),
            "methods": list(self.methods),
            "testimonials": [t.to_dict() for t in self.testimonials],
            "faqs": [f.to_dict() for f in self.faqs],
            "social": self.social.to_dict(),
            "theme": self.theme.to_dict(),
            "brand": self.brand,
            "siteUrl": self.site_url,
            "skills": list(self.skills),
            "trainings": [t.to_dict() for t in self.trainings],
            "modalities": self.modalities.to_dict(),
            "availability": [a.to_dict() for a in self.availability],
            "stats": self.stats.to_dict(),
        }
