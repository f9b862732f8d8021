"""Fixed values used when deriving profile pages."""


class PageDefaults:
    """Fallbacks for optional profile fields."""

    PRIMARY_COLOR = "#2563eb"
    ACCENT_COLOR = "#f59e0b"

    SITE_URL = "http://localhost:3000"
    SITE_NAME = "Profil"

    SKILL_CLOUD_LIMIT = 15

    # Shown when the contact block is visible but no map source was derived
    MAP_EMBED_URL = "https://www.google.com/maps?q=39.92077,32.85411&z=12&output=embed"

    SERVICE_DURATION = "Seans"


class LinkTemplates:
    """URL shapes for contact links and embeds."""

    WHATSAPP = "https://wa.me/{digits}?text={text}"
    MAILTO = "mailto:{email}?subject={subject}&body={body}"
    TEL = "tel:{phone}"

    MAP_ZOOM = 15
    MAP_GEOCODE = "https://www.google.com/maps?q={query}&z={zoom}&output=embed"


class PageTexts:
    """Fixed Turkish copy injected into derived values."""

    APPOINTMENT_GREETING = "Merhaba {name}, randevu almak istiyorum."
    MAIL_SUBJECT = "Randevu Talebi"

    META_DESCRIPTION = (
        "{name} danışmanlık profili. İletişim, WhatsApp ve e-posta için tek tık."
    )
    TITLE_SEPARATOR = " – "

    ONLINE_SESSIONS = "Online seans seçeneğimiz mevcut."

    STAT_YEARS = "Yıl Deneyim"
    STAT_CLIENTS = "Danışan/Çift"
    STAT_SATISFACTION = "Memnuniyet"

    SHOW_ALL_SKILLS = "Tümünü Göster"
    SHOW_FEWER_SKILLS = "Daha Az Göster"


class StructuredData:
    """Constants of the schema.org documents."""

    CONTEXT = "https://schema.org"
    COUNTRY = "TR"
    PRICE_RANGE = "₺₺"
