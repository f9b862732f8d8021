"""Contact links and map source derived from a profile."""

import re
from typing import Optional
from urllib.parse import quote

from ..constants.page_constants import LinkTemplates, PageTexts
from ..domain.user import User

_NON_DIGITS = re.compile(r"[^0-9]")

# Characters encodeURIComponent leaves alone; all are valid qchars in RFC 6068
_COMPONENT_SAFE = "-_.!~*'()"


def encode_component(text: str) -> str:
    """Percent-encodes a URL component (UTF-8, spaces as %20)."""
    return quote(text, safe=_COMPONENT_SAFE)


def digits_only(value: Optional[str]) -> str:
    return _NON_DIGITS.sub("", value or "")


def appointment_greeting(user: User) -> str:
    return PageTexts.APPOINTMENT_GREETING.format(name=user.name)


def whatsapp_digits(user: User) -> str:
    """Digits of the WhatsApp number, falling back to the phone number.

    Returns an empty string when neither field holds a digit.
    """
    return digits_only(user.whatsapp) or digits_only(user.phone)


def build_whatsapp_href(user: User) -> Optional[str]:
    """wa.me deep link with a pre-filled appointment request."""
    digits = whatsapp_digits(user)
    if not digits:
        return None
    return LinkTemplates.WHATSAPP.format(
        digits=digits, text=encode_component(appointment_greeting(user))
    )


def build_mail_href(user: User) -> Optional[str]:
    """mailto link with the appointment subject and greeting body.

    The address is kept verbatim; subject and body are percent-encoded
    (RFC 6068).
    """
    if not user.email:
        return None
    return LinkTemplates.MAILTO.format(
        email=user.email,
        subject=encode_component(PageTexts.MAIL_SUBJECT),
        body=encode_component(appointment_greeting(user)),
    )


def build_phone_href(user: User) -> Optional[str]:
    if not user.phone:
        return None
    return LinkTemplates.TEL.format(phone=user.phone)


def build_map_src(user: User) -> Optional[str]:
    """Explicit embed URL, else a geocoding embed of the address, else None."""
    if user.map_embed_url:
        return user.map_embed_url
    if user.address:
        return LinkTemplates.MAP_GEOCODE.format(
            query=encode_component(user.address), zoom=LinkTemplates.MAP_ZOOM
        )
    return None
