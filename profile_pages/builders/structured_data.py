"""schema.org JSON-LD documents for search engines."""

import json
from typing import Any, Optional

from ..constants.page_constants import StructuredData
from ..domain.user import User


def build_service_json_ld(user: User) -> dict[str, Any]:
    """ProfessionalService document. Always produced, missing values are ""."""
    return {
        "@context": StructuredData.CONTEXT,
        "@type": "ProfessionalService",
        "name": user.name,
        "url": user.site_url or "",
        "image": user.cover_url or user.avatar_url or "",
        "areaServed": user.city or "",
        "address": {
            "@type": "PostalAddress",
            "streetAddress": user.address or "",
            "addressLocality": user.city or "",
            "addressCountry": StructuredData.COUNTRY,
        },
        "telephone": user.phone or "",
        "email": user.email or "",
        "sameAs": [url for _, url in user.social.links()],
        "knowsAbout": list(user.specialties),
        "priceRange": StructuredData.PRICE_RANGE,
    }


def build_faq_json_ld(user: User) -> Optional[dict[str, Any]]:
    """FAQPage document, or None when the profile has no FAQ."""
    if not user.faqs:
        return None
    return {
        "@context": StructuredData.CONTEXT,
        "@type": "FAQPage",
        "mainEntity": [
            {
                "@type": "Question",
                "name": faq.q,
                "acceptedAnswer": {"@type": "Answer", "text": faq.a},
            }
            for faq in user.faqs
        ],
    }


def to_json_ld_script(document: dict[str, Any]) -> str:
    """Serializes a document for a <script type="application/ld+json"> body.

    "</" is escaped so text fields can never close the script element.
    """
    return json.dumps(document, ensure_ascii=False).replace("</", "<\\/")
