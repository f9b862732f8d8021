"""
Derivation rules turning a profile into page data
"""

from .links import (
    build_mail_href,
    build_map_src,
    build_phone_href,
    build_whatsapp_href,
    encode_component,
)
from .structured_data import build_faq_json_ld, build_service_json_ld, to_json_ld_script
from .view_model import build_view_model
from .metadata import build_metadata

__all__ = [
    # Links
    "build_mail_href",
    "build_map_src",
    "build_phone_href",
    "build_whatsapp_href",
    "encode_component",
    # JSON-LD
    "build_faq_json_ld",
    "build_service_json_ld",
    "to_json_ld_script",
    # Page
    "build_view_model",
    "build_metadata",
]
