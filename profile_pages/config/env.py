"""Environment variables configuration."""

import os

from ..constants.page_constants import PageDefaults


def get_site_url() -> str:
    """Returns the base URL used to qualify absolute links in page metadata."""
    return os.getenv("SITE_URL") or PageDefaults.SITE_URL


def get_log_level() -> str:
    """Returns the minimum log level name."""
    return os.getenv("LOG_LEVEL", "info").lower()


def get_skill_cloud_limit() -> int:
    """Returns how many skills the collapsed skill cloud shows."""
    raw = os.getenv("SKILL_CLOUD_LIMIT")
    if not raw:
        return PageDefaults.SKILL_CLOUD_LIMIT
    try:
        limit = int(raw)
    except ValueError:
        return PageDefaults.SKILL_CLOUD_LIMIT
    return limit if limit > 0 else PageDefaults.SKILL_CLOUD_LIMIT
