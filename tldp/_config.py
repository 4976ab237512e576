"""Settings of the tldp tool — configured through environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime

from tld_model.dates import (
    DATE_CREATED,
    DATE_MODIFIED,
    DATE_PUBLISHED,
    DATE_REVIEWED,
    Dates,
)
from tld_parser.xml_helper import parse_timestamp

DEFAULT_SUMMARY_CLASS = "summary"
DEFAULT_CONSOLE_WIDTH = 200


@dataclass(frozen=True, slots=True)
class Settings:
    summary_class: str
    default_dates: Dates | None   # None when no TLDP_DEFAULT_* is set


def _env_timestamp(name: str, var_name: str) -> datetime | None:
    value = os.getenv(name)
    return parse_timestamp(value, f"{name} ({var_name})") if value else None


def get_settings() -> Settings:
    created   = _env_timestamp("TLDP_DEFAULT_CREATED",   DATE_CREATED)
    published = _env_timestamp("TLDP_DEFAULT_PUBLISHED", DATE_PUBLISHED)
    modified  = _env_timestamp("TLDP_DEFAULT_MODIFIED",  DATE_MODIFIED)
    reviewed  = _env_timestamp("TLDP_DEFAULT_REVIEWED",  DATE_REVIEWED)
    default_dates = Dates.value_of(created, published, modified, reviewed)
    return Settings(
        summary_class = os.getenv("TLDP_SUMMARY_CLASS", DEFAULT_SUMMARY_CLASS),
        default_dates = None if default_dates.is_unknown else default_dates,
    )


def console_width() -> int:
    """TLDP_CONSOLE_WIDTH; a missing, non-numeric or non-positive value gives the default."""
    try:
        width = int(os.getenv("TLDP_CONSOLE_WIDTH", ""))
    except ValueError:
        return DEFAULT_CONSOLE_WIDTH
    return width if width > 0 else DEFAULT_CONSOLE_WIDTH
