"""
Dates component - Locale-aware display dates with sentinel fallbacks.
"""

from ._impl import (
    DEFAULT_DATE_CONFIG,
    FORMAT_ERROR,
    INVALID_DATE,
    LOCALE_RENDERERS,
    NO_DATE,
    DateFormatConfig,
    Timestamp,
    format_display_date,
    format_display_day,
    parse_timestamp,
    time_ago,
)
from .ports import TimePort

__all__ = [
    # Sentinels
    "FORMAT_ERROR",
    "INVALID_DATE",
    "NO_DATE",
    # Config
    "DEFAULT_DATE_CONFIG",
    "DateFormatConfig",
    "LOCALE_RENDERERS",
    # Functions
    "format_display_date",
    "format_display_day",
    "parse_timestamp",
    "time_ago",
    # Types / ports
    "Timestamp",
    "TimePort",
]
