"""
Display date formatting.

Converts machine timestamps into human-readable strings in the site's
display timezone and locale.

Invariants:
- Every function is total: it returns a non-empty string for any input
- Absence, malformed input and rendering failures map to fixed sentinels
- Rendering is independent of the host process locale
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime

from src.adapters.time_display import DisplayTimeAdapter

from .ports import TimePort

logger = logging.getLogger(__name__)

# --- Sentinels ---

NO_DATE = "날짜 정보 없음"
INVALID_DATE = "잘못된 날짜 형식"
FORMAT_ERROR = "날짜 포맷 오류"

Timestamp = str | datetime | int | float | None

_DATE_ONLY = re.compile(r"\d{4}-\d{2}-\d{2}")
_EXTENDED_ISO = re.compile(
    r"\d{4}-\d{2}-\d{2}"
    r"(?:[T ]\d{2}:\d{2}(?::\d{2}(?:\.\d{1,6})?)?(?:Z|[+-]\d{2}:\d{2})?)?"
)

_EN_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)  # fmt: skip


# --- Locale renderers ---


def _ko_long(dt: datetime) -> str:
    period = "오전" if dt.hour < 12 else "오후"
    hour = dt.hour % 12 or 12
    return f"{dt.year}년 {dt.month}월 {dt.day}일 {period} {hour}:{dt.minute:02d}"


def _ko_day(dt: datetime) -> str:
    return f"{dt.year}년 {dt.month}월 {dt.day}일"


def _en_long(dt: datetime) -> str:
    period = "AM" if dt.hour < 12 else "PM"
    hour = dt.hour % 12 or 12
    return f"{_EN_MONTHS[dt.month - 1]} {dt.day}, {dt.year} at {hour}:{dt.minute:02d} {period}"


def _en_day(dt: datetime) -> str:
    return f"{_EN_MONTHS[dt.month - 1]} {dt.day}, {dt.year}"


Renderer = Callable[[datetime], str]

LOCALE_RENDERERS: dict[str, tuple[Renderer, Renderer]] = {
    "ko-KR": (_ko_long, _ko_day),
    "en-US": (_en_long, _en_day),
}


@dataclass(frozen=True)
class DateFormatConfig:
    """Display locale for rendered dates."""

    locale: str = "ko-KR"

    def __post_init__(self) -> None:
        if self.locale not in LOCALE_RENDERERS:
            raise ValueError(
                f"Unsupported locale {self.locale!r}; "
                f"expected one of {sorted(LOCALE_RENDERERS)}"
            )


DEFAULT_DATE_CONFIG = DateFormatConfig()
_DEFAULT_TIME = DisplayTimeAdapter()


# --- Parsing ---


def parse_timestamp(value: Timestamp, time: TimePort) -> datetime | None:
    """
    Parse a timestamp into an aware datetime, or None if it is malformed.

    - Only the extended ISO-8601 shape is accepted; basic and week forms
      such as ``20231027`` or ``2023-W43-5`` are malformed
    - ISO-8601 text with ``Z`` or an offset is taken as given
    - Date-only text (``YYYY-MM-DD``) is midnight UTC
    - Offset-less date-time text is display-local time
    - Numbers are epoch milliseconds
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=time.tz)
        return value

    if isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, UTC)
        except (OverflowError, OSError, ValueError):
            return None

    if not isinstance(value, str):
        return None

    text = value.strip()
    if not _EXTENDED_ISO.fullmatch(text):
        return None
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None

    if parsed.tzinfo is None:
        if _DATE_ONLY.fullmatch(text):
            return parsed.replace(tzinfo=UTC)
        return parsed.replace(tzinfo=time.tz)
    return parsed


def _format(
    timestamp: Timestamp,
    time: TimePort | None,
    config: DateFormatConfig,
    long_form: bool,
) -> str:
    if not timestamp:
        return NO_DATE

    time = time or _DEFAULT_TIME
    instant = parse_timestamp(timestamp, time)
    if instant is None:
        return INVALID_DATE

    long_renderer, day_renderer = LOCALE_RENDERERS[config.locale]
    renderer = long_renderer if long_form else day_renderer
    try:
        return renderer(time.to_local(instant))
    except Exception:
        logger.warning("Date formatting failed for %r", timestamp, exc_info=True)
        return FORMAT_ERROR


# --- Public API ---


def format_display_date(
    timestamp: Timestamp,
    *,
    time: TimePort | None = None,
    config: DateFormatConfig = DEFAULT_DATE_CONFIG,
) -> str:
    """
    Format a timestamp as a long-form local date-time.

    Example (ko-KR, Asia/Seoul): "2023-10-27T10:00:00Z" -> "2023년 10월 27일 오후 7:00"

    Returns NO_DATE for falsy input, INVALID_DATE for unparseable input and
    FORMAT_ERROR if rendering fails.
    """
    return _format(timestamp, time, config, long_form=True)


def format_display_day(
    timestamp: Timestamp,
    *,
    time: TimePort | None = None,
    config: DateFormatConfig = DEFAULT_DATE_CONFIG,
) -> str:
    """Format a timestamp as a local date only ("2023년 10월 27일")."""
    return _format(timestamp, time, config, long_form=False)


def time_ago(
    timestamp: Timestamp,
    *,
    time: TimePort | None = None,
    config: DateFormatConfig = DEFAULT_DATE_CONFIG,
) -> str:
    """
    Relative time for feeds: "방금 전", "5분 전", "2시간 전", "3일 전".

    Anything 30 days or older falls back to format_display_day. Future
    timestamps read as "방금 전".
    """
    if not timestamp:
        return NO_DATE

    time = time or _DEFAULT_TIME
    instant = parse_timestamp(timestamp, time)
    if instant is None:
        return INVALID_DATE

    seconds = int((time.now_utc() - instant).total_seconds())

    if seconds < 60:
        return "방금 전"
    elif seconds < 3600:
        return f"{seconds // 60}분 전"
    elif seconds < 86400:
        return f"{seconds // 3600}시간 전"
    elif seconds < 2592000:
        return f"{seconds // 86400}일 전"
    return format_display_day(timestamp, time=time, config=config)
