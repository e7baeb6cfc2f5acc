"""
Display Time Adapter (TimePort Implementation).

Implements the TimePort interface for the site's display timezone.

Key behaviors:
- now_utc: Returns current UTC time
- to_local: Converts UTC to the display timezone (default Asia/Seoul)
- Naive datetimes are treated as UTC
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, tzinfo
from zoneinfo import ZoneInfo

DEFAULT_TIMEZONE = "Asia/Seoul"


class DisplayTimeAdapter:
    """Time adapter for a fixed IANA display timezone."""

    def __init__(self, tz_name: str = DEFAULT_TIMEZONE) -> None:
        """
        Initialize with specified timezone.

        Args:
            tz_name: IANA timezone name (default: Asia/Seoul)
        """
        self._tz_name = tz_name
        self._tz = ZoneInfo(tz_name)

    def now_utc(self) -> datetime:
        """Get current UTC time."""
        return datetime.now(UTC)

    def now_local(self) -> datetime:
        """Get current time in the display timezone."""
        return datetime.now(self._tz)

    def to_local(self, utc_dt: datetime) -> datetime:
        """
        Convert UTC to display time.

        If utc_dt is naive, it's assumed to be UTC.
        """
        if utc_dt.tzinfo is None:
            utc_dt = utc_dt.replace(tzinfo=UTC)

        return utc_dt.astimezone(self._tz)

    @property
    def tz(self) -> tzinfo:
        return self._tz

    @property
    def timezone_name(self) -> str:
        """Get the display timezone name."""
        return self._tz_name


class FrozenTimeAdapter(DisplayTimeAdapter):
    """
    Time adapter that returns a fixed time.

    Useful for deterministic testing.
    """

    def __init__(
        self,
        frozen_utc: datetime,
        tz_name: str = DEFAULT_TIMEZONE,
    ) -> None:
        """
        Initialize with frozen time.

        Args:
            frozen_utc: The UTC time to return from now_utc()
            tz_name: IANA timezone name for local conversions
        """
        super().__init__(tz_name)
        if frozen_utc.tzinfo is None:
            frozen_utc = frozen_utc.replace(tzinfo=UTC)
        self._frozen_utc = frozen_utc.astimezone(UTC)

    def now_utc(self) -> datetime:
        """Get frozen UTC time."""
        return self._frozen_utc

    def now_local(self) -> datetime:
        """Get frozen time in local timezone."""
        return self._frozen_utc.astimezone(self._tz)

    def advance(self, delta: timedelta) -> None:
        """Advance frozen time by delta (for testing)."""
        self._frozen_utc = self._frozen_utc + delta


def create_time_adapter(tz_name: str = DEFAULT_TIMEZONE) -> DisplayTimeAdapter:
    """Factory function to create a time adapter."""
    return DisplayTimeAdapter(tz_name)
