"""
Display Time Port.

Protocol-based interface for time operations used by presentation code.

Key requirements:
- Storage and parsing are UTC-based
- Display timezone is configurable (default: Asia/Seoul)
- "now" is injectable so relative dates are deterministic under test
"""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Protocol


class TimePort(Protocol):
    """
    Time adapter interface.

    All internal timestamps are timezone-aware UTC.
    """

    def now_utc(self) -> datetime:
        """Get current UTC time."""
        ...

    def now_local(self) -> datetime:
        """Get current time in display timezone."""
        ...

    def to_local(self, utc_dt: datetime) -> datetime:
        """
        Convert UTC to display-local time.

        Args:
            utc_dt: Datetime in UTC (naive treated as UTC)

        Returns:
            Datetime in the display timezone (timezone-aware)
        """
        ...

    @property
    def tz(self) -> tzinfo:
        """Display timezone object."""
        ...

    @property
    def timezone_name(self) -> str:
        """Get the display timezone name (e.g., 'Asia/Seoul')."""
        ...
