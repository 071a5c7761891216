# src/sky/utils/time.py
"""Time and date handling utilities."""

from __future__ import annotations

from datetime import UTC, datetime, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


class TimeUtils:
    """Time-related utility functions.

    Centralized utilities for working with dates and times:
    - Timezone resolution with a UTC fallback
    - Datetime formatting with user preferences
    - Time difference calculations
    """

    @staticmethod
    def resolve_zone(timezone_name: str) -> tzinfo:
        """Look up an IANA zone, falling back to UTC.

        An empty name means UTC. A name the zone database cannot load
        also yields UTC rather than an error.

        Args:
            timezone_name: IANA zone name, possibly empty

        Returns:
            The zone to interpret local times in
        """
        if not timezone_name:
            return UTC
        try:
            return ZoneInfo(timezone_name)
        except (ZoneInfoNotFoundError, ValueError, OSError):
            return UTC

    @staticmethod
    def format_datetime(dt: datetime, format_string: str) -> str:
        """Format datetime with specified format string.

        Args:
            dt: Datetime to format
            format_string: strftime format string

        Returns:
            Formatted datetime string
        """
        return dt.strftime(format_string)

    @staticmethod
    def get_time_difference_string(start: datetime, end: datetime) -> str:
        """Get human-readable time difference between two datetimes.

        Args:
            start: Starting datetime
            end: Ending datetime

        Returns:
            Formatted time difference (e.g., "2h 30m")
        """
        seconds = (end - start).total_seconds()
        hours = int(seconds // 3600)
        minutes = int((seconds % 3600) // 60)
        return f"{hours}h {minutes}m"
