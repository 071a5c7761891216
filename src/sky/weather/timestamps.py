"""Parsing of Open-Meteo time strings.

The API emits three shapes depending on the field and request: local
``YYYY-MM-DDTHH:MM`` (the default with ``timezone=auto``), full RFC3339,
and bare ``YYYY-MM-DD`` for daily rows. Each shape is one parse attempt;
``PARSE_ATTEMPTS`` fixes the order they are tried in.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import datetime, tzinfo
from typing import Final

from sky.utils.time import TimeUtils
from sky.weather.errors import TimeParseError

ParseAttempt = Callable[[str, tzinfo], datetime | None]

# Each shape must match exactly (zero-padded fields, colon in the offset)
# before strptime sees it
LOCAL_MINUTES_PATTERN: Final = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}", re.ASCII)
RFC3339_PATTERN: Final = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?P<fraction>\.\d{1,6})?(?:Z|[+-]\d{2}:\d{2})",
    re.ASCII,
)
DATE_PATTERN: Final = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)

LOCAL_MINUTES_FORMAT: Final = "%Y-%m-%dT%H:%M"
DATE_FORMAT: Final = "%Y-%m-%d"
RFC3339_FORMAT: Final = "%Y-%m-%dT%H:%M:%S%z"
RFC3339_FRACTION_FORMAT: Final = "%Y-%m-%dT%H:%M:%S.%f%z"


def _strptime(value: str, fmt: str) -> datetime | None:
    try:
        return datetime.strptime(value, fmt)
    except ValueError:
        return None


def parse_local_minutes(value: str, zone: tzinfo) -> datetime | None:
    """``YYYY-MM-DDTHH:MM`` as wall-clock time in ``zone``."""
    if not LOCAL_MINUTES_PATTERN.fullmatch(value):
        return None
    parsed = _strptime(value, LOCAL_MINUTES_FORMAT)
    return parsed.replace(tzinfo=zone) if parsed else None


def parse_rfc3339(value: str, zone: tzinfo) -> datetime | None:
    """RFC3339 with ``Z`` or a ``±HH:MM`` offset; ``zone`` is ignored."""
    match = RFC3339_PATTERN.fullmatch(value)
    if match is None:
        return None
    fmt = RFC3339_FRACTION_FORMAT if match.group("fraction") else RFC3339_FORMAT
    return _strptime(value, fmt)


def parse_local_date(value: str, zone: tzinfo) -> datetime | None:
    """Bare ``YYYY-MM-DD`` at midnight in ``zone``."""
    if not DATE_PATTERN.fullmatch(value):
        return None
    parsed = _strptime(value, DATE_FORMAT)
    return parsed.replace(tzinfo=zone) if parsed else None


# First success wins
PARSE_ATTEMPTS: Final[tuple[ParseAttempt, ...]] = (
    parse_local_minutes,
    parse_rfc3339,
    parse_local_date,
)


def resolve_timestamp(
    value: str, timezone_name: str = "", field: str | None = None
) -> datetime:
    """Convert an API time string into an aware datetime.

    Args:
        value: Time string from the API response
        timezone_name: The response's IANA zone name; empty or unknown
            names resolve to UTC
        field: Name of the field the value came from, for the error

    Returns:
        Timezone-aware datetime. Bare dates become local midnight.

    Raises:
        TimeParseError: If no accepted shape matches
    """
    zone = TimeUtils.resolve_zone(timezone_name)
    for attempt in PARSE_ATTEMPTS:
        parsed = attempt(value, zone)
        if parsed is not None:
            return parsed
    raise TimeParseError(value, field)
