"""Exception classes for forecast normalization.

Every error here is terminal for the call that raised it: the normalizer
never returns partial results. Each one carries enough context (the raw
string, the granularity, the offending field) to be logged as-is.

``UpstreamError`` is re-exported so callers can catch the full taxonomy
from one module.
"""

from __future__ import annotations

from typing import Any, Sequence

from sky.common.enums import Granularity
from sky.openmeteo.errors import UpstreamError


class WeatherDataError(ValueError):
    """Base class for malformed or empty forecast data."""

    pass


class TimeParseError(WeatherDataError):
    """Raised when a time string matches none of the accepted shapes."""

    def __init__(self, value: str, field: str | None = None) -> None:
        """Initialize the exception.

        Args:
            value: The raw time string as received from the API
            field: Qualified source field, e.g. ``daily.sunset``, if known
        """
        message = f"Unable to parse time string {value!r}"
        if field:
            message += f" in {field}"
        super().__init__(message)
        self.value = value
        self.field = field


class IncompleteDataError(WeatherDataError):
    """Raised when a required section or field array is absent."""

    def __init__(self, granularity: Granularity, missing_fields: Sequence[str]) -> None:
        """Initialize the exception.

        Args:
            granularity: View whose data was incomplete
            missing_fields: Names of the absent fields (or the section itself)
        """
        fields = ", ".join(missing_fields)
        super().__init__(
            f"{granularity.value} forecast data is incomplete or missing: {fields}"
        )
        self.granularity = granularity
        self.missing_fields = tuple(missing_fields)


class InconsistentLengthError(WeatherDataError):
    """Raised when a required array does not match the time axis length."""

    def __init__(self, granularity: Granularity, field: str, expected: int, actual: int) -> None:
        super().__init__(
            f"{granularity.value} field {field!r} has {actual} values, "
            f"expected {expected} to match 'time'"
        )
        self.granularity = granularity
        self.field = field
        self.expected = expected
        self.actual = actual


class NoDataError(WeatherDataError):
    """Raised when the response is well-formed but reports zero time steps."""

    def __init__(self, granularity: Granularity) -> None:
        super().__init__(f"No {granularity.value} forecast data returned for this location")
        self.granularity = granularity


class InvalidRequestError(WeatherDataError):
    """Raised in strict mode when a request parameter is out of range."""

    def __init__(self, parameter: str, value: Any, allowed: str) -> None:
        super().__init__(f"{parameter}={value!r} is out of range ({allowed})")
        self.parameter = parameter
        self.value = value


__all__ = [
    "IncompleteDataError",
    "InconsistentLengthError",
    "InvalidRequestError",
    "NoDataError",
    "TimeParseError",
    "UpstreamError",
    "WeatherDataError",
]
