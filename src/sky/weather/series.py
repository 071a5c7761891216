"""Shape checks for parallel time-series arrays."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel

from sky.common.enums import Granularity
from sky.weather.errors import IncompleteDataError, InconsistentLengthError, NoDataError

TIME_FIELD = "time"


def require_fields(
    section: BaseModel | None, granularity: Granularity, required_fields: Sequence[str]
) -> None:
    """Ensure a section and each named field on it are present.

    Raises:
        IncompleteDataError: Listing the section or every absent field
    """
    if section is None:
        raise IncompleteDataError(granularity, [granularity.value])
    missing = [name for name in required_fields if getattr(section, name, None) is None]
    if missing:
        raise IncompleteDataError(granularity, missing)


def validate_series(
    section: BaseModel | None, granularity: Granularity, required_fields: Sequence[str]
) -> int:
    """Check that parallel arrays can be safely indexed together.

    Args:
        section: Raw hourly or daily block from the response
        granularity: Which block this is, for error context
        required_fields: Value arrays the caller's view will read

    Returns:
        The common length N of the time axis and every required array

    Raises:
        IncompleteDataError: If the section, ``time``, or a required array is
            absent, or one of them holds a null element (named as ``field[i]``)
        InconsistentLengthError: If a required array's length differs from ``time``
        NoDataError: If every array is present but the time axis is empty
    """
    require_fields(section, granularity, [TIME_FIELD, *required_fields])

    expected = len(getattr(section, TIME_FIELD))
    for name in required_fields:
        actual = len(getattr(section, name))
        if actual != expected:
            raise InconsistentLengthError(granularity, name, expected, actual)

    for name in (TIME_FIELD, *required_fields):
        values = getattr(section, name)
        if None in values:
            raise IncompleteDataError(granularity, [f"{name}[{values.index(None)}]"])

    if expected == 0:
        raise NoDataError(granularity)
    return expected
