"""Tests for turning raw forecast responses into simplified records.

These tests verify that:
1. The sample response normalizes into current, hourly and daily records
2. Timestamps are resolved against the response timezone
3. Units are shared across every entry of one call
4. Shape problems abort the whole call
"""

from datetime import UTC, datetime, timedelta
from typing import Any

import pytest
from pydantic import ValidationError

from sky.openmeteo.models import ForecastResult
from sky.weather.errors import (
    IncompleteDataError,
    InconsistentLengthError,
    NoDataError,
    TimeParseError,
)
from sky.weather.models import Units
from sky.weather.normalize import normalize_current, normalize_daily, normalize_hourly


def test_current_from_sample(forecast_result: ForecastResult) -> None:
    current = normalize_current(forecast_result)
    assert current.temperature == 15.3
    assert current.humidity == 62
    assert current.apparent_temperature == 13.1
    assert current.wind_speed == 21.6
    assert current.weather_code == 3
    assert current.weather_description == "Mainly clear, partly cloudy, and overcast"
    assert current.daytime is True
    assert current.observation_time == datetime(2023, 1, 1, 11, 0, tzinfo=UTC)
    assert current.units == Units(temperature="°C", wind_speed="km/h", precipitation="mm")


def test_current_rfc3339_in_utc() -> None:
    result = ForecastResult.model_validate(
        {
            "timezone": "UTC",
            "current": {
                "time": "2023-01-01T12:00:00Z",
                "temperature_2m": 10.0,
                "relative_humidity_2m": 80.0,
                "apparent_temperature": 8.0,
                "precipitation": 0.5,
                "wind_speed_10m": 5.0,
                "weather_code": 3,
                "is_day": 1,
            },
        }
    )
    current = normalize_current(result)
    assert current.observation_time == datetime(2023, 1, 1, 12, 0, tzinfo=UTC)
    assert current.weather_description == "Mainly clear, partly cloudy, and overcast"
    assert current.precipitation == 0.5
    assert current.units == Units()


def test_current_missing_block() -> None:
    with pytest.raises(IncompleteDataError):
        normalize_current(ForecastResult(timezone="UTC"))


def test_current_invalid_time() -> None:
    result = ForecastResult.model_validate(
        {
            "current": {
                "time": "invalid-time",
                "temperature_2m": 1.0,
                "relative_humidity_2m": 1.0,
                "apparent_temperature": 1.0,
                "precipitation": 0.0,
                "wind_speed_10m": 1.0,
                "weather_code": 0,
                "is_day": 0,
            }
        }
    )
    with pytest.raises(TimeParseError) as excinfo:
        normalize_current(result)
    assert excinfo.value.value == "invalid-time"
    assert excinfo.value.field == "current.time"


def test_hourly_from_sample(forecast_result: ForecastResult) -> None:
    hours = normalize_hourly(forecast_result)
    assert len(hours) == 3
    assert [h.temperature for h in hours] == [15.3, 15.8, 15.1]
    assert [h.time.hour for h in hours] == [12, 13, 14]
    assert hours[0].time.utcoffset() == timedelta(hours=1)
    assert hours[2].weather_description == "Rain: Slight, moderate and heavy intensity"
    assert hours[2].precipitation_probability == 35
    assert all(h.units is hours[0].units for h in hours)


def test_daily_two_days(daily_payload: dict[str, Any]) -> None:
    days = normalize_daily(ForecastResult.model_validate(daily_payload))
    assert len(days) == 2
    assert days[0].date == datetime(2023, 1, 1, tzinfo=UTC)
    assert days[1].date == datetime(2023, 1, 2, tzinfo=UTC)
    assert [d.max_temperature for d in days] == [12.0, 13.0]
    assert [d.min_temperature for d in days] == [2.0, 3.0]
    assert days[0].sunrise == datetime(2023, 1, 1, 7, 0, tzinfo=UTC)
    assert days[1].sunset == datetime(2023, 1, 2, 17, 1, tzinfo=UTC)
    assert days[0].weather_description == "Mainly clear, partly cloudy, and overcast"
    assert days[0].daylight_hours == 10.0
    expected_units = Units(temperature="°C", wind_speed="km/h", precipitation="mm")
    assert days[0].units == expected_units
    assert days[0].units is days[1].units


def test_daily_local_sunrise(forecast_result: ForecastResult) -> None:
    days = normalize_daily(forecast_result)
    assert days[0].sunrise.utcoffset() == timedelta(hours=1)
    assert (days[0].sunrise.hour, days[0].sunrise.minute) == (8, 17)
    assert days[1].weather_description == "Rain showers: Slight, moderate, and violent"


def test_values_are_not_rounded(daily_payload: dict[str, Any]) -> None:
    daily_payload["daily"]["precipitation_sum"] = [0.123456789, 1e-9]
    days = normalize_daily(ForecastResult.model_validate(daily_payload))
    assert days[0].precipitation_sum == 0.123456789
    assert days[1].precipitation_sum == 1e-9


def test_daily_missing_field(daily_payload: dict[str, Any]) -> None:
    del daily_payload["daily"]["temperature_2m_max"]
    with pytest.raises(IncompleteDataError):
        normalize_daily(ForecastResult.model_validate(daily_payload))


def test_daily_inconsistent_lengths(daily_payload: dict[str, Any]) -> None:
    daily_payload["daily"]["temperature_2m_max"] = [12.0, 13.0, 14.0]
    with pytest.raises(InconsistentLengthError):
        normalize_daily(ForecastResult.model_validate(daily_payload))


def test_daily_empty(daily_payload: dict[str, Any]) -> None:
    daily_payload["daily"] = {key: [] for key in daily_payload["daily"]}
    with pytest.raises(NoDataError):
        normalize_daily(ForecastResult.model_validate(daily_payload))


def test_daily_bad_sunset_aborts_whole_call(daily_payload: dict[str, Any]) -> None:
    daily_payload["daily"]["sunset"][1] = "dusk"
    with pytest.raises(TimeParseError) as excinfo:
        normalize_daily(ForecastResult.model_validate(daily_payload))
    assert excinfo.value.field == "daily.sunset"
    assert "daily.sunset" in str(excinfo.value)


def test_records_are_frozen(daily_payload: dict[str, Any]) -> None:
    day = normalize_daily(ForecastResult.model_validate(daily_payload))[0]
    with pytest.raises(ValidationError):
        day.max_temperature = 99.0  # type: ignore[misc]


def test_daily_null_element_is_incomplete(daily_payload: dict[str, Any]) -> None:
    daily_payload["daily"]["precipitation_probability_mean"] = [10.0, None]
    result = ForecastResult.model_validate(daily_payload)
    assert result.daily is not None
    assert result.daily.precipitation_probability_mean == [10.0, None]

    with pytest.raises(IncompleteDataError) as excinfo:
        normalize_daily(result)
    assert excinfo.value.missing_fields == ("precipitation_probability_mean[1]",)


def test_null_in_unrequested_field_is_ignored(daily_payload: dict[str, Any]) -> None:
    daily_payload["daily"]["snowfall_sum"] = [None, 0.0]
    days = normalize_daily(ForecastResult.model_validate(daily_payload))
    assert len(days) == 2
