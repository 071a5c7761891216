"""Conversion of raw forecast responses into simplified records.

Pure functions, no I/O and no logging: each call validates the section it
needs, resolves every timestamp against the response's timezone, and
returns fresh records. Any failure aborts the whole call.
"""

from __future__ import annotations

from typing import Final, cast

from sky.common.enums import Granularity
from sky.openmeteo.models import ForecastCurrent, ForecastDaily, ForecastHourly, ForecastResult
from sky.weather.codes import describe_weather_code
from sky.weather.models import CurrentWeather, DailyForecast, HourlyForecast, Units
from sky.weather.series import require_fields, validate_series
from sky.weather.timestamps import resolve_timestamp

CURRENT_FIELDS: Final = (
    "temperature_2m",
    "relative_humidity_2m",
    "weather_code",
    "is_day",
    "apparent_temperature",
    "precipitation",
    "wind_speed_10m",
)

HOURLY_FIELDS: Final = (
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "precipitation_probability",
    "precipitation",
    "weather_code",
    "wind_speed_10m",
    "is_day",
)

DAILY_FIELDS: Final = (
    "temperature_2m_max",
    "temperature_2m_min",
    "weather_code",
    "sunrise",
    "sunset",
    "precipitation_sum",
    "precipitation_probability_mean",
    "wind_speed_10m_max",
)


def normalize_current(result: ForecastResult) -> CurrentWeather:
    """Build the current-conditions record.

    Raises:
        IncompleteDataError: If the current block or one of its fields is absent
        TimeParseError: If the observation time cannot be parsed
    """
    require_fields(result.current, Granularity.CURRENT, ("time", *CURRENT_FIELDS))
    current = cast(ForecastCurrent, result.current)

    block = result.current_units
    units = Units(
        temperature=block.temperature_2m if block else "",
        wind_speed=block.wind_speed_10m if block else "",
        precipitation=block.precipitation if block else "",
    )
    return CurrentWeather(
        observation_time=resolve_timestamp(current.time, result.timezone, "current.time"),
        temperature=current.temperature_2m,
        humidity=current.relative_humidity_2m,
        apparent_temperature=current.apparent_temperature,
        precipitation=current.precipitation,
        wind_speed=current.wind_speed_10m,
        weather_code=current.weather_code,
        weather_description=describe_weather_code(current.weather_code),
        is_day=current.is_day,
        units=units,
    )


def normalize_hourly(result: ForecastResult) -> list[HourlyForecast]:
    """Build one record per hour, in API order.

    Raises:
        IncompleteDataError, InconsistentLengthError, NoDataError: On bad shape
        TimeParseError: If any hour's time cannot be parsed
    """
    count = validate_series(result.hourly, Granularity.HOURLY, HOURLY_FIELDS)
    hourly = cast(ForecastHourly, result.hourly)

    block = result.hourly_units
    units = Units(
        temperature=block.temperature_2m if block else "",
        wind_speed=block.wind_speed_10m if block else "",
        precipitation=block.precipitation if block else "",
    )
    return [
        HourlyForecast(
            time=resolve_timestamp(hourly.time[i], result.timezone, "hourly.time"),
            temperature=hourly.temperature_2m[i],
            humidity=hourly.relative_humidity_2m[i],
            apparent_temperature=hourly.apparent_temperature[i],
            precipitation_probability=hourly.precipitation_probability[i],
            precipitation=hourly.precipitation[i],
            wind_speed=hourly.wind_speed_10m[i],
            weather_code=hourly.weather_code[i],
            weather_description=describe_weather_code(hourly.weather_code[i]),
            is_day=hourly.is_day[i],
            units=units,
        )
        for i in range(count)
    ]


def normalize_daily(result: ForecastResult) -> list[DailyForecast]:
    """Build one record per day, in API order.

    Raises:
        IncompleteDataError, InconsistentLengthError, NoDataError: On bad shape
        TimeParseError: If any date, sunrise or sunset cannot be parsed
    """
    count = validate_series(result.daily, Granularity.DAILY, DAILY_FIELDS)
    daily = cast(ForecastDaily, result.daily)

    block = result.daily_units
    units = Units(
        temperature=block.temperature_2m_max if block else "",
        wind_speed=block.wind_speed_10m_max if block else "",
        precipitation=block.precipitation_sum if block else "",
    )
    tz = result.timezone
    return [
        DailyForecast(
            date=resolve_timestamp(daily.time[i], tz, "daily.time"),
            max_temperature=daily.temperature_2m_max[i],
            min_temperature=daily.temperature_2m_min[i],
            weather_code=daily.weather_code[i],
            weather_description=describe_weather_code(daily.weather_code[i]),
            sunrise=resolve_timestamp(daily.sunrise[i], tz, "daily.sunrise"),
            sunset=resolve_timestamp(daily.sunset[i], tz, "daily.sunset"),
            precipitation_sum=daily.precipitation_sum[i],
            precipitation_probability=daily.precipitation_probability_mean[i],
            max_wind_speed=daily.wind_speed_10m_max[i],
            units=units,
        )
        for i in range(count)
    ]
