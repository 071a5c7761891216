"""Weather package - client facade, normalizer, records, and custom errors."""

from .client import ForecastFetcher, WeatherClient, clamp_forecast_days
from .codes import WEATHER_CODE_DESCRIPTIONS, describe_weather_code
from .errors import (
    IncompleteDataError,
    InconsistentLengthError,
    InvalidRequestError,
    NoDataError,
    TimeParseError,
    UpstreamError,
    WeatherDataError,
)
from .models import CurrentWeather, DailyForecast, HourlyForecast, Units
from .normalize import normalize_current, normalize_daily, normalize_hourly
from .timestamps import resolve_timestamp

# Define what gets imported with: from sky.weather import *
__all__ = [
    "WEATHER_CODE_DESCRIPTIONS",
    "CurrentWeather",
    "DailyForecast",
    "ForecastFetcher",
    "HourlyForecast",
    "IncompleteDataError",
    "InconsistentLengthError",
    "InvalidRequestError",
    "NoDataError",
    "TimeParseError",
    "Units",
    "UpstreamError",
    "WeatherClient",
    "WeatherDataError",
    "clamp_forecast_days",
    "describe_weather_code",
    "normalize_current",
    "normalize_daily",
    "normalize_hourly",
    "resolve_timestamp",
]
