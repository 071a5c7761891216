"""Application-facing weather client.

Composes a ``ForecastFetcher`` (the raw transport) with the normalizer,
hiding Open-Meteo field names and request assembly from callers.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final, Protocol, runtime_checkable

from sky.openmeteo.forecast import (
    ForecastClient,
    RangeWindow,
    RequestedFields,
    UnitPreferences,
)
from sky.openmeteo.models import Coord, ForecastResult
from sky.weather.errors import InvalidRequestError
from sky.weather.models import CurrentWeather, DailyForecast, HourlyForecast
from sky.weather.normalize import (
    CURRENT_FIELDS,
    DAILY_FIELDS,
    HOURLY_FIELDS,
    normalize_current,
    normalize_daily,
    normalize_hourly,
)

if TYPE_CHECKING:
    from sky.settings.user import UserSettings

logger: Final = logging.getLogger(__name__)

# Open-Meteo forecast horizons
MAX_FORECAST_DAYS: Final = 16
MAX_FORECAST_HOURS: Final = 384
DEFAULT_FORECAST_DAYS: Final = 1
DEFAULT_FORECAST_HOURS: Final = 24


@runtime_checkable
class ForecastFetcher(Protocol):
    """Protocol for anything that can fetch a raw forecast.

    ``ForecastClient`` is the production implementation; tests substitute
    an in-memory double.
    """

    def fetch_forecast(
        self,
        location: Coord,
        fields: RequestedFields,
        units: UnitPreferences,
        window: RangeWindow,
    ) -> ForecastResult:
        """Fetch the raw forecast for one location.

        Raises:
            UpstreamError: For transport or API failures
        """
        ...


def clamp_forecast_days(num_days: int) -> int:
    """Map an out-of-range day count to the default of one day."""
    if num_days < 1 or num_days > MAX_FORECAST_DAYS:
        return DEFAULT_FORECAST_DAYS
    return num_days


def clamp_forecast_hours(hours: int) -> int:
    """Map an out-of-range hour count to the default of 24 hours."""
    if hours < 1 or hours > MAX_FORECAST_HOURS:
        return DEFAULT_FORECAST_HOURS
    return hours


class WeatherClient:
    """High-level client returning simplified current, hourly and daily records.

    Unit preferences are fixed at construction and sent with every
    request; the values that come back are trusted to be in those units.

    With ``strict=False`` (the default) out-of-range day or hour counts
    are silently replaced by the defaults. With ``strict=True`` they raise
    ``InvalidRequestError`` instead.
    """

    def __init__(
        self,
        fetcher: ForecastFetcher,
        temperature_unit: str = "celsius",
        wind_speed_unit: str = "kmh",
        precipitation_unit: str = "mm",
        strict: bool = False,
    ) -> None:
        """Initialize the weather client.

        Args:
            fetcher: Raw forecast transport
            temperature_unit: ``celsius`` or ``fahrenheit``
            wind_speed_unit: ``kmh``, ``ms``, ``mph`` or ``kn``
            precipitation_unit: ``mm`` or ``inch``
            strict: Reject out-of-range counts instead of defaulting them
        """
        self.fetcher = fetcher
        self.units = UnitPreferences(
            temperature=temperature_unit,
            wind_speed=wind_speed_unit,
            precipitation=precipitation_unit,
        )
        self.strict = strict

    @classmethod
    def from_settings(cls, settings: UserSettings) -> WeatherClient:
        """Build a client backed by the real Open-Meteo API."""
        return cls(
            ForecastClient(timeout=settings.timeout),
            temperature_unit=settings.temperature_unit,
            wind_speed_unit=settings.wind_speed_unit,
            precipitation_unit=settings.precipitation_unit,
        )

    def get_current_weather(self, latitude: float, longitude: float) -> CurrentWeather:
        """Fetch the current weather conditions for a location.

        Raises:
            UpstreamError: When the fetch fails
            WeatherDataError: When the response cannot be normalized
        """
        result = self.fetcher.fetch_forecast(
            Coord(lat=latitude, lon=longitude),
            RequestedFields(current=CURRENT_FIELDS),
            self.units,
            RangeWindow(),
        )
        return normalize_current(result)

    def get_hourly_forecast(
        self, latitude: float, longitude: float, hours: int = DEFAULT_FORECAST_HOURS
    ) -> list[HourlyForecast]:
        """Fetch the hourly forecast starting at the current hour.

        Args:
            latitude: Latitude of the location
            longitude: Longitude of the location
            hours: Number of hours to forecast (1-384)

        Returns:
            Hourly records in chronological order
        """
        hours = self._check_range("hours", hours, clamp_forecast_hours(hours), MAX_FORECAST_HOURS)
        result = self.fetcher.fetch_forecast(
            Coord(lat=latitude, lon=longitude),
            RequestedFields(hourly=HOURLY_FIELDS),
            self.units,
            RangeWindow(past_hours=0, forecast_hours=hours),
        )
        return normalize_hourly(result)

    def get_daily_forecast(
        self, latitude: float, longitude: float, num_days: int
    ) -> list[DailyForecast]:
        """Fetch the daily forecast for a number of days.

        Args:
            latitude: Latitude of the location
            longitude: Longitude of the location
            num_days: Number of days to forecast (1-16)

        Returns:
            Daily records in chronological order
        """
        num_days = self._check_range(
            "num_days", num_days, clamp_forecast_days(num_days), MAX_FORECAST_DAYS
        )
        result = self.fetcher.fetch_forecast(
            Coord(lat=latitude, lon=longitude),
            RequestedFields(daily=DAILY_FIELDS),
            self.units,
            RangeWindow(past_days=0, forecast_days=num_days),
        )
        return normalize_daily(result)

    def _check_range(self, name: str, requested: int, clamped: int, upper: int) -> int:
        if requested != clamped:
            if self.strict:
                raise InvalidRequestError(name, requested, f"1-{upper}")
            logger.debug("%s=%d out of range, using %d", name, requested, clamped)
        return clamped
