"""Forecast endpoint client and its request value types."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Final

from pydantic import ValidationError

from .client import BaseClient
from .errors import ParseError
from .models import Coord, ForecastResult

logger: Final = logging.getLogger(__name__)

FORECAST_BASE_URL: Final = "https://api.open-meteo.com/v1/"


@dataclass(frozen=True)
class RequestedFields:
    """Field names to request for each granularity; empty means "skip"."""

    current: tuple[str, ...] = ()
    hourly: tuple[str, ...] = ()
    daily: tuple[str, ...] = ()


@dataclass(frozen=True)
class UnitPreferences:
    """Unit names as Open-Meteo spells them (``celsius``, ``kmh``, ``mm``...).

    Empty strings leave the API default in place.
    """

    temperature: str = ""
    wind_speed: str = ""
    precipitation: str = ""


@dataclass(frozen=True)
class RangeWindow:
    """Time range of the request; ``None`` omits the parameter."""

    past_days: int | None = None
    forecast_days: int | None = None
    past_hours: int | None = None
    forecast_hours: int | None = None

    def as_params(self) -> Dict[str, int]:
        params = {
            "past_days": self.past_days,
            "forecast_days": self.forecast_days,
            "past_hours": self.past_hours,
            "forecast_hours": self.forecast_hours,
        }
        return {k: v for k, v in params.items() if v is not None}


@dataclass(frozen=True)
class ForecastRequest:
    """Everything one forecast call sends, bundled for logging and tests."""

    location: Coord
    fields: RequestedFields = field(default_factory=RequestedFields)
    units: UnitPreferences = field(default_factory=UnitPreferences)
    window: RangeWindow = field(default_factory=RangeWindow)

    def to_params(self) -> Dict[str, Any]:
        """Build the query string parameters for the forecast endpoint."""
        params: Dict[str, Any] = {
            "latitude": f"{self.location.lat:f}",
            "longitude": f"{self.location.lon:f}",
            "timezone": "auto",
        }
        if self.fields.current:
            params["current"] = ",".join(self.fields.current)
        if self.fields.hourly:
            params["hourly"] = ",".join(self.fields.hourly)
        if self.fields.daily:
            params["daily"] = ",".join(self.fields.daily)
        if self.units.temperature:
            params["temperature_unit"] = self.units.temperature
        if self.units.wind_speed:
            params["wind_speed_unit"] = self.units.wind_speed
        if self.units.precipitation:
            params["precipitation_unit"] = self.units.precipitation
        params.update(self.window.as_params())
        return params


class ForecastClient(BaseClient):
    """Open-Meteo forecast API client.

    The low-level getter: it sends exactly what it is asked for and returns
    the raw, unvalidated-shape ``ForecastResult``. Higher-level views live
    in ``sky.weather.client``.
    """

    base_url = FORECAST_BASE_URL

    def fetch_forecast(
        self,
        location: Coord,
        fields: RequestedFields,
        units: UnitPreferences,
        window: RangeWindow,
    ) -> ForecastResult:
        """Retrieve raw forecast data for one location.

        Args:
            location: Coordinates to forecast
            fields: Per-granularity field names to request
            units: Unit names for temperature, wind speed and precipitation
            window: Past/forecast day and hour ranges

        Returns:
            Raw ForecastResult with only the requested sections populated

        Raises:
            UpstreamError: For any transport or API failure
        """
        request = ForecastRequest(location, fields, units, window)
        logger.debug("Fetching forecast: %s", request)
        data = self._get("forecast", request.to_params())
        try:
            return ForecastResult.model_validate(data)
        except ValidationError as exc:
            logger.warning("Unexpected forecast response shape: %s", exc)
            raise ParseError(f"Failed to parse forecast response: {exc}", exc) from exc
