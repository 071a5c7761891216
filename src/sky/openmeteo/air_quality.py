"""Air-quality endpoint client."""

from __future__ import annotations

from typing import Final, Sequence

from pydantic import ValidationError

from .client import BaseClient
from .errors import ParseError
from .models import AirQualityResult

AIR_QUALITY_BASE_URL: Final = "https://air-quality-api.open-meteo.com/v1/"

DEFAULT_PARAMETERS: Final = ("pm10", "pm2_5")


class AirQualityClient(BaseClient):
    """Open-Meteo air-quality API client."""

    base_url = AIR_QUALITY_BASE_URL

    def get_air_quality(
        self,
        latitude: float,
        longitude: float,
        hourly_parameters: Sequence[str] | None = None,
    ) -> AirQualityResult:
        """Fetch hourly air-quality series for a location.

        Args:
            latitude: Latitude of the location
            longitude: Longitude of the location
            hourly_parameters: Pollutants to request; PM10 and PM2.5 if empty

        Returns:
            Raw AirQualityResult
        """
        params = {
            "latitude": f"{latitude:f}",
            "longitude": f"{longitude:f}",
            "hourly": ",".join(hourly_parameters or DEFAULT_PARAMETERS),
        }
        data = self._get("air-quality", params)
        try:
            return AirQualityResult.model_validate(data)
        except ValidationError as exc:
            raise ParseError(f"Failed to parse air quality response: {exc}", exc) from exc
