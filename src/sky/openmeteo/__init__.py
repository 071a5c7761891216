"""Open-Meteo package - HTTP clients, raw response models, and custom errors."""

from .air_quality import AirQualityClient
from .errors import (
    ClientError,
    LocationNotFoundError,
    NetworkError,
    NotFoundError,
    ParseError,
    RateLimitError,
    ServerError,
    UpstreamError,
)
from .forecast import ForecastClient, RangeWindow, RequestedFields, UnitPreferences
from .models import AirQualityResult, Coord, ForecastResult, Location
from .search import GeocodingClient

__all__ = [
    "AirQualityClient",
    "AirQualityResult",
    "ClientError",
    "Coord",
    "ForecastClient",
    "ForecastResult",
    "GeocodingClient",
    "Location",
    "LocationNotFoundError",
    "NetworkError",
    "NotFoundError",
    "ParseError",
    "RangeWindow",
    "RateLimitError",
    "RequestedFields",
    "ServerError",
    "UnitPreferences",
    "UpstreamError",
]
