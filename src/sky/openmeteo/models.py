"""Typed models for Open-Meteo forecast, geocoding and air-quality responses.

Every section of the forecast response is optional, and every array inside
a section may be absent: the API only returns what was requested. Series
elements may be null (hours or days outside a variable's horizon). Shape
checks beyond "is it JSON of the right types" belong to the normalizer.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# ─────────────────────────── primitives ──────────────────────────────────────


class Coord(BaseModel):
    """Geographic coordinates (latitude, longitude)."""

    lat: float
    lon: float


class RawModel(BaseModel):
    """Base for raw API sections; unrequested extra fields are kept."""

    model_config = ConfigDict(extra="allow")


# ─────────────────────────── current ─────────────────────────────────────────


class ForecastCurrent(RawModel):
    """Current conditions: a single flat object rather than arrays."""

    time: str | None = None
    temperature_2m: float | None = None
    relative_humidity_2m: float | None = None
    apparent_temperature: float | None = None
    precipitation: float | None = None
    snowfall: float | None = None
    weather_code: int | None = None
    wind_speed_10m: float | None = None
    wind_direction_10m: float | None = None
    is_day: int | None = None


class ForecastCurrentUnits(RawModel):
    """Unit labels for the current block."""

    time: str = ""
    temperature_2m: str = ""
    relative_humidity_2m: str = ""
    apparent_temperature: str = ""
    precipitation: str = ""
    snowfall: str = ""
    weather_code: str = ""
    wind_speed_10m: str = ""
    wind_direction_10m: str = ""
    is_day: str = ""


# ─────────────────────────── hourly ──────────────────────────────────────────


class ForecastHourly(RawModel):
    """Hourly time series, parallel-indexed by ``time``."""

    time: list[str | None] | None = None
    temperature_2m: list[float | None] | None = None
    relative_humidity_2m: list[float | None] | None = None
    apparent_temperature: list[float | None] | None = None
    precipitation: list[float | None] | None = None
    precipitation_probability: list[float | None] | None = None
    weather_code: list[int | None] | None = None
    wind_speed_10m: list[float | None] | None = None
    wind_direction_10m: list[float | None] | None = None
    cloud_cover: list[float | None] | None = None
    snowfall: list[float | None] | None = None
    snow_depth: list[float | None] | None = None
    is_day: list[int | None] | None = None


class ForecastHourlyUnits(RawModel):
    """Unit labels for the hourly block."""

    time: str = ""
    temperature_2m: str = ""
    relative_humidity_2m: str = ""
    apparent_temperature: str = ""
    precipitation: str = ""
    precipitation_probability: str = ""
    weather_code: str = ""
    wind_speed_10m: str = ""
    wind_direction_10m: str = ""
    cloud_cover: str = ""
    snowfall: str = ""
    snow_depth: str = ""
    is_day: str = ""


# ─────────────────────────── daily ───────────────────────────────────────────


class ForecastDaily(RawModel):
    """Daily time series, parallel-indexed by ``time`` (bare dates)."""

    time: list[str | None] | None = None
    temperature_2m_max: list[float | None] | None = None
    temperature_2m_min: list[float | None] | None = None
    apparent_temperature_max: list[float | None] | None = None
    apparent_temperature_min: list[float | None] | None = None
    sunrise: list[str | None] | None = None
    sunset: list[str | None] | None = None
    daylight_duration: list[float | None] | None = None
    precipitation_sum: list[float | None] | None = None
    snowfall_sum: list[float | None] | None = None
    precipitation_probability_mean: list[float | None] | None = None
    weather_code: list[int | None] | None = None
    wind_speed_10m_max: list[float | None] | None = None


class ForecastDailyUnits(RawModel):
    """Unit labels for the daily block."""

    time: str = ""
    temperature_2m_max: str = ""
    temperature_2m_min: str = ""
    apparent_temperature_max: str = ""
    apparent_temperature_min: str = ""
    sunrise: str = ""
    sunset: str = ""
    daylight_duration: str = ""
    precipitation_sum: str = ""
    snowfall_sum: str = ""
    precipitation_probability_mean: str = ""
    weather_code: str = ""
    wind_speed_10m_max: str = ""


# ─────────────────────────── top-level responses ─────────────────────────────


class ForecastResult(RawModel):
    """Forecast API response container.

    Groups the optional sections (current, hourly, daily) that can be
    selectively requested via API parameters. ``timezone`` is the IANA
    name the API resolved for the location; empty means UTC.
    """

    latitude: float | None = None
    longitude: float | None = None
    generationtime_ms: float | None = None
    timezone: str = ""
    elevation: float | None = None
    current: ForecastCurrent | None = None
    current_units: ForecastCurrentUnits | None = None
    hourly: ForecastHourly | None = None
    hourly_units: ForecastHourlyUnits | None = None
    daily: ForecastDaily | None = None
    daily_units: ForecastDailyUnits | None = None


class Location(RawModel):
    """A geocoding search hit."""

    id: int
    name: str
    latitude: float
    longitude: float
    elevation: float | None = None
    timezone: str = ""
    population: int | None = None
    country_code: str = ""
    country: str = ""

    @property
    def coord(self) -> Coord:
        """Coordinates of this location."""
        return Coord(lat=self.latitude, lon=self.longitude)


class SearchResults(RawModel):
    """Geocoding search response; ``results`` is omitted when nothing matched."""

    locations: list[Location] = Field(default_factory=list, alias="results")


class AirQualityHourly(RawModel):
    """Hourly air-quality series.

    Pollen fields are only populated for European locations.
    """

    time: list[str] | None = None
    pm10: list[float | None] | None = None
    pm2_5: list[float | None] | None = None
    carbon_monoxide: list[float | None] | None = None
    nitrogen_dioxide: list[float | None] | None = None
    sulphur_dioxide: list[float | None] | None = None
    ozone: list[float | None] | None = None
    aerosol_optical_depth: list[float | None] | None = None
    dust: list[float | None] | None = None
    uv_index: list[float | None] | None = None
    alder_pollen: list[float | None] | None = None
    birch_pollen: list[float | None] | None = None
    grass_pollen: list[float | None] | None = None
    mugwort_pollen: list[float | None] | None = None
    olive_pollen: list[float | None] | None = None
    ragweed_pollen: list[float | None] | None = None


class AirQualityResult(RawModel):
    """Air-quality API response container."""

    generationtime_ms: float | None = None
    timezone: str = ""
    hourly: AirQualityHourly | None = None
    hourly_units: dict[str, str] | None = None
