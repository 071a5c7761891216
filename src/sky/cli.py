"""Sky command-line interface.

This module provides the terminal front end: current conditions, hourly
and daily forecasts, geocoding search, air quality, and configuration
utilities.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Final

import typer
from pydantic import ValidationError

from sky.openmeteo.air_quality import AirQualityClient
from sky.openmeteo.errors import UpstreamError
from sky.openmeteo.search import GeocodingClient
from sky.settings.user import UserSettings
from sky.utils.formatting import format_amount, format_percentage, format_temperature
from sky.utils.time import TimeUtils
from sky.weather.client import WeatherClient
from sky.weather.errors import WeatherDataError

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Open-Meteo weather in the terminal", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "sky.cli"

# Shared options
CONFIG_OPTION = typer.Option(None, "--config", "-c", exists=True, dir_okay=False)
LOCATION_OPTION = typer.Option(None, "--location", "-l", help="Place name to geocode")
LAT_OPTION = typer.Option(None, "--lat", help="Latitude (use with --lon)")
LON_OPTION = typer.Option(None, "--lon", help="Longitude (use with --lat)")
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
DAYS_OPTION = typer.Option(None, "--days", "-d", help="Days to forecast (1-16)")
HOURS_OPTION = typer.Option(None, "--hours", "-H", help="Hours to forecast (1-384)")
STRICT_OPTION = typer.Option(False, "--strict", help="Reject out-of-range counts")


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def _fail(exc: Exception) -> typer.Exit:
    typer.secho(str(exc), fg=typer.colors.RED, err=True)
    return typer.Exit(code=1)


def _load_settings(
    config: Path | None, location: str | None, lat: float | None, lon: float | None
) -> UserSettings:
    """Merge the config file (if any) with command-line location overrides."""
    overrides: dict[str, Any] = {}
    if location:
        overrides = {"location": location, "lat": None, "lon": None}
    elif lat is not None or lon is not None:
        overrides = {"location": None, "lat": lat, "lon": lon}

    try:
        try:
            settings = UserSettings.load(config)
        except FileNotFoundError:
            if not overrides:
                raise
            return UserSettings.model_validate(overrides)
        if overrides:
            settings = UserSettings.model_validate({**settings.model_dump(), **overrides})
        return settings
    except (FileNotFoundError, RuntimeError, ValidationError) as exc:
        raise _fail(exc) from exc


def _resolve_coordinates(settings: UserSettings) -> tuple[float, float, str]:
    """Return (lat, lon, label), geocoding the configured place name if needed."""
    if settings.lat is not None and settings.lon is not None:
        return settings.lat, settings.lon, f"{settings.lat:.2f}, {settings.lon:.2f}"

    place = GeocodingClient(timeout=settings.timeout).search(settings.location or "")
    label = f"{place.name}, {place.country}" if place.country else place.name
    logger.debug("Geocoded %r to %.4f, %.4f", settings.location, place.latitude, place.longitude)
    return place.latitude, place.longitude, label


@app.command()
def current(
    config: Path | None = CONFIG_OPTION,
    location: str | None = LOCATION_OPTION,
    lat: float | None = LAT_OPTION,
    lon: float | None = LON_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Show the current weather conditions."""
    _configure_logging(debug)
    settings = _load_settings(config, location, lat, lon)
    try:
        latitude, longitude, label = _resolve_coordinates(settings)
        weather = WeatherClient.from_settings(settings).get_current_weather(latitude, longitude)
    except (UpstreamError, WeatherDataError) as exc:
        raise _fail(exc) from exc

    units = weather.units
    observed = TimeUtils.format_datetime(weather.observation_time, settings.time_format)
    typer.echo(f"{label} at {observed}")
    typer.echo(f"  {weather.weather_description}")
    typer.echo(
        f"  {format_temperature(weather.temperature, units.temperature)}"
        f" (feels like {format_temperature(weather.apparent_temperature, units.temperature)})"
    )
    typer.echo(f"  Humidity: {format_percentage(weather.humidity)}")
    typer.echo(f"  Wind: {format_amount(weather.wind_speed, units.wind_speed)}")
    typer.echo(f"  Precipitation: {format_amount(weather.precipitation, units.precipitation)}")


@app.command()
def hourly(
    config: Path | None = CONFIG_OPTION,
    location: str | None = LOCATION_OPTION,
    lat: float | None = LAT_OPTION,
    lon: float | None = LON_OPTION,
    hours: int | None = HOURS_OPTION,
    strict: bool = STRICT_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Show the hourly forecast."""
    _configure_logging(debug)
    settings = _load_settings(config, location, lat, lon)
    client = WeatherClient.from_settings(settings)
    client.strict = strict
    try:
        latitude, longitude, label = _resolve_coordinates(settings)
        forecast = client.get_hourly_forecast(
            latitude, longitude, hours if hours is not None else settings.forecast_hours
        )
    except (UpstreamError, WeatherDataError) as exc:
        raise _fail(exc) from exc

    typer.echo(label)
    for entry in forecast:
        typer.echo(
            f"  {TimeUtils.format_datetime(entry.time, settings.time_format)}"
            f"  {format_temperature(entry.temperature, entry.units.temperature):>6}"
            f"  {format_percentage(entry.precipitation_probability):>4}"
            f"  {entry.weather_description}"
        )


@app.command()
def daily(
    config: Path | None = CONFIG_OPTION,
    location: str | None = LOCATION_OPTION,
    lat: float | None = LAT_OPTION,
    lon: float | None = LON_OPTION,
    days: int | None = DAYS_OPTION,
    strict: bool = STRICT_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Show the daily forecast."""
    _configure_logging(debug)
    settings = _load_settings(config, location, lat, lon)
    client = WeatherClient.from_settings(settings)
    client.strict = strict
    try:
        latitude, longitude, label = _resolve_coordinates(settings)
        forecast = client.get_daily_forecast(
            latitude, longitude, days if days is not None else settings.forecast_days
        )
    except (UpstreamError, WeatherDataError) as exc:
        raise _fail(exc) from exc

    typer.echo(label)
    for day in forecast:
        temp_unit = day.units.temperature
        typer.echo(
            f"  {TimeUtils.format_datetime(day.date, settings.date_format)}"
            f"  {format_temperature(day.min_temperature, temp_unit)}"
            f" / {format_temperature(day.max_temperature, temp_unit)}"
            f"  {format_percentage(day.precipitation_probability):>4}"
            f"  daylight {TimeUtils.get_time_difference_string(day.sunrise, day.sunset)}"
            f"  {day.weather_description}"
        )


@app.command()
def search(name: str, timeout: float = typer.Option(3.0, help="Request timeout (s)")) -> None:
    """Look up a place name and print its coordinates."""
    try:
        place = GeocodingClient(timeout=timeout).search(name)
    except UpstreamError as exc:
        raise _fail(exc) from exc

    typer.echo(f"{place.name}, {place.country} ({place.country_code})")
    typer.echo(f"  lat={place.latitude} lon={place.longitude} tz={place.timezone or 'n/a'}")


@app.command("air-quality")
def air_quality(
    config: Path | None = CONFIG_OPTION,
    location: str | None = LOCATION_OPTION,
    lat: float | None = LAT_OPTION,
    lon: float | None = LON_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Show PM10 and PM2.5 for the first hour of the air-quality series."""
    _configure_logging(debug)
    settings = _load_settings(config, location, lat, lon)
    try:
        latitude, longitude, label = _resolve_coordinates(settings)
        result = AirQualityClient(timeout=settings.timeout).get_air_quality(latitude, longitude)
    except UpstreamError as exc:
        raise _fail(exc) from exc

    series = result.hourly
    if series is None or not series.time:
        raise _fail(RuntimeError(f"No air quality data returned for {label}"))

    units = result.hourly_units or {}
    typer.echo(f"{label} at {series.time[0]}")
    for name in ("pm10", "pm2_5"):
        values = getattr(series, name) or []
        value = values[0] if values else None
        shown = "n/a" if value is None else format_amount(value, units.get(name, ""))
        typer.echo(f"  {name}: {shown}")


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path):
    """Validate a YAML config file against the schema."""
    try:
        UserSettings.load(file)
        typer.echo("✅ Config valid")
    except (FileNotFoundError, RuntimeError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


def main() -> None:
    """Console-script entrypoint."""
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    main()
