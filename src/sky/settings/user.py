"""User-configurable settings loaded from config.yaml."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import ClassVar, Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, model_validator

# Load environment variables from .env file(s)
load_dotenv()


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


class UserSettings(BaseModel):
    """User settings for locating the forecast and choosing its units.

    A location is given either by name (geocoded at run time) or by
    explicit coordinates. Unit names are passed to Open-Meteo verbatim.
    """

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("config.yaml"),
        Path("~/.config/sky/config.yaml").expanduser(),
        Path("/etc/sky/config.yaml"),
    ]

    # Location settings
    location: str | None = Field(None, description="Place name to geocode")
    lat: float | None = Field(None, ge=-90, le=90, description="Latitude")
    lon: float | None = Field(None, ge=-180, le=180, description="Longitude")

    # Units
    temperature_unit: Literal["celsius", "fahrenheit"] = "celsius"
    wind_speed_unit: Literal["kmh", "ms", "mph", "kn"] = "kmh"
    precipitation_unit: Literal["mm", "inch"] = "mm"

    # Request settings
    timeout: float = Field(3.0, gt=0, description="HTTP request timeout (seconds)")
    forecast_days: int = Field(7, ge=1, le=16, description="Days in the daily forecast")
    forecast_hours: int = Field(24, ge=1, le=384, description="Hours in the hourly forecast")

    # Output formatting
    time_format: str = Field("%H:%M", description="Time display format (e.g. 18:04)")
    date_format: str = Field("%a %d %b", description="Date display format (e.g. Mon 03 Jan)")

    # ---- validators ----
    @model_validator(mode="after")
    def check_location(self) -> UserSettings:
        has_coords = self.lat is not None and self.lon is not None
        if not self.location and not has_coords:
            raise ValueError("either location or both lat and lon must be set")
        if (self.lat is None) != (self.lon is None):
            raise ValueError("lat and lon must be given together")
        return self

    # ---- convenience methods ----
    @property
    def has_coordinates(self) -> bool:
        """Whether explicit coordinates are configured."""
        return self.lat is not None and self.lon is not None

    @classmethod
    def load(cls, path: Path | None = None) -> UserSettings:
        """Load configuration from a YAML file.

        Args:
            path: Path to config file (optional, searches default locations if None)

        Returns:
            Validated UserSettings object

        Raises:
            FileNotFoundError: If no config file is found
            RuntimeError: If the config file cannot be parsed or is invalid
        """
        # Try to find config file
        if path is None:
            # Check environment variable first
            env_path = os.environ.get("SKY_CONFIG")
            if env_path:
                path = Path(env_path)
                if not path.exists():
                    raise FileNotFoundError(f"Config file from SKY_CONFIG not found: {path}")
            else:
                # Try default paths
                for default_path in cls.DEFAULT_CONFIG_PATHS:
                    if default_path.exists():
                        path = default_path
                        break
                else:
                    raise FileNotFoundError(
                        "No configuration file found. Create config.yaml or set SKY_CONFIG."
                    )

        # Load and parse config
        import yaml  # local import to avoid hard dep for callers

        try:
            raw = _interpolate_env(path.read_text())
            data = yaml.safe_load(raw)
        except (OSError, yaml.YAMLError) as exc:
            raise RuntimeError(f"Unable to read config YAML: {exc}") from exc

        try:
            return cls.model_validate(data or {})
        except ValidationError as err:
            raise RuntimeError(f"Invalid configuration:\n{err}") from err
