"""Simplified, fully-populated weather records handed to callers.

Records are frozen once built. Values are copied verbatim from the API in
whatever units were requested; ``units`` names them.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class Record(BaseModel):
    """Immutable base for normalized output."""

    model_config = ConfigDict(frozen=True)


class Units(Record):
    """Unit labels shared by every entry of one normalization call."""

    temperature: str = ""
    wind_speed: str = ""
    precipitation: str = ""


class CurrentWeather(Record):
    """Current weather conditions."""

    observation_time: datetime
    temperature: float
    humidity: float
    apparent_temperature: float
    precipitation: float
    wind_speed: float
    weather_code: int
    weather_description: str
    is_day: int
    units: Units

    @property
    def daytime(self) -> bool:
        """Whether the API reports daylight at the observation time."""
        return self.is_day == 1


class HourlyForecast(Record):
    """One hour of the hourly forecast."""

    time: datetime
    temperature: float
    humidity: float
    apparent_temperature: float
    precipitation_probability: float
    precipitation: float
    wind_speed: float
    weather_code: int
    weather_description: str
    is_day: int
    units: Units


class DailyForecast(Record):
    """One day of the daily forecast."""

    date: datetime
    max_temperature: float
    min_temperature: float
    weather_code: int
    weather_description: str
    sunrise: datetime
    sunset: datetime
    precipitation_sum: float
    precipitation_probability: float  # mean over the day
    max_wind_speed: float
    units: Units

    @property
    def daylight_hours(self) -> float:
        """Calculate the number of daylight hours.

        Returns:
            Hours of daylight as a float
        """
        return (self.sunset - self.sunrise).total_seconds() / 3600

    @property
    def temperature_range(self) -> float:
        """Difference between max and min temperatures."""
        return self.max_temperature - self.min_temperature
