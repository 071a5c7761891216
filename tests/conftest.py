import json
from pathlib import Path
from typing import Any

import pytest

from sky.openmeteo.forecast import RangeWindow, RequestedFields, UnitPreferences
from sky.openmeteo.models import Coord, ForecastResult

DATA_DIR = Path(__file__).parent / "data"


class FakeFetcher:
    """In-memory ForecastFetcher that records each call."""

    def __init__(
        self, result: ForecastResult | None = None, error: Exception | None = None
    ) -> None:
        self.result = result
        self.error = error
        self.calls: list[dict[str, Any]] = []

    def fetch_forecast(
        self,
        location: Coord,
        fields: RequestedFields,
        units: UnitPreferences,
        window: RangeWindow,
    ) -> ForecastResult:
        self.calls.append(
            {"location": location, "fields": fields, "units": units, "window": window}
        )
        if self.error is not None:
            raise self.error
        assert self.result is not None
        return self.result


@pytest.fixture
def forecast_json() -> dict[str, Any]:
    return json.loads((DATA_DIR / "forecast_sample.json").read_text(encoding="utf-8"))


@pytest.fixture
def forecast_result(forecast_json: dict[str, Any]) -> ForecastResult:
    return ForecastResult.model_validate(forecast_json)


@pytest.fixture
def daily_payload() -> dict[str, Any]:
    """Two days with every daily field the daily view needs, in UTC."""
    return {
        "timezone": "UTC",
        "daily_units": {
            "temperature_2m_max": "°C",
            "wind_speed_10m_max": "km/h",
            "precipitation_sum": "mm",
        },
        "daily": {
            "time": ["2023-01-01", "2023-01-02"],
            "temperature_2m_max": [12.0, 13.0],
            "temperature_2m_min": [2.0, 3.0],
            "sunrise": ["2023-01-01T07:00:00Z", "2023-01-02T07:01:00Z"],
            "sunset": ["2023-01-01T17:00:00Z", "2023-01-02T17:01:00Z"],
            "precipitation_sum": [0.1, 0.2],
            "precipitation_probability_mean": [10.0, 20.0],
            "weather_code": [3, 1],
            "wind_speed_10m_max": [15.0, 16.0],
        },
    }
