from pathlib import Path

import pytest
from pydantic import ValidationError

from sky.settings.user import UserSettings


def test_coordinates_only() -> None:
    cfg = UserSettings(lat=52.52, lon=13.41)
    assert cfg.has_coordinates is True
    assert cfg.temperature_unit == "celsius"
    assert cfg.wind_speed_unit == "kmh"
    assert cfg.precipitation_unit == "mm"
    assert cfg.timeout == 3.0


def test_location_only() -> None:
    cfg = UserSettings(location="Berlin")
    assert cfg.has_coordinates is False


def test_location_or_coordinates_required() -> None:
    with pytest.raises(ValidationError):
        UserSettings()


def test_lat_without_lon_rejected() -> None:
    with pytest.raises(ValidationError):
        UserSettings(location="Berlin", lat=52.52)


@pytest.mark.parametrize(
    "field, value",
    [
        ("temperature_unit", "kelvin"),
        ("wind_speed_unit", "knots"),
        ("precipitation_unit", "cm"),
        ("forecast_days", 17),
        ("forecast_hours", 0),
        ("timeout", 0),
    ],
)
def test_invalid_values_rejected(field: str, value: object) -> None:
    with pytest.raises(ValidationError):
        UserSettings.model_validate({"lat": 0.0, "lon": 0.0, field: value})


def test_load_yaml_with_env_interpolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SKY_TEST_PLACE", "Hamburg")
    path = tmp_path / "config.yaml"
    path.write_text(
        'location: "${SKY_TEST_PLACE}"\n'
        "temperature_unit: fahrenheit\n"
        "forecast_days: 5\n",
        encoding="utf-8",
    )

    cfg = UserSettings.load(path)

    assert cfg.location == "Hamburg"
    assert cfg.temperature_unit == "fahrenheit"
    assert cfg.forecast_days == 5


def test_load_invalid_config_raises_runtime_error(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("lat: 52.52\nwind_speed_unit: warp\n", encoding="utf-8")
    with pytest.raises(RuntimeError, match="Invalid configuration"):
        UserSettings.load(path)


def test_load_from_env_variable(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "sky.yaml"
    path.write_text("lat: 1.5\nlon: 2.5\n", encoding="utf-8")
    monkeypatch.setenv("SKY_CONFIG", str(path))

    cfg = UserSettings.load()

    assert (cfg.lat, cfg.lon) == (1.5, 2.5)


def test_load_missing_env_path(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("SKY_CONFIG", str(tmp_path / "nope.yaml"))
    with pytest.raises(FileNotFoundError):
        UserSettings.load()


def test_load_no_config_anywhere(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("SKY_CONFIG", raising=False)
    monkeypatch.setattr(UserSettings, "DEFAULT_CONFIG_PATHS", [tmp_path / "config.yaml"])
    with pytest.raises(FileNotFoundError):
        UserSettings.load()
