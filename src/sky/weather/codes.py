"""WMO weather interpretation codes as used by Open-Meteo."""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping


def _expand(groups: dict[tuple[int, ...], str]) -> Mapping[int, str]:
    return MappingProxyType({code: text for codes, text in groups.items() for code in codes})


WEATHER_CODE_DESCRIPTIONS: Final[Mapping[int, str]] = _expand(
    {
        (0,): "Clear sky",
        (1, 2, 3): "Mainly clear, partly cloudy, and overcast",
        (45, 48): "Fog and depositing rime fog",
        (51, 53, 55): "Drizzle: Light, moderate, and dense intensity",
        (56, 57): "Freezing Drizzle: Light and dense intensity",
        (61, 63, 65): "Rain: Slight, moderate and heavy intensity",
        (66, 67): "Freezing Rain: Light and heavy intensity",
        (71, 73, 75): "Snow fall: Slight, moderate, and heavy intensity",
        (77,): "Snow grains",
        (80, 81, 82): "Rain showers: Slight, moderate, and violent",
        (85, 86): "Snow showers: Slight and heavy",
        (95,): "Thunderstorm: Slight or moderate",
        (96, 99): "Thunderstorm with slight and heavy hail",
    }
)


def describe_weather_code(code: int) -> str:
    """Get the human-readable description for a weather code.

    Args:
        code: WMO weather code from the API

    Returns:
        Canonical description, or a fallback naming the unknown code
    """
    return WEATHER_CODE_DESCRIPTIONS.get(code, f"Unknown weather code: {code}")
