import pytest

from sky.weather.codes import WEATHER_CODE_DESCRIPTIONS, describe_weather_code


@pytest.mark.parametrize(
    "codes, expected",
    [
        ((0,), "Clear sky"),
        ((1, 2, 3), "Mainly clear, partly cloudy, and overcast"),
        ((45, 48), "Fog and depositing rime fog"),
        ((51, 53, 55), "Drizzle: Light, moderate, and dense intensity"),
        ((56, 57), "Freezing Drizzle: Light and dense intensity"),
        ((61, 63, 65), "Rain: Slight, moderate and heavy intensity"),
        ((66, 67), "Freezing Rain: Light and heavy intensity"),
        ((71, 73, 75), "Snow fall: Slight, moderate, and heavy intensity"),
        ((77,), "Snow grains"),
        ((80, 81, 82), "Rain showers: Slight, moderate, and violent"),
        ((85, 86), "Snow showers: Slight and heavy"),
        ((95,), "Thunderstorm: Slight or moderate"),
        ((96, 99), "Thunderstorm with slight and heavy hail"),
    ],
)
def test_known_codes(codes: tuple[int, ...], expected: str) -> None:
    for code in codes:
        assert describe_weather_code(code) == expected


@pytest.mark.parametrize("code", [4, 44, 50, 98, 100, 1000, -1])
def test_unknown_codes_embed_the_code(code: int) -> None:
    description = describe_weather_code(code)
    assert description == f"Unknown weather code: {code}"
    assert str(code) in description


def test_every_code_0_to_99_has_a_description() -> None:
    for code in range(100):
        assert describe_weather_code(code)


def test_table_is_read_only() -> None:
    assert len(WEATHER_CODE_DESCRIPTIONS) == 28
    with pytest.raises(TypeError):
        WEATHER_CODE_DESCRIPTIONS[4] = "Haze"  # type: ignore[index]
