import pytest

from models.analysis import CountryEntry
from models.conditions import AirQualitySnapshot, WeatherSnapshot
from models.country import CountryProfile, CurrencyInfo
from services.cache_service import cache


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    cache._inflight.clear()
    yield
    cache.clear()


def make_profile(name="Portugal", region="Europe", subregion="Southern Europe",
                 population=10_300_000, cca3="PRT") -> CountryProfile:
    return CountryProfile(
        name=name,
        capital="Lisbon",
        population=population,
        region=region,
        subregion=subregion,
        currencies=[CurrencyInfo(code="EUR", name="Euro", symbol="€")],
        latlng=(38.72, -9.13),
        cca3=cca3,
    )


def mild_weather() -> WeatherSnapshot:
    return WeatherSnapshot(
        temperature=21.0,
        humidity=55,
        weather_code=1,
        wind_speed=12.0,
        temperature_range=9.0,
        weather_description="Mainly clear",
    )


def clean_air() -> AirQualitySnapshot:
    return AirQualitySnapshot(us_aqi=32, pm25=6.5, aqi_category="Good", aqi_color="#00e400")


@pytest.fixture()
def complete_entry() -> CountryEntry:
    return CountryEntry(
        country=make_profile(),
        weather=mild_weather(),
        air_quality=clean_air(),
    )


@pytest.fixture()
def profile_only_entry() -> CountryEntry:
    return CountryEntry(
        country=make_profile(name="Chad", region="Africa", subregion="Middle Africa",
                             population=17_700_000, cca3="TCD"),
        errors=["Open-Meteo Weather: timeout", "Open-Meteo AQI: timeout"],
    )
