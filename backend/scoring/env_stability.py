"""Environmental Stability score (0-100). Higher means more stable."""

from models.analysis import CategoryResult
from models.conditions import AirQualitySnapshot, WeatherSnapshot
from scoring.aggregate import WeightedAverage
from scoring.normalize import (
    normalize_aqi,
    normalize_humidity,
    normalize_pm25,
    normalize_temperature_range,
    normalize_wind_speed,
)

_FACTOR_WEIGHTS = {
    "weather_volatility": 0.25,
    "air_quality_score": 0.30,
    "pm25_score": 0.15,
    "humidity_comfort": 0.15,
    "wind_stability": 0.15,
}


def compute_env_stability(
    weather: WeatherSnapshot | None, air_quality: AirQualitySnapshot | None
) -> CategoryResult:
    weather = weather or WeatherSnapshot()
    air_quality = air_quality or AirQualitySnapshot()

    breakdown = {
        "weather_volatility": normalize_temperature_range(weather.temperature_range),
        "air_quality_score": normalize_aqi(air_quality.us_aqi),
        "pm25_score": normalize_pm25(air_quality.pm25),
        "humidity_comfort": normalize_humidity(weather.humidity),
        "wind_stability": normalize_wind_speed(weather.wind_speed),
    }

    average = WeightedAverage()
    for name, weight in _FACTOR_WEIGHTS.items():
        average.add(breakdown[name], weight)

    return CategoryResult(score=average.result(), breakdown=breakdown, factors_used=average.count)
