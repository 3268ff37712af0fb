"""Travel Risk score (0-100). Higher means riskier."""

from models.analysis import CategoryResult
from models.conditions import AirQualitySnapshot, WeatherSnapshot
from scoring.normalize import (
    clamp,
    normalize_aqi,
    normalize_temperature,
    normalize_wind_speed,
    round_to,
)

_TEMPERATURE_WEIGHT = 0.35
_AQI_WEIGHT = 0.35
_WIND_WEIGHT = 0.15
_WEATHER_CODE_SCALE = 0.5

# Upper bound of each WMO code bucket -> severity penalty (0-30)
_WMO_PENALTIES = [
    (0, 0),    # clear
    (3, 2),    # cloudy
    (48, 8),   # fog
    (57, 12),  # drizzle, freezing drizzle
    (65, 15),  # rain
    (67, 20),  # freezing rain
    (77, 22),  # snow
    (82, 18),  # rain showers
    (86, 22),  # snow showers
]
_THUNDERSTORM_CODE = 95
_THUNDERSTORM_PENALTY = 30
_UNLISTED_PENALTY = 5


def weather_code_penalty(code: int | None) -> int:
    if code is None:
        return 0
    if code >= _THUNDERSTORM_CODE:
        return _THUNDERSTORM_PENALTY
    for upper, penalty in _WMO_PENALTIES:
        if code <= upper:
            return penalty
    return _UNLISTED_PENALTY


def _inverted_penalty(comfort: float | None, weight: float) -> float | None:
    if comfort is None:
        return None
    return round_to((100 - comfort) * weight)


def compute_travel_risk(
    weather: WeatherSnapshot | None, air_quality: AirQualitySnapshot | None
) -> CategoryResult:
    """Sum the individual risk contributions into one penalty.

    Contributions are additive rather than averaged: a missing factor adds
    nothing. The total is clamped to [0, 100].
    """
    temperature = weather.temperature if weather else None
    wind_speed = weather.wind_speed if weather else None
    weather_code = weather.weather_code if weather else None
    us_aqi = air_quality.us_aqi if air_quality else None

    breakdown = {
        "temperature_risk": _inverted_penalty(normalize_temperature(temperature), _TEMPERATURE_WEIGHT),
        "aqi_risk": _inverted_penalty(normalize_aqi(us_aqi), _AQI_WEIGHT),
        "wind_risk": _inverted_penalty(normalize_wind_speed(wind_speed), _WIND_WEIGHT),
        "weather_severity": None,
    }
    if weather_code is not None:
        breakdown["weather_severity"] = weather_code_penalty(weather_code) * _WEATHER_CODE_SCALE

    contributions = [v for v in breakdown.values() if v is not None]
    if not contributions:
        return CategoryResult(score=None, breakdown=breakdown, factors_used=0)

    score = round_to(clamp(sum(contributions), 0, 100))
    return CategoryResult(score=score, breakdown=breakdown, factors_used=len(contributions))
