"""Map raw metrics onto a 0-100 comfort/quality scale.

Every function here is pure and total: it returns None only when its input is
missing (None or NaN) and a clamped, 2-decimal value otherwise.
"""

import math

_TEMP_COMFORT_CENTER = 22.5
_TEMP_MAX_DEVIATION = 40.0

_HUMIDITY_COMFORT_LOW = 40.0
_HUMIDITY_COMFORT_HIGH = 60.0
_HUMIDITY_MAX_DEVIATION = 60.0

# log10(10_000) .. log10(~1.4 billion)
_LOG_POP_MIN = 4.0
_LOG_POP_MAX = 9.15


def round_to(value: float, places: int = 2) -> float:
    """Round half up, so 0.125 -> 0.13 rather than banker's rounding."""
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def _missing(value) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def min_max_normalize(
    value: float | None, min_value: float, max_value: float, invert: bool = False
) -> float | None:
    """Linear min-max scaling to [0, 100], optionally inverted."""
    if _missing(value):
        return None
    normalized = (value - min_value) / (max_value - min_value) * 100
    if invert:
        normalized = 100 - normalized
    return round_to(clamp(normalized, 0, 100))


def normalize_temperature(temp: float | None) -> float | None:
    """100 at 22.5°C, falling linearly to 0 at ±40°C from it."""
    if _missing(temp):
        return None
    deviation = abs(temp - _TEMP_COMFORT_CENTER)
    score = max(0.0, 100 - deviation / _TEMP_MAX_DEVIATION * 100)
    return round_to(score)


def normalize_aqi(aqi: float | None) -> float | None:
    return min_max_normalize(aqi, 0, 500, invert=True)


def normalize_pm25(pm25: float | None) -> float | None:
    return min_max_normalize(pm25, 0, 250, invert=True)


def normalize_life_expectancy(life_exp: float | None) -> float | None:
    return min_max_normalize(life_exp, 50, 85)


def normalize_healthcare_exp(expenditure: float | None) -> float | None:
    """Healthcare expenditure as % of GDP, 0-20."""
    return min_max_normalize(expenditure, 0, 20)


def normalize_population(population: float | None) -> float | None:
    """Population pressure on a log scale. 100 = most populous."""
    if _missing(population) or population <= 0:
        return None
    return min_max_normalize(math.log10(population), _LOG_POP_MIN, _LOG_POP_MAX)


def normalize_wind_speed(wind_speed: float | None) -> float | None:
    """km/h, 100 = calm."""
    return min_max_normalize(wind_speed, 0, 100, invert=True)


def normalize_humidity(humidity: float | None) -> float | None:
    """100 anywhere inside the 40-60% band, 0 at 60 points outside it."""
    if _missing(humidity):
        return None
    deviation = 0.0
    if humidity < _HUMIDITY_COMFORT_LOW:
        deviation = _HUMIDITY_COMFORT_LOW - humidity
    elif humidity > _HUMIDITY_COMFORT_HIGH:
        deviation = humidity - _HUMIDITY_COMFORT_HIGH
    score = max(0.0, 100 - deviation / _HUMIDITY_MAX_DEVIATION * 100)
    return round_to(score)


def normalize_temperature_range(temp_range: float | None) -> float | None:
    """Daily temperature spread as a volatility signal. 100 = stable."""
    return min_max_normalize(temp_range, 0, 40, invert=True)
