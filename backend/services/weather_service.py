"""Weather service using Open-Meteo API (free, no API key required)."""

import logging

import httpx

from config import settings
from models.conditions import WeatherSnapshot
from utils.http_client import get_json

logger = logging.getLogger(__name__)

_WEATHER_URL = "https://api.open-meteo.com/v1/forecast"
_OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"

# WMO Weather interpretation codes → human-readable descriptions
_WMO_CODES = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Foggy",
    48: "Depositing rime fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    56: "Light freezing drizzle",
    57: "Dense freezing drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    66: "Light freezing rain",
    67: "Heavy freezing rain",
    71: "Slight snowfall",
    73: "Moderate snowfall",
    75: "Heavy snowfall",
    77: "Snow grains",
    80: "Slight rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    85: "Slight snow showers",
    86: "Heavy snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm with slight hail",
    99: "Thunderstorm with heavy hail",
}


def describe_weather_code(code: int | None) -> str:
    if code is None:
        return "Unknown"
    return _WMO_CODES.get(code, "Unknown")


def parse_forecast(data: dict) -> WeatherSnapshot:
    current = data.get("current", {})
    daily = data.get("daily", {})

    temp_max = [t for t in daily.get("temperature_2m_max") or [] if t is not None]
    temp_min = [t for t in daily.get("temperature_2m_min") or [] if t is not None]
    # Spread across the forecast window, 0 when no daily data came back
    temp_range = max(temp_max) - min(temp_min) if temp_max and temp_min else 0.0

    weather_code = current.get("weather_code")
    return WeatherSnapshot(
        temperature=current.get("temperature_2m"),
        apparent_temperature=current.get("apparent_temperature"),
        humidity=current.get("relative_humidity_2m"),
        weather_code=weather_code,
        wind_speed=current.get("wind_speed_10m"),
        wind_gusts=current.get("wind_gusts_10m"),
        pressure=current.get("pressure_msl"),
        temperature_range=temp_range,
        daily_max_temps=temp_max,
        daily_min_temps=temp_min,
        daily_weather_codes=[c for c in daily.get("weather_code") or [] if c is not None],
        weather_description=describe_weather_code(weather_code),
    )


def parse_openweather(data: dict) -> WeatherSnapshot:
    main = data.get("main", {})
    wind = data.get("wind", {})
    conditions = data.get("weather") or [{}]
    wind_speed = wind.get("speed")
    return WeatherSnapshot(
        temperature=main.get("temp"),
        apparent_temperature=main.get("feels_like"),
        humidity=main.get("humidity"),
        # m/s → km/h
        wind_speed=wind_speed * 3.6 if wind_speed is not None else None,
        pressure=main.get("pressure"),
        temperature_range=0.0,
        weather_description=conditions[0].get("description", "Unknown"),
    )


async def _fetch_openweather(lat: float, lng: float, country: str) -> WeatherSnapshot:
    data = await get_json(
        "OpenWeather fallback",
        _OPENWEATHER_URL,
        params={
            "lat": lat,
            "lon": lng,
            "appid": settings.openweather_api_key,
            "units": "metric",
        },
        country=country,
    )
    return parse_openweather(data)


async def fetch_weather(lat: float, lng: float, country: str = "") -> WeatherSnapshot:
    """Current conditions plus a 3-day daily outlook for a coordinate.

    Falls back to OpenWeatherMap when Open-Meteo fails and a key is configured.
    """
    try:
        data = await get_json(
            "Open-Meteo Weather",
            _WEATHER_URL,
            params={
                "latitude": lat,
                "longitude": lng,
                "current": ",".join([
                    "temperature_2m",
                    "relative_humidity_2m",
                    "apparent_temperature",
                    "weather_code",
                    "wind_speed_10m",
                    "wind_gusts_10m",
                    "pressure_msl",
                ]),
                "daily": "temperature_2m_max,temperature_2m_min,weather_code",
                "timezone": "auto",
                "forecast_days": 3,
            },
            country=country,
        )
    except httpx.HTTPError:
        if not settings.openweather_api_key:
            raise
        logger.warning("Open-Meteo failed for %s, trying OpenWeather", country)
        return await _fetch_openweather(lat, lng, country)

    return parse_forecast(data)
