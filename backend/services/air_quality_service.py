"""Air quality from the Open-Meteo Air Quality API (no key required)."""

from models.conditions import AirQualitySnapshot
from utils.http_client import get_json

_AQI_URL = "https://air-quality-api.open-meteo.com/v1/air-quality"

# US EPA bands: (upper bound, category, display color)
_AQI_BANDS = [
    (50, "Good", "#00e400"),
    (100, "Moderate", "#ffff00"),
    (150, "Unhealthy for Sensitive Groups", "#ff7e00"),
    (200, "Unhealthy", "#ff0000"),
    (300, "Very Unhealthy", "#8f3f97"),
]
_HAZARDOUS = ("Hazardous", "#7e0023")
_UNKNOWN = ("Unknown", "#888")


def aqi_category(aqi: float | None) -> tuple[str, str]:
    """Return (category label, display color) for a US AQI value."""
    if aqi is None:
        return _UNKNOWN
    for upper, label, color in _AQI_BANDS:
        if aqi <= upper:
            return label, color
    return _HAZARDOUS


def parse_air_quality(data: dict) -> AirQualitySnapshot:
    current = data.get("current", {})
    us_aqi = current.get("us_aqi")
    category, color = aqi_category(us_aqi)
    return AirQualitySnapshot(
        us_aqi=us_aqi,
        pm25=current.get("pm2_5"),
        pm10=current.get("pm10"),
        carbon_monoxide=current.get("carbon_monoxide"),
        nitrogen_dioxide=current.get("nitrogen_dioxide"),
        sulphur_dioxide=current.get("sulphur_dioxide"),
        ozone=current.get("ozone"),
        aqi_category=category,
        aqi_color=color,
    )


async def fetch_air_quality(lat: float, lng: float, country: str = "") -> AirQualitySnapshot:
    data = await get_json(
        "Open-Meteo AQI",
        _AQI_URL,
        params={
            "latitude": lat,
            "longitude": lng,
            "current": "us_aqi,pm10,pm2_5,carbon_monoxide,nitrogen_dioxide,sulphur_dioxide,ozone",
            "timezone": "auto",
        },
        country=country,
    )
    return parse_air_quality(data)
