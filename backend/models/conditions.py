from pydantic import BaseModel


class WeatherSnapshot(BaseModel):
    temperature: float | None = None
    apparent_temperature: float | None = None
    humidity: float | None = None
    weather_code: int | None = None
    wind_speed: float | None = None
    wind_gusts: float | None = None
    pressure: float | None = None
    temperature_range: float | None = None
    daily_max_temps: list[float] = []
    daily_min_temps: list[float] = []
    daily_weather_codes: list[int] = []
    weather_description: str = "Unknown"

    model_config = {"frozen": True}


class AirQualitySnapshot(BaseModel):
    us_aqi: float | None = None
    pm25: float | None = None
    pm10: float | None = None
    carbon_monoxide: float | None = None
    nitrogen_dioxide: float | None = None
    sulphur_dioxide: float | None = None
    ozone: float | None = None
    aqi_category: str = "Unknown"
    aqi_color: str = "#888"

    model_config = {"frozen": True}


class HealthIndicators(BaseModel):
    """Measured World Bank indicators. Missing values fall back to region estimates."""

    life_expectancy: float | None = None
    healthcare_expenditure: float | None = None

    model_config = {"frozen": True}
