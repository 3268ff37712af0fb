from typing import Literal

from pydantic import BaseModel, Field

from models.conditions import AirQualitySnapshot, HealthIndicators, WeatherSnapshot
from models.context import ExchangeRates, NewsItem, WikiContext
from models.country import CountryProfile, CurrencyInfo


class ScoringWeights(BaseModel):
    travel_risk: float
    health_infra: float
    env_stability: float

    model_config = {"frozen": True}

    @property
    def total(self) -> float:
        return self.travel_risk + self.health_infra + self.env_stability


class CategoryResult(BaseModel):
    """One category score. ``score`` is None exactly when no factor was usable."""

    score: float | None = None
    breakdown: dict[str, float | None] = {}
    factors_used: int = 0

    model_config = {"frozen": True}


class CountryEntry(BaseModel):
    """Settled per-country data handed to the ranking engine."""

    country: CountryProfile
    weather: WeatherSnapshot | None = None
    air_quality: AirQualitySnapshot | None = None
    health: HealthIndicators | None = None
    wiki: WikiContext | None = None
    news: list[NewsItem] = []
    cache_status: dict[str, str] = {}
    errors: list[str] = []


class Factor(BaseModel):
    type: Literal["positive", "negative", "neutral"]
    text: str
    impact: Literal["high", "medium", "low"]
    score: float | None = None


class Reasoning(BaseModel):
    summary: str
    factors: list[Factor] = []
    weight_profile: ScoringWeights


class CategoryScores(BaseModel):
    travel_risk: CategoryResult
    health_infra: CategoryResult
    env_stability: CategoryResult


class CurrentConditions(BaseModel):
    temperature: float | None = None
    weather_description: str = "N/A"
    humidity: float | None = None
    wind_speed: float | None = None
    aqi: float | None = None
    aqi_category: str = "Unknown"
    aqi_color: str = "#888"


class CountryContext(BaseModel):
    wiki: WikiContext | None = None
    news: list[NewsItem] = []


class RankedCountry(BaseModel):
    rank: int
    country_name: str
    flag_emoji: str = ""
    flag: str = ""
    capital: str = "Unknown"
    region: str = "Unknown"
    population: int = 0
    currencies: list[CurrencyInfo] = []
    composite_score: float | None = None
    scores: CategoryScores
    current_conditions: CurrentConditions
    reasoning: Reasoning
    context: CountryContext = Field(default_factory=CountryContext)
    cache_status: dict[str, str] = {}
    has_partial_data: bool = False
    errors: list[str] = []

    model_config = {"frozen": True}


class RankingMetadata(BaseModel):
    total_countries: int
    risk_tolerance: str
    duration: str
    analyzed_at: str


class RankingResult(BaseModel):
    rankings: list[RankedCountry]
    weights: ScoringWeights
    metadata: RankingMetadata


class AnalyzeRequest(BaseModel):
    countries: list[str]
    risk_tolerance: str = "moderate"
    duration: str = "short-term"


class FailedCountry(BaseModel):
    name: str
    reason: str


class Performance(BaseModel):
    response_time_ms: int
    cache_stats: dict[str, int] = {}


class AnalyzeResponse(BaseModel):
    success: bool = True
    data: RankingResult
    failed_countries: list[FailedCountry] = []
    performance: Performance
    exchange_rates: ExchangeRates | None = None
