"""Composite scoring and ranking across countries.

Pure and synchronous: takes already-fetched CountryEntry records and returns a
RankingResult. Nothing here touches the network.
"""

import logging
from datetime import datetime, timezone

from models.analysis import (
    CategoryScores,
    CountryContext,
    CountryEntry,
    CurrentConditions,
    RankedCountry,
    RankingMetadata,
    RankingResult,
    ScoringWeights,
)
from scoring.aggregate import WeightedAverage
from scoring.env_stability import compute_env_stability
from scoring.health_infra import compute_health_infra
from scoring.reasoning import generate_reasoning
from scoring.travel_risk import compute_travel_risk
from scoring.weights import Duration, RiskTolerance, get_weights

logger = logging.getLogger(__name__)


def score_entry(entry: CountryEntry) -> CategoryScores:
    return CategoryScores(
        travel_risk=compute_travel_risk(entry.weather, entry.air_quality),
        health_infra=compute_health_infra(entry.country, entry.health),
        env_stability=compute_env_stability(entry.weather, entry.air_quality),
    )


def composite_score(scores: CategoryScores, weights: ScoringWeights) -> float | None:
    """Weighted mean of the available categories. Travel risk is inverted first."""
    safety = None
    if scores.travel_risk.score is not None:
        safety = 100 - scores.travel_risk.score

    average = WeightedAverage()
    average.add(safety, weights.travel_risk)
    average.add(scores.health_infra.score, weights.health_infra)
    average.add(scores.env_stability.score, weights.env_stability)
    return average.result()


def _sort_key(item: tuple[CountryEntry, CategoryScores, float | None]):
    entry, _, composite = item
    # None composites go last; equal scores fall back to name order
    return (composite is None, -(composite or 0.0), entry.country.name)


def _current_conditions(entry: CountryEntry) -> CurrentConditions:
    weather = entry.weather
    air_quality = entry.air_quality
    return CurrentConditions(
        temperature=weather.temperature if weather else None,
        weather_description=weather.weather_description if weather else "N/A",
        humidity=weather.humidity if weather else None,
        wind_speed=weather.wind_speed if weather else None,
        aqi=air_quality.us_aqi if air_quality else None,
        aqi_category=air_quality.aqi_category if air_quality else "Unknown",
        aqi_color=air_quality.aqi_color if air_quality else "#888",
    )


def rank_countries(
    entries: list[CountryEntry], risk_tolerance: str | None, duration: str | None
) -> RankingResult:
    if entries is None:
        raise TypeError("entries must be a list of CountryEntry, got None")

    risk = RiskTolerance.parse(risk_tolerance)
    dur = Duration.parse(duration)
    weights = get_weights(risk.value, dur.value)

    scored = []
    for entry in entries:
        scores = score_entry(entry)
        composite = composite_score(scores, weights)
        logger.info(
            "Scored %s: travel_risk=%s health_infra=%s env_stability=%s composite=%s",
            entry.country.name,
            scores.travel_risk.score,
            scores.health_infra.score,
            scores.env_stability.score,
            composite,
        )
        scored.append((entry, scores, composite))

    scored.sort(key=_sort_key)

    total = len(scored)
    rankings = []
    for index, (entry, scores, composite) in enumerate(scored):
        rank = index + 1
        country = entry.country
        rankings.append(RankedCountry(
            rank=rank,
            country_name=country.name,
            flag_emoji=country.flag_emoji,
            flag=country.flag,
            capital=country.capital,
            region=country.region,
            population=country.population,
            currencies=country.currencies,
            composite_score=composite,
            scores=scores,
            current_conditions=_current_conditions(entry),
            reasoning=generate_reasoning(country.name, rank, total, scores, weights),
            context=CountryContext(wiki=entry.wiki, news=entry.news),
            cache_status=entry.cache_status,
            has_partial_data=bool(entry.errors),
            errors=entry.errors,
        ))

    return RankingResult(
        rankings=rankings,
        weights=weights,
        metadata=RankingMetadata(
            total_countries=total,
            risk_tolerance=risk.value,
            duration=dur.value,
            analyzed_at=datetime.now(timezone.utc).isoformat(),
        ),
    )
