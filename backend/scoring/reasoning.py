"""Templated, deterministic explanations for a country's position."""

from models.analysis import CategoryScores, Factor, Reasoning, ScoringWeights

# (positive if score crosses this, negative if it crosses this)
_TRAVEL_RISK_LOW = 25
_TRAVEL_RISK_HIGH = 50
_HEALTH_STRONG = 75
_HEALTH_WEAK = 45
_ENV_STRONG = 75
_ENV_WEAK = 40

_SUB_FACTOR_THRESHOLD = 10
_MAX_MIDDLE_FACTORS = 3


def _classify_travel_risk(score: float) -> Factor:
    if score <= _TRAVEL_RISK_LOW:
        return Factor(type="positive", text="low travel risk", impact="high", score=score)
    if score >= _TRAVEL_RISK_HIGH:
        return Factor(type="negative", text="elevated travel risk", impact="high", score=score)
    return Factor(type="neutral", text="moderate travel risk", impact="medium", score=score)


def _classify_health(score: float) -> Factor:
    if score >= _HEALTH_STRONG:
        return Factor(type="positive", text="strong healthcare infrastructure", impact="high", score=score)
    if score <= _HEALTH_WEAK:
        return Factor(type="negative", text="limited healthcare infrastructure", impact="high", score=score)
    return Factor(type="neutral", text="adequate healthcare infrastructure", impact="medium", score=score)


def _classify_env(score: float) -> Factor:
    if score >= _ENV_STRONG:
        return Factor(type="positive", text="excellent environmental stability", impact="high", score=score)
    if score <= _ENV_WEAK:
        return Factor(type="negative", text="poor environmental conditions", impact="high", score=score)
    return Factor(type="neutral", text="moderate environmental conditions", impact="medium", score=score)


def collect_factors(scores: CategoryScores) -> list[Factor]:
    factors = []
    if scores.travel_risk.score is not None:
        factors.append(_classify_travel_risk(scores.travel_risk.score))
    if scores.health_infra.score is not None:
        factors.append(_classify_health(scores.health_infra.score))
    if scores.env_stability.score is not None:
        factors.append(_classify_env(scores.env_stability.score))

    breakdown = scores.travel_risk.breakdown
    aqi_risk = breakdown.get("aqi_risk")
    if aqi_risk is not None and aqi_risk > _SUB_FACTOR_THRESHOLD:
        factors.append(Factor(type="negative", text="high AQI contributing to travel risk", impact="medium"))
    temperature_risk = breakdown.get("temperature_risk")
    if temperature_risk is not None and temperature_risk > _SUB_FACTOR_THRESHOLD:
        factors.append(Factor(type="negative", text="temperature extremes detected", impact="medium"))

    return factors


def _framed(factor: Factor) -> str:
    if factor.type == "positive":
        return f"benefits from {factor.text}"
    if factor.type == "negative":
        return f"held back by {factor.text}"
    return f"shows {factor.text}"


def build_summary(country_name: str, rank: int, total: int, factors: list[Factor]) -> str:
    positives = [f.text for f in factors if f.type == "positive"]
    negatives = [f.text for f in factors if f.type == "negative"]

    if rank == 1:
        parts = [f"{country_name} ranks #1 out of {total} destinations."]
        if positives:
            parts.append(f"Boosted by {' and '.join(positives)}.")
        if negatives:
            parts.append(f"Minor concerns: {', '.join(negatives)}.")
    elif rank == total:
        parts = [f"{country_name} ranks last (#{rank} of {total})."]
        if negatives:
            parts.append(f"Ranked lower due to {' and '.join(negatives)}.")
        if positives:
            parts.append(f"Positives include {' and '.join(positives)}.")
    else:
        parts = [f"{country_name} ranks #{rank} of {total}."]
        framed = [_framed(f) for f in factors[:_MAX_MIDDLE_FACTORS]]
        if framed:
            parts.append("; ".join(framed) + ".")

    return " ".join(parts)


def generate_reasoning(
    country_name: str,
    rank: int,
    total: int,
    scores: CategoryScores,
    weights: ScoringWeights,
) -> Reasoning:
    factors = collect_factors(scores)
    return Reasoning(
        summary=build_summary(country_name, rank, total, factors),
        factors=factors,
        weight_profile=weights,
    )
