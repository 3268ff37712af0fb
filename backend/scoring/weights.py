"""Category weights derived from the user's risk tolerance and stay duration."""

from enum import Enum

from models.analysis import ScoringWeights
from scoring.normalize import round_to

_WEIGHT_FLOOR = 0.05


class RiskTolerance(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"

    @classmethod
    def parse(cls, value: str | None) -> "RiskTolerance":
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.MODERATE


class Duration(str, Enum):
    SHORT_TERM = "short-term"
    LONG_TERM = "long-term"

    @classmethod
    def parse(cls, value: str | None) -> "Duration":
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.SHORT_TERM


# (travel_risk, health_infra, env_stability)
_BASE_WEIGHTS = {
    RiskTolerance.LOW: (0.40, 0.25, 0.35),
    RiskTolerance.MODERATE: (0.30, 0.30, 0.40),
    RiskTolerance.HIGH: (0.18, 0.35, 0.47),
}

# Long stays lean on healthcare, short trips on current conditions.
_DURATION_SHIFT = {
    Duration.LONG_TERM: (-0.10, 0.15, -0.05),
    Duration.SHORT_TERM: (0.05, -0.10, 0.05),
}

assert set(_BASE_WEIGHTS) == set(RiskTolerance)
assert set(_DURATION_SHIFT) == set(Duration)


def get_weights(risk_tolerance: str | None, duration: str | None) -> ScoringWeights:
    risk = RiskTolerance.parse(risk_tolerance)
    dur = Duration.parse(duration)

    shifted = [
        max(_WEIGHT_FLOOR, base + shift)
        for base, shift in zip(_BASE_WEIGHTS[risk], _DURATION_SHIFT[dur])
    ]
    total = sum(shifted)
    travel_risk, health_infra, env_stability = (round_to(w / total, 3) for w in shifted)

    return ScoringWeights(
        travel_risk=travel_risk,
        health_infra=health_infra,
        env_stability=env_stability,
    )
