import pytest

from models.analysis import CategoryResult, CategoryScores, Factor
from scoring.reasoning import build_summary, collect_factors, generate_reasoning
from scoring.weights import get_weights


def _scores(travel=None, health=None, env=None, aqi_risk=None, temperature_risk=None):
    return CategoryScores(
        travel_risk=CategoryResult(
            score=travel,
            breakdown={"aqi_risk": aqi_risk, "temperature_risk": temperature_risk},
            factors_used=0 if travel is None else 1,
        ),
        health_infra=CategoryResult(score=health, factors_used=0 if health is None else 1),
        env_stability=CategoryResult(score=env, factors_used=0 if env is None else 1),
    )


def _types(factors: list[Factor]) -> list[str]:
    return [f.type for f in factors]


class TestCollectFactors:

    @pytest.mark.parametrize("score,expected", [
        (0, "positive"),
        (25, "positive"),
        (25.01, "neutral"),
        (49.99, "neutral"),
        (50, "negative"),
        (90, "negative"),
    ])
    def test_travel_risk_thresholds(self, score, expected):
        assert _types(collect_factors(_scores(travel=score))) == [expected]

    @pytest.mark.parametrize("score,expected", [
        (75, "positive"),
        (74.99, "neutral"),
        (45.01, "neutral"),
        (45, "negative"),
    ])
    def test_health_thresholds(self, score, expected):
        assert _types(collect_factors(_scores(health=score))) == [expected]

    @pytest.mark.parametrize("score,expected", [
        (75, "positive"),
        (40.01, "neutral"),
        (40, "negative"),
    ])
    def test_env_thresholds(self, score, expected):
        assert _types(collect_factors(_scores(env=score))) == [expected]

    def test_sub_factor_callouts(self):
        factors = collect_factors(_scores(travel=30, aqi_risk=12.5, temperature_risk=10.5))
        texts = [f.text for f in factors]
        assert "high AQI contributing to travel risk" in texts
        assert "temperature extremes detected" in texts

    def test_sub_factors_at_threshold_are_quiet(self):
        factors = collect_factors(_scores(travel=30, aqi_risk=10, temperature_risk=10))
        assert len(factors) == 1

    def test_missing_categories_produce_no_factors(self):
        assert collect_factors(_scores()) == []


class TestSummary:

    def test_first_place_emphasizes_strengths(self):
        factors = collect_factors(_scores(travel=10, health=80, env=35))
        summary = build_summary("Norway", 1, 3, factors)
        assert summary == (
            "Norway ranks #1 out of 3 destinations. "
            "Boosted by low travel risk and strong healthcare infrastructure. "
            "Minor concerns: poor environmental conditions."
        )

    def test_last_place_emphasizes_weaknesses(self):
        factors = collect_factors(_scores(travel=60, health=80, env=35))
        summary = build_summary("Mars", 3, 3, factors)
        assert summary == (
            "Mars ranks last (#3 of 3). "
            "Ranked lower due to elevated travel risk and poor environmental conditions. "
            "Positives include strong healthcare infrastructure."
        )

    def test_middle_lists_up_to_three_factors(self):
        factors = collect_factors(
            _scores(travel=10, health=60, env=30, aqi_risk=15, temperature_risk=12)
        )
        summary = build_summary("Peru", 2, 4, factors)
        assert summary == (
            "Peru ranks #2 of 4. benefits from low travel risk; "
            "shows adequate healthcare infrastructure; "
            "held back by poor environmental conditions."
        )

    def test_middle_without_factors(self):
        assert build_summary("Nauru", 2, 3, []) == "Nauru ranks #2 of 3."

    def test_single_country_uses_first_place_template(self):
        summary = build_summary("Fiji", 1, 1, [])
        assert summary == "Fiji ranks #1 out of 1 destinations."

    def test_reasoning_is_deterministic(self):
        scores = _scores(travel=40, health=70, env=80)
        weights = get_weights("high", "long-term")
        first = generate_reasoning("Chile", 2, 5, scores, weights)
        second = generate_reasoning("Chile", 2, 5, scores, weights)
        assert first == second
        assert first.weight_profile == weights
