import pytest

from models.conditions import AirQualitySnapshot, HealthIndicators, WeatherSnapshot
from scoring.env_stability import compute_env_stability
from scoring.health_infra import compute_health_infra
from scoring.travel_risk import compute_travel_risk, weather_code_penalty
from conftest import make_profile


class TestTravelRisk:

    def test_ideal_conditions_carry_no_risk(self):
        weather = WeatherSnapshot(temperature=22.5, wind_speed=0, weather_code=0)
        result = compute_travel_risk(weather, AirQualitySnapshot(us_aqi=0))
        assert result.score == 0
        assert result.factors_used == 4

    def test_contributions_are_summed(self):
        weather = WeatherSnapshot(temperature=42.5, wind_speed=20, weather_code=95)
        result = compute_travel_risk(weather, AirQualitySnapshot(us_aqi=100))
        assert result.breakdown == {
            "temperature_risk": 17.5,
            "aqi_risk": 7.0,
            "wind_risk": 3.0,
            "weather_severity": 15.0,
        }
        assert result.score == pytest.approx(42.5)

    def test_no_inputs_means_no_score(self):
        result = compute_travel_risk(None, None)
        assert result.score is None
        assert result.factors_used == 0
        assert all(v is None for v in result.breakdown.values())

    def test_weather_code_alone_is_a_factor(self):
        result = compute_travel_risk(WeatherSnapshot(weather_code=61), None)
        assert result.score == 7.5
        assert result.factors_used == 1

    def test_extremes_clamp_to_100(self):
        weather = WeatherSnapshot(temperature=100, wind_speed=250, weather_code=99)
        result = compute_travel_risk(weather, AirQualitySnapshot(us_aqi=900))
        assert result.score == 100

    @pytest.mark.parametrize("code,penalty", [
        (None, 0),
        (0, 0),
        (2, 2),
        (45, 8),
        (55, 12),
        (63, 15),
        (66, 20),
        (75, 22),
        (81, 18),
        (85, 22),
        (90, 5),
        (95, 30),
        (99, 30),
    ])
    def test_weather_code_buckets(self, code, penalty):
        assert weather_code_penalty(code) == penalty


class TestHealthInfra:

    def test_region_fallback_without_population(self):
        result = compute_health_infra(make_profile(population=0))
        # Europe: life expectancy 78 -> 80.0, proxy 85
        assert result.breakdown["life_expectancy_score"] == 80.0
        assert result.breakdown["healthcare_proxy"] == 85
        assert result.breakdown["population_pressure"] is None
        assert result.factors_used == 2
        assert result.score == pytest.approx(82.65, abs=0.01)

    def test_population_pressure_counts_when_known(self):
        result = compute_health_infra(make_profile(population=83_000_000))
        assert result.factors_used == 3
        assert 0 < result.breakdown["population_pressure"] < 50
        assert 0 <= result.score <= 100

    def test_subregion_takes_priority_over_region(self):
        result = compute_health_infra(
            make_profile(region="Africa", subregion="Western Africa", population=0)
        )
        assert result.breakdown["estimated_life_expectancy"] == 58
        assert result.breakdown["healthcare_proxy"] == 38

    def test_unknown_region_uses_default(self):
        result = compute_health_infra(
            make_profile(region="Atlantis", subregion="Unknown", population=0)
        )
        assert result.breakdown["estimated_life_expectancy"] == 70
        assert result.breakdown["healthcare_proxy"] == 55
        assert result.score is not None

    def test_measured_indicators_replace_estimates(self):
        health = HealthIndicators(life_expectancy=85, healthcare_expenditure=10)
        result = compute_health_infra(make_profile(population=0), health)
        assert result.breakdown["life_expectancy_score"] == 100
        assert result.breakdown["healthcare_proxy"] == 50
        assert result.score == pytest.approx(73.53, abs=0.01)

    def test_partial_measurements_fall_back_per_field(self):
        health = HealthIndicators(life_expectancy=None, healthcare_expenditure=20)
        result = compute_health_infra(make_profile(population=0), health)
        assert result.breakdown["estimated_life_expectancy"] == 78
        assert result.breakdown["healthcare_proxy"] == 100

    def test_missing_profile(self):
        result = compute_health_infra(None)
        assert result.score is None
        assert result.factors_used == 0


class TestEnvStability:

    def test_all_factors(self):
        weather = WeatherSnapshot(temperature_range=10, humidity=50, wind_speed=10)
        air = AirQualitySnapshot(us_aqi=50, pm25=25)
        result = compute_env_stability(weather, air)
        assert result.breakdown == {
            "weather_volatility": 75,
            "air_quality_score": 90,
            "pm25_score": 90,
            "humidity_comfort": 100,
            "wind_stability": 90,
        }
        assert result.factors_used == 5
        assert result.score == pytest.approx(87.75)

    def test_renormalizes_over_available_factors(self):
        result = compute_env_stability(None, AirQualitySnapshot(us_aqi=50))
        assert result.score == 90
        assert result.factors_used == 1

    def test_missing_values_do_not_drag_score_down(self):
        full = compute_env_stability(WeatherSnapshot(humidity=50), AirQualitySnapshot(us_aqi=0))
        assert full.score == 100

    def test_nothing_available(self):
        result = compute_env_stability(None, None)
        assert result.score is None
        assert result.factors_used == 0
