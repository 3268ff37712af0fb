"""Health Infrastructure score (0-100). Higher means better healthcare."""

from models.analysis import CategoryResult
from models.conditions import HealthIndicators
from models.country import CountryProfile
from scoring.aggregate import WeightedAverage
from scoring.normalize import (
    normalize_healthcare_exp,
    normalize_life_expectancy,
    normalize_population,
    round_to,
)
from scoring.regions import REGION_HEALTHCARE_PROXY, REGION_LIFE_EXPECTANCY, lookup_region

_LIFE_EXPECTANCY_WEIGHT = 0.40
_POPULATION_PRESSURE_WEIGHT = 0.15
_HEALTHCARE_PROXY_WEIGHT = 0.45

_EMPTY_BREAKDOWN = {
    "life_expectancy_score": None,
    "population_pressure": None,
    "healthcare_proxy": None,
    "estimated_life_expectancy": None,
}


def compute_health_infra(
    country: CountryProfile | None, health: HealthIndicators | None = None
) -> CategoryResult:
    if country is None:
        return CategoryResult(score=None, breakdown=dict(_EMPTY_BREAKDOWN), factors_used=0)

    measured_life_exp = health.life_expectancy if health else None
    measured_expenditure = health.healthcare_expenditure if health else None

    life_exp = measured_life_exp
    if life_exp is None:
        life_exp = lookup_region(REGION_LIFE_EXPECTANCY, country.subregion, country.region)

    population_pressure = None
    pop_norm = normalize_population(country.population)
    if pop_norm is not None:
        # More people, more pressure on the system
        population_pressure = round_to(100 - pop_norm)

    healthcare_proxy = normalize_healthcare_exp(measured_expenditure)
    if healthcare_proxy is None:
        healthcare_proxy = lookup_region(REGION_HEALTHCARE_PROXY, country.subregion, country.region)

    breakdown = {
        "life_expectancy_score": normalize_life_expectancy(life_exp),
        "population_pressure": population_pressure,
        "healthcare_proxy": float(healthcare_proxy),
        "estimated_life_expectancy": float(life_exp),
    }

    average = WeightedAverage()
    average.add(breakdown["life_expectancy_score"], _LIFE_EXPECTANCY_WEIGHT)
    average.add(breakdown["population_pressure"], _POPULATION_PRESSURE_WEIGHT)
    average.add(breakdown["healthcare_proxy"], _HEALTHCARE_PROXY_WEIGHT)

    return CategoryResult(score=average.result(), breakdown=breakdown, factors_used=average.count)
