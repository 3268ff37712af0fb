"""Fetch everything the ranking engine needs, concurrently and through the cache."""

import asyncio
import logging
import time

from models.analysis import (
    AnalyzeResponse,
    CountryEntry,
    FailedCountry,
    Performance,
)
from scoring.ranker import rank_countries
from services import (
    air_quality_service,
    country_service,
    exchange_service,
    health_data_service,
    news_service,
    weather_service,
    wiki_service,
)
from services.cache_service import cache

logger = logging.getLogger(__name__)


class NoCountriesResolvedError(Exception):
    def __init__(self, failed: list[FailedCountry]):
        super().__init__("None of the specified countries could be found")
        self.failed = failed


def unique_names(countries: list[str]) -> list[str]:
    """Strip and de-duplicate, keeping first-seen order."""
    seen = []
    for name in countries:
        name = name.strip()
        if name and name not in seen:
            seen.append(name)
    return seen


async def fetch_country_bundle(name: str) -> tuple[CountryEntry | None, list[str]]:
    """Fetch profile first (for coordinates), then the rest concurrently.

    Returns ``(None, errors)`` when the profile itself could not be fetched.
    """
    key = name.lower().strip()
    errors: list[str] = []
    cache_status = {s: "miss" for s in ("country", "weather", "aqi", "health", "wiki", "news")}

    try:
        profile, cache_status["country"] = await cache.get_or_fetch(
            f"country:{key}", lambda: country_service.fetch_country_profile(name)
        )
    except Exception as e:
        logger.warning("Partial failure for %s: REST Countries (%s)", name, e)
        return None, [f"REST Countries: {e}"]

    lat, lng = profile.latlng
    sources = {
        "weather": ("Open-Meteo Weather", lambda: weather_service.fetch_weather(lat, lng, name)),
        "aqi": ("Open-Meteo AQI", lambda: air_quality_service.fetch_air_quality(lat, lng, name)),
        "health": ("World Bank Health", lambda: health_data_service.fetch_health_indicators(profile.cca3)),
        "wiki": ("Wikipedia Context", lambda: wiki_service.fetch_wiki_context(name)),
        "news": ("News", lambda: news_service.fetch_news(name)),
    }
    results = await asyncio.gather(
        *(cache.get_or_fetch(f"{source}:{key}", fetch) for source, (_, fetch) in sources.items()),
        return_exceptions=True,
    )

    data = {}
    for (source, (api_name, _)), result in zip(sources.items(), results):
        if isinstance(result, Exception):
            logger.warning("Partial failure for %s: %s (%s)", name, api_name, result)
            errors.append(f"{api_name}: {result}")
            data[source] = None
        else:
            data[source], cache_status[source] = result

    entry = CountryEntry(
        country=profile,
        weather=data["weather"],
        air_quality=data["aqi"],
        health=data["health"],
        wiki=data["wiki"],
        news=data["news"] or [],
        cache_status=cache_status,
        errors=errors,
    )
    return entry, errors


async def _exchange_rates():
    try:
        rates, _ = await cache.get_or_fetch("exchange_rates", exchange_service.fetch_exchange_rates)
        return rates
    except Exception as e:
        logger.error("Failed to fetch exchange rates: %s", e)
        return None


async def run_analysis(countries: list[str], risk_tolerance: str, duration: str) -> AnalyzeResponse:
    start = time.perf_counter()
    names = unique_names(countries)
    logger.info(
        "Starting analysis for %d countries (risk=%s, duration=%s)",
        len(names), risk_tolerance, duration,
    )

    bundles, exchange_rates = await asyncio.gather(
        asyncio.gather(*(fetch_country_bundle(n) for n in names)),
        _exchange_rates(),
    )

    entries: list[CountryEntry] = []
    failed: list[FailedCountry] = []
    for name, (entry, errors) in zip(names, bundles):
        if entry is None:
            failed.append(FailedCountry(name=name, reason=errors[0] if errors else "Country not found"))
        else:
            entries.append(entry)

    if not entries:
        raise NoCountriesResolvedError(failed)

    result = rank_countries(entries, risk_tolerance, duration)

    elapsed_ms = round((time.perf_counter() - start) * 1000)
    logger.info(
        "Analysis completed in %dms (%d ranked, %d failed)",
        elapsed_ms, len(entries), len(failed),
    )

    return AnalyzeResponse(
        data=result,
        failed_countries=failed,
        performance=Performance(response_time_ms=elapsed_ms, cache_stats=cache.stats()),
        exchange_rates=exchange_rates,
    )
