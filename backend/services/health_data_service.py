"""Measured health indicators from the World Bank API.

Replaces the static regional estimates whenever the World Bank has a value.
"""

import asyncio
import logging

from config import settings
from models.conditions import HealthIndicators
from utils.http_client import get_json

logger = logging.getLogger(__name__)

_INDICATOR_URL = "https://api.worldbank.org/v2/country/{code}/indicator/{indicator}"
_LIFE_EXPECTANCY = "SP.DYN.LE00.IN"
_HEALTH_EXPENDITURE = "SH.XPD.CHEX.GD.ZS"


def latest_value(payload) -> float | None:
    """World Bank responses are ``[paging, records]``; records may be null."""
    if not isinstance(payload, list) or len(payload) < 2 or not payload[1]:
        return None
    return payload[1][0].get("value")


async def _fetch_indicator(code: str, indicator: str) -> float | None:
    payload = await get_json(
        f"World Bank {indicator}",
        _INDICATOR_URL.format(code=code, indicator=indicator),
        params={"format": "json", "mrnev": 1},
        timeout=settings.enrichment_timeout_seconds,
    )
    return latest_value(payload)


async def fetch_health_indicators(cca3: str) -> HealthIndicators:
    if not cca3:
        return HealthIndicators()

    code = cca3.upper()
    life_exp, expenditure = await asyncio.gather(
        _fetch_indicator(code, _LIFE_EXPECTANCY),
        _fetch_indicator(code, _HEALTH_EXPENDITURE),
        return_exceptions=True,
    )

    if isinstance(life_exp, Exception):
        logger.warning("World Bank life expectancy unavailable for %s: %s", code, life_exp)
        life_exp = None
    if isinstance(expenditure, Exception):
        logger.warning("World Bank health expenditure unavailable for %s: %s", code, expenditure)
        expenditure = None

    return HealthIndicators(life_expectancy=life_exp, healthcare_expenditure=expenditure)
