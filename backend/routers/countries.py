import logging

from fastapi import APIRouter, HTTPException

from models.country import CompactCountry, CountryProfile
from services import country_service
from services.cache_service import cache

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/countries", tags=["countries"])


@router.get("", response_model=list[CompactCountry])
async def list_countries():
    try:
        countries, _ = await cache.get_or_fetch("all_countries", country_service.fetch_all_countries)
    except Exception:
        logger.exception("Failed to fetch country list")
        raise HTTPException(status_code=502, detail="Failed to fetch countries")
    return countries


@router.get("/{name}", response_model=CountryProfile)
async def get_country(name: str):
    key = name.lower().strip()
    try:
        profile, _ = await cache.get_or_fetch(
            f"country:{key}", lambda: country_service.fetch_country_profile(name)
        )
    except country_service.CountryNotFoundError:
        raise HTTPException(status_code=404, detail="Country not found")
    except Exception:
        logger.exception("Failed to fetch country %s", name)
        raise HTTPException(status_code=502, detail="Failed to fetch country")
    return profile
