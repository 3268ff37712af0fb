"""Country profiles from the REST Countries API (v3.1, no key required)."""

import logging
from urllib.parse import quote

import httpx

from models.country import CompactCountry, CountryProfile, CurrencyInfo
from utils.http_client import get_json

logger = logging.getLogger(__name__)

_BASE_URL = "https://restcountries.com/v3.1"

# Partial-name search ranks minor US territories ahead of the USA itself
_USA_ALIASES = {"united states", "usa", "us"}


class CountryNotFoundError(Exception):
    def __init__(self, name: str):
        super().__init__(f"Country not found: {name}")
        self.name = name


def parse_country(raw: dict, fallback_name: str = "") -> CountryProfile:
    names = raw.get("name") or {}
    currencies = [
        CurrencyInfo(code=code, name=info.get("name", ""), symbol=info.get("symbol", ""))
        for code, info in (raw.get("currencies") or {}).items()
    ]
    gini = raw.get("gini")
    capital_info = raw.get("capitalInfo") or {}
    latlng = capital_info.get("latlng") or raw.get("latlng") or [0, 0]
    flags = raw.get("flags") or {}

    return CountryProfile(
        name=names.get("common") or fallback_name,
        official_name=names.get("official", ""),
        capital=(raw.get("capital") or ["Unknown"])[0],
        population=raw.get("population") or 0,
        area=raw.get("area") or 0,
        region=raw.get("region") or "Unknown",
        subregion=raw.get("subregion") or "Unknown",
        currencies=currencies,
        languages=list((raw.get("languages") or {}).values()),
        latlng=(latlng[0], latlng[1]),
        flag=flags.get("svg") or flags.get("png") or "",
        flag_emoji=raw.get("flag", ""),
        gini=next(iter(gini.values())) if gini else None,
        timezones=raw.get("timezones") or [],
        cca2=raw.get("cca2", ""),
        cca3=raw.get("cca3", ""),
    )


async def fetch_country_profile(name: str) -> CountryProfile:
    try:
        data = await get_json(
            "REST Countries",
            f"{_BASE_URL}/name/{quote(name)}",
            params={"fullText": "false"},
            country=name,
        )
    except httpx.HTTPStatusError as e:
        if e.response.status_code == 404:
            raise CountryNotFoundError(name) from e
        raise

    if not data:
        raise CountryNotFoundError(name)

    match = data[0]
    if name.strip().lower() in _USA_ALIASES:
        match = next((c for c in data if c.get("cca3") == "USA"), match)

    return parse_country(match, fallback_name=name)


async def fetch_all_countries() -> list[CompactCountry]:
    data = await get_json(
        "REST Countries (all)",
        f"{_BASE_URL}/all",
        params={"fields": "name,cca2,cca3,flag"},
    )
    countries = [
        CompactCountry(
            name=c["name"]["common"],
            cca2=c.get("cca2", ""),
            cca3=c.get("cca3", ""),
            flag=c.get("flag", ""),
        )
        for c in data
    ]
    return sorted(countries, key=lambda c: c.name)
