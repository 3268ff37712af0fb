"""Short cultural/historical context from the Wikipedia REST API."""

import logging
from urllib.parse import quote

import httpx

from config import settings
from models.context import WikiContext
from utils.http_client import get_json

logger = logging.getLogger(__name__)

_SUMMARY_URL = "https://en.wikipedia.org/api/rest_v1/page/summary/{slug}"


def first_sentences(text: str, count: int = 2) -> str:
    return ". ".join(text.split(". ")[:count]).rstrip(".") + "."


async def fetch_wiki_context(country: str) -> WikiContext:
    if not country:
        return WikiContext()

    slug = quote(country.replace(" ", "_"))
    try:
        data = await get_json(
            "Wikipedia",
            _SUMMARY_URL.format(slug=slug),
            timeout=settings.enrichment_timeout_seconds,
        )
    except httpx.HTTPError as e:
        # Disambiguation pages ("Georgia") are common; context is optional
        logger.warning("Wikipedia summary unavailable for %s: %s", country, e)
        return WikiContext()

    extract = data.get("extract")
    if not extract:
        return WikiContext()

    page_url = (data.get("content_urls") or {}).get("desktop", {}).get("page")
    return WikiContext(
        extract=first_sentences(extract),
        url=page_url or f"https://en.wikipedia.org/wiki/{slug}",
    )
