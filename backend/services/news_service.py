"""Latest headlines for a country via the Google News RSS feed."""

import logging
import xml.etree.ElementTree as ET

import httpx

from config import settings
from models.context import NewsItem
from utils.http_client import get_text

logger = logging.getLogger(__name__)

_RSS_URL = "https://news.google.com/rss/search"
_MAX_ITEMS = 3


def parse_rss(xml_text: str, limit: int = _MAX_ITEMS) -> list[NewsItem]:
    root = ET.fromstring(xml_text)
    items = []
    for item in root.iter("item"):
        items.append(NewsItem(
            title=item.findtext("title") or "Untitled",
            link=item.findtext("link") or "#",
            pub_date=item.findtext("pubDate") or "",
            source=item.findtext("source") or "Google News",
        ))
        if len(items) >= limit:
            break
    return items


async def fetch_news(country: str) -> list[NewsItem]:
    if not country:
        return []

    try:
        xml_text = await get_text(
            "Google News RSS",
            _RSS_URL,
            params={"q": f'"{country}"', "hl": "en-US", "gl": "US", "ceid": "US:en"},
            timeout=settings.enrichment_timeout_seconds,
        )
        return parse_rss(xml_text)
    except (httpx.HTTPError, ET.ParseError) as e:
        logger.warning("News feed unavailable for %s: %s", country, e)
        return []
