import logging
import time

import httpx

from config import settings

logger = logging.getLogger(__name__)

_client: httpx.AsyncClient | None = None


def get_client() -> httpx.AsyncClient:
    global _client
    if _client is None:
        _client = httpx.AsyncClient(
            timeout=settings.http_timeout_seconds,
            headers={"User-Agent": settings.user_agent},
            limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
            follow_redirects=True,
        )
    return _client


async def close_client():
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None


async def get_json(api_name: str, url: str, params: dict | None = None,
                   timeout: float | None = None, **context):
    """GET a JSON document, logging the call's duration and outcome.

    Raises httpx.HTTPStatusError on non-2xx responses.
    """
    client = get_client()
    start = time.perf_counter()
    try:
        kwargs = {"params": params}
        if timeout is not None:
            kwargs["timeout"] = timeout
        response = await client.get(url, **kwargs)
        response.raise_for_status()
    except httpx.HTTPError as e:
        logger.warning(
            "%s call failed after %.0fms: %s %s",
            api_name, (time.perf_counter() - start) * 1000, e, context or "",
        )
        raise

    logger.info(
        "%s call ok in %.0fms %s",
        api_name, (time.perf_counter() - start) * 1000, context or "",
    )
    return response.json()


async def get_text(api_name: str, url: str, params: dict | None = None,
                   timeout: float | None = None) -> str:
    client = get_client()
    start = time.perf_counter()
    kwargs = {"params": params}
    if timeout is not None:
        kwargs["timeout"] = timeout
    response = await client.get(url, **kwargs)
    response.raise_for_status()
    logger.info("%s call ok in %.0fms", api_name, (time.perf_counter() - start) * 1000)
    return response.text
