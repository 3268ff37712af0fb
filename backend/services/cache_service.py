import asyncio
import logging
import time
from typing import Any, Awaitable, Callable

from config import settings

logger = logging.getLogger(__name__)


class TTLCache:
    def __init__(self, ttl: int | None = None):
        self._store: dict[str, tuple[Any, float]] = {}
        self._inflight: dict[str, asyncio.Task] = {}
        self._ttl = ttl or settings.cache_ttl_seconds

    def get(self, key: str) -> Any | None:
        if key in self._store:
            value, ts = self._store[key]
            if time.time() - ts < self._ttl:
                return value
            del self._store[key]
        return None

    def set(self, key: str, value: Any) -> None:
        self._store[key] = (value, time.time())

    def clear(self) -> None:
        self._store.clear()

    async def get_or_fetch(
        self, key: str, fetch: Callable[[], Awaitable[Any]]
    ) -> tuple[Any, str]:
        """Return ``(value, "hit" | "miss")``, fetching at most once per key.

        Concurrent callers for the same key await one shared task. Failures
        propagate to every waiter and are never stored.
        """
        cached = self.get(key)
        if cached is not None:
            logger.debug("Cache hit: %s", key)
            return cached, "hit"

        task = self._inflight.get(key)
        if task is not None:
            logger.debug("Joining in-flight request for %s", key)
            return await asyncio.shield(task), "hit"

        logger.debug("Cache miss: %s", key)
        task = asyncio.ensure_future(fetch())
        self._inflight[key] = task
        try:
            value = await task
        finally:
            self._inflight.pop(key, None)

        self.set(key, value)
        return value, "miss"

    def stats(self) -> dict[str, int]:
        return {
            "entries": len(self._store),
            "inflight_requests": len(self._inflight),
        }


cache = TTLCache()
