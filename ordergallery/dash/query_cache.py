"""
Query cache for gallery pages.

Entries are keyed by query parameters, e.g. ``("order-images", 2, 20)``. After a
mutation the whole ``"order-images"`` root is invalidated; entries are dropped,
never patched, so the next read refetches from the backend.
"""

import threading
import time
from collections.abc import Callable, Hashable
from typing import Any, Optional

from ordergallery.configs.config import settings
from ordergallery.configs.logging_init import logger

QueryKey = tuple[Hashable, ...]


class QueryCache:
    """In-memory cache with per-entry TTL and prefix invalidation."""

    def __init__(self, default_ttl: Optional[int] = None):
        self.default_ttl = (
            default_ttl if default_ttl is not None else settings.gallery.query_cache_ttl
        )
        self._memory_cache: dict[QueryKey, dict[str, Any]] = {}
        # The Flask server behind Dash is threaded
        self._lock = threading.Lock()

    def _is_expired(self, entry: dict[str, Any], now: float) -> bool:
        return now - entry["cached_at"] > entry["ttl"]

    def set(self, key: QueryKey, data: Any, ttl: Optional[int] = None) -> None:
        """Store ``data`` under ``key``, dropping every entry that has expired."""
        now = time.time()
        with self._lock:
            expired = [k for k, entry in self._memory_cache.items() if self._is_expired(entry, now)]
            for expired_key in expired:
                del self._memory_cache[expired_key]
            self._memory_cache[key] = {
                "data": data,
                "cached_at": now,
                "ttl": self.default_ttl if ttl is None else ttl,
            }

    def get(self, key: QueryKey) -> Optional[Any]:
        with self._lock:
            entry = self._memory_cache.get(key)
            if entry is None:
                return None
            if self._is_expired(entry, time.time()):
                del self._memory_cache[key]
                return None
            return entry["data"]

    def get_or_fetch(self, key: QueryKey, fetcher: Callable[[], Any]) -> Any:
        """Return the cached value for ``key``, calling ``fetcher`` on a miss.

        Fetch errors propagate and nothing is cached for the key.
        """
        cached = self.get(key)
        if cached is not None:
            logger.debug(f"Query cache hit: {key}")
            return cached

        logger.debug(f"Query cache miss: {key}")
        data = fetcher()
        self.set(key, data)
        return data

    def invalidate(self, prefix: QueryKey = ()) -> int:
        """Drop every entry whose key starts with ``prefix``; returns the count."""
        with self._lock:
            stale = [key for key in self._memory_cache if key[: len(prefix)] == prefix]
            for key in stale:
                del self._memory_cache[key]
        logger.debug(f"Query cache invalidated {len(stale)} entries under {prefix}")
        return len(stale)

    def __len__(self) -> int:
        return len(self._memory_cache)


_cache: Optional[QueryCache] = None


def get_query_cache() -> QueryCache:
    """Get the global query cache instance."""
    global _cache
    if _cache is None:
        _cache = QueryCache()
    return _cache
