from __future__ import annotations

import logging
import time
from typing import Callable

from .keys import normalize_key
from .models import CacheEntry, CacheStats, ResolvedAlbum
from .settings import DEFAULT_TTL_MS

logger = logging.getLogger(__name__)


def _now_ms() -> float:
    return time.time() * 1000


class AlbumCache:
    """In-memory album cache keyed by normalized query, with a fixed TTL.

    Expired entries are dropped lazily when read, or in bulk by ``cleanup``.
    Nothing survives a restart.
    """

    def __init__(self, ttl_ms: int = DEFAULT_TTL_MS, clock: Callable[[], float] = _now_ms):
        self.ttl_ms = ttl_ms
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}

    @staticmethod
    def normalize_key(value: str) -> str:
        return normalize_key(value)

    def _is_expired(self, entry: CacheEntry) -> bool:
        return self._clock() - entry.timestamp >= self.ttl_ms

    def get(self, key: str) -> ResolvedAlbum | None:
        cache_key = self.normalize_key(key)
        entry = self._entries.get(cache_key)
        if entry is None:
            return None
        if self._is_expired(entry):
            del self._entries[cache_key]
            logger.debug("Cache EXPIRED for key: %s", cache_key)
            return None
        logger.debug("Cache HIT for key: %s", cache_key)
        return entry.data

    def set(self, key: str, data: ResolvedAlbum) -> None:
        cache_key = self.normalize_key(key)
        self._entries[cache_key] = CacheEntry(data=data, timestamp=self._clock())
        logger.debug("Cache SET for key: %s", cache_key)

    def delete(self, key: str) -> None:
        cache_key = self.normalize_key(key)
        if self._entries.pop(cache_key, None) is not None:
            logger.debug("Cache DELETE for key: %s", cache_key)

    def clear(self) -> int:
        removed = len(self._entries)
        self._entries.clear()
        logger.info("Cache cleared (%d entries removed)", removed)
        return removed

    def cleanup(self) -> int:
        expired = [key for key, entry in self._entries.items() if self._is_expired(entry)]
        for key in expired:
            del self._entries[key]
        if expired:
            logger.info("Cache cleanup: removed %d expired entries", len(expired))
        return len(expired)

    def stats(self) -> CacheStats:
        return CacheStats(size=len(self._entries), ttl_ms=self.ttl_ms, entries=list(self._entries))
