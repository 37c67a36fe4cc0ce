"""In-memory cache of resolved image URLs keyed by item name.

Crawling the search engine is slow and rate limited, so every resolution
(including "no image found") is kept for a fixed TTL. Names are matched
exactly: no case folding, no whitespace trimming.

There is no persistence; a process restart starts with an empty cache.
Expiry is lazy: a stale entry is removed by the ``get`` that finds it.
"""

from __future__ import annotations

import time
from threading import Lock
from typing import Callable, Dict, List, Optional

from core.logging import configure_logger
from core.schemas import CacheEntry, CacheSnapshotEntry

from ..common.constants import CACHE_TTL_SECONDS
from ..common.utils import preview

logger = configure_logger(__name__)


class ImageCache:
    def __init__(
        self,
        *,
        ttl_seconds: float = CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get(self, name: str) -> Optional[CacheEntry]:
        with self._lock:
            entry = self._entries.get(name)
            if entry is None:
                return None
            if self._clock() - entry.inserted_at > self.ttl_seconds:
                del self._entries[name]
                logger.info("[Cache Expired] %s", name)
                return None
        logger.info("[Cache Hit] %s", name)
        return entry

    def put(self, name: str, image_url: Optional[str]) -> CacheEntry:
        entry = CacheEntry(image_url=image_url, inserted_at=self._clock())
        with self._lock:
            self._entries[name] = entry
        logger.info("[Cache Saved] %s (has_image=%s)", name, entry.has_image)
        return entry

    def clear(self) -> int:
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        logger.info("[Cache Cleared] %s entries deleted", count)
        return count

    def delete(self, name: str) -> bool:
        with self._lock:
            existed = self._entries.pop(name, None) is not None
        logger.info("[Cache Deleted] %s: %s", name, "existed" if existed else "not found")
        return existed

    def snapshot(self) -> List[CacheSnapshotEntry]:
        """Diagnostic view of every entry, stale ones included; nothing is evicted."""
        now = self._clock()
        with self._lock:
            items = list(self._entries.items())
        return [
            CacheSnapshotEntry(
                name=name,
                has_image=entry.has_image,
                url_preview=preview(entry.image_url),
                age_minutes=int((now - entry.inserted_at) // 60),
            )
            for name, entry in items
        ]
