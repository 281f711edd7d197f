"""
Edge cache for upstream category HTML.

The deals service only relies on the EdgeCache get/put contract, so the
hosting environment can hand in whatever key/value store it has. Entries
carry a freshness lifetime (`max_age`, seconds) set at write time.
"""

import logging
import threading
import time
from typing import Dict, Optional, Protocol, Tuple

logger = logging.getLogger(__name__)


class EdgeCache(Protocol):
    """Key/value store with per-entry expiry."""

    def get(self, key: str) -> Optional[str]:
        ...

    def put(self, key: str, value: str, max_age: int) -> None:
        ...


class MemoryEdgeCache:
    """
    In-process EdgeCache.

    Expired entries read as misses and are dropped when touched. There is no
    stampede protection: two concurrent misses on the same key both fetch.
    """

    def __init__(self, clock=time.monotonic):
        self._clock = clock
        self._entries: Dict[str, Tuple[float, str]] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self.misses += 1
                return None

            expires_at, value = entry
            if self._clock() >= expires_at:
                del self._entries[key]
                self.misses += 1
                logger.debug("Cache entry expired: %s", key)
                return None

            self.hits += 1
            return value

    def put(self, key: str, value: str, max_age: int) -> None:
        with self._lock:
            self._entries[key] = (self._clock() + max_age, value)

    def __len__(self) -> int:
        return len(self._entries)
