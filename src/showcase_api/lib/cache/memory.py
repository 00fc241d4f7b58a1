"""In-process TTL cache backend.

Used when no shared cache URL is configured and throughout the test suite.
Entries live in a dict guarded by a lock; expiry is checked lazily on read.
"""

import threading
import time
from collections.abc import Callable
from typing import Any

from showcase_api.lib.cache.base import CacheBackend


class MemoryCache(CacheBackend):
    """TTL-based in-memory cache.

    Args:
        clock: Monotonic time source in seconds.  Injectable so tests can
            advance time without sleeping.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[str, tuple[Any, float]] = {}
        self._lock = threading.Lock()

    async def get(self, key: str) -> Any | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if self._clock() >= expires_at:
                del self._entries[key]
                return None
            return value

    async def set(self, key: str, value: Any, ttl: int) -> None:
        with self._lock:
            self._entries[key] = (value, self._clock() + ttl)

    async def delete(self, *keys: str) -> None:
        with self._lock:
            for key in keys:
                self._entries.pop(key, None)

    async def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def has(self, key: str) -> bool:
        """Return True if ``key`` holds a live entry."""
        with self._lock:
            entry = self._entries.get(key)
            return entry is not None and self._clock() < entry[1]
