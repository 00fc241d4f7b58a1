"""Abstract cache backend interface and the cache-aside read helper."""

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import Any

from loguru import logger


class CacheBackend(ABC):
    """Key-value store with per-entry time-to-live.

    Values must be JSON-compatible (dicts, lists, strings, numbers, booleans)
    so that every backend can hold them.
    """

    @abstractmethod
    async def get(self, key: str) -> Any | None:
        """Return the live value for ``key``, or None on miss/expiry."""

    @abstractmethod
    async def set(self, key: str, value: Any, ttl: int) -> None:
        """Store ``value`` under ``key`` for ``ttl`` seconds."""

    @abstractmethod
    async def delete(self, *keys: str) -> None:
        """Evict the given keys.  Missing keys are ignored."""

    @abstractmethod
    async def clear(self) -> None:
        """Evict every key owned by this backend."""

    async def close(self) -> None:  # noqa: B027
        """Release backend resources."""

    async def remember(
        self,
        key: str,
        ttl: int,
        compute: Callable[[], Awaitable[Any | None]],
    ) -> Any | None:
        """Return the cached value for ``key``, computing and storing it on miss.

        A ``None`` result from ``compute`` is returned but never stored, so
        lookups that find nothing are re-queried on every call.  There is no
        lock around miss -> compute -> set; concurrent misses may both compute.

        Args:
            key: Cache key.
            ttl: Time-to-live in seconds for a freshly computed value.
            compute: Coroutine factory producing the value on miss.

        Returns:
            The cached or freshly computed value, or None.
        """
        cached = await self.get(key)
        if cached is not None:
            return cached

        logger.debug(f"Cache miss for {key}")
        value = await compute()
        if value is None:
            return None
        await self.set(key, value, ttl)
        return value
