"""Redis cache backend shared across API workers.

Values are stored JSON-encoded with ``SET ... EX`` so Redis enforces the
TTL.  Every key is namespaced with a prefix so ``clear`` never touches
keys owned by other applications on the same instance.
"""

import json
from typing import Any

import redis.asyncio as redis
from loguru import logger

from showcase_api.lib.cache.base import CacheBackend


class RedisCache(CacheBackend):
    """Cache backend on top of ``redis.asyncio``.

    Args:
        client: A connected ``redis.asyncio.Redis`` client with
            ``decode_responses=True``.
        key_prefix: Namespace prepended to every key.
    """

    def __init__(self, client: redis.Redis, key_prefix: str = "showcase:") -> None:
        self._client = client
        self._prefix = key_prefix

    @classmethod
    def from_url(cls, url: str, key_prefix: str = "showcase:") -> "RedisCache":
        """Create a backend from a ``redis://`` URL."""
        client = redis.from_url(
            url,
            encoding="utf-8",
            decode_responses=True,
            socket_connect_timeout=5,
            socket_timeout=5,
        )
        return cls(client, key_prefix=key_prefix)

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    async def get(self, key: str) -> Any | None:
        raw = await self._client.get(self._key(key))
        if raw is None:
            return None
        return json.loads(raw)

    async def set(self, key: str, value: Any, ttl: int) -> None:
        await self._client.set(self._key(key), json.dumps(value), ex=ttl)

    async def delete(self, *keys: str) -> None:
        if not keys:
            return
        await self._client.delete(*(self._key(k) for k in keys))

    async def clear(self) -> None:
        removed = 0
        async for key in self._client.scan_iter(match=f"{self._prefix}*"):
            await self._client.delete(key)
            removed += 1
        logger.info(f"Cleared {removed} cache keys with prefix {self._prefix!r}")

    async def close(self) -> None:
        await self._client.aclose()
