"""Cache library -- pluggable TTL key-value backends with a cache-aside helper."""

from showcase_api.lib.cache.base import CacheBackend
from showcase_api.lib.cache.memory import MemoryCache
from showcase_api.lib.cache.redis_backend import RedisCache

__all__ = [
    "CacheBackend",
    "MemoryCache",
    "RedisCache",
]
