"""Process-wide cache backend lifecycle.

Mirrors the engine lifecycle in ``core.database``: the backend is created
once at startup and handed to request handlers through the ``get_cache``
dependency.
"""

from loguru import logger

from showcase_api.core.config import Settings
from showcase_api.lib.cache import CacheBackend, MemoryCache, RedisCache

_cache: CacheBackend | None = None


def get_cache() -> CacheBackend:
    """Return the current cache backend.

    Raises:
        RuntimeError: If the cache has not been initialized.
    """
    if _cache is None:
        msg = "Cache not initialized. Call init_cache() first."
        raise RuntimeError(msg)
    return _cache


def init_cache(settings: Settings) -> CacheBackend:
    """Create and store the cache backend selected by settings.

    Args:
        settings: Application settings.  ``cache_url`` selects Redis,
            otherwise an in-process cache is used.

    Returns:
        The created backend.
    """
    global _cache  # noqa: PLW0603
    if settings.cache_url:
        _cache = RedisCache.from_url(settings.cache_url, key_prefix=settings.cache_key_prefix)
        logger.info("Using Redis cache backend")
    else:
        _cache = MemoryCache()
        logger.info("Using in-process cache backend")
    return _cache


async def dispose_cache() -> None:
    """Close the cache backend and forget it."""
    global _cache  # noqa: PLW0603
    if _cache is not None:
        await _cache.close()
        _cache = None
