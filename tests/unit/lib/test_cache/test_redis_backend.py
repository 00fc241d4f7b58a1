"""Unit tests for the Redis cache backend with a mocked client."""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from showcase_api.lib.cache import RedisCache


@pytest.fixture
def client() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def cache(client: AsyncMock) -> RedisCache:
    return RedisCache(client, key_prefix="test:")


class TestRedisCache:
    """Tests for RedisCache."""

    async def test_get_miss(self, cache: RedisCache, client: AsyncMock) -> None:
        client.get.return_value = None
        assert await cache.get("principles.active") is None
        client.get.assert_awaited_once_with("test:principles.active")

    async def test_get_decodes_json(self, cache: RedisCache, client: AsyncMock) -> None:
        client.get.return_value = json.dumps({"total": 2, "active": 1})
        assert await cache.get("team.stats") == {"total": 2, "active": 1}

    async def test_set_uses_expiry(self, cache: RedisCache, client: AsyncMock) -> None:
        await cache.set("awards.active", [{"id": 1}], ttl=3600)
        client.set.assert_awaited_once_with("test:awards.active", '[{"id": 1}]', ex=3600)

    async def test_delete_prefixes_keys(self, cache: RedisCache, client: AsyncMock) -> None:
        await cache.delete("awards.active", "awards.featured")
        client.delete.assert_awaited_once_with("test:awards.active", "test:awards.featured")

    async def test_delete_nothing_skips_call(self, cache: RedisCache, client: AsyncMock) -> None:
        await cache.delete()
        client.delete.assert_not_awaited()

    async def test_clear_scans_prefix(self, cache: RedisCache, client: AsyncMock) -> None:
        async def _scan(match: str):
            assert match == "test:*"
            for key in ("test:a", "test:b"):
                yield key

        client.scan_iter = MagicMock(side_effect=_scan)
        await cache.clear()
        assert client.delete.await_count == 2

    async def test_remember_round_trip(self, cache: RedisCache, client: AsyncMock) -> None:
        client.get.return_value = None
        compute = AsyncMock(return_value={"total": 0})
        assert await cache.remember("principles.stats", 1800, compute) == {"total": 0}
        client.set.assert_awaited_once_with("test:principles.stats", '{"total": 0}', ex=1800)

    async def test_close(self, cache: RedisCache, client: AsyncMock) -> None:
        await cache.close()
        client.aclose.assert_awaited_once()

    def test_from_url(self) -> None:
        with patch("showcase_api.lib.cache.redis_backend.redis.from_url") as mock_from_url:
            cache = RedisCache.from_url("redis://localhost:6379/0", key_prefix="site:")
        mock_from_url.assert_called_once()
        assert mock_from_url.call_args.kwargs["decode_responses"] is True
        assert cache._key("x") == "site:x"
