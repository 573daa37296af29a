"""Unit tests for the Redis post cache adapter."""

import fnmatch

import pytest
import redis.asyncio as redis

from inkwell.adapter.cache import NullPostCache, RedisPostCache
from inkwell.adapter.error import CacheError


class FakeRedis:
    """Minimal stand-in for the async Redis client calls the cache makes."""

    def __init__(self, fail: bool = False) -> None:
        self.data: dict[str, str] = {}
        self.expiry: dict[str, int] = {}
        self.fail = fail

    def _check(self) -> None:
        if self.fail:
            raise redis.ConnectionError("Connection refused")

    async def get(self, key):
        self._check()
        return self.data.get(key)

    async def set(self, key, value, ex=None):
        self._check()
        self.data[key] = value
        self.expiry[key] = ex

    async def delete(self, *keys):
        self._check()
        removed = 0
        for key in keys:
            if self.data.pop(key, None) is not None:
                removed += 1
        return removed

    async def scan_iter(self, match=None):
        self._check()
        for key in list(self.data):
            if match is None or fnmatch.fnmatchcase(key, match):
                yield key


class TestRedisPostCache:
    """Tests for RedisPostCache."""

    @pytest.mark.asyncio
    async def test_keys_are_prefixed_and_expire(self):
        """Values are stored under the prefix with their TTL."""
        # Arrange
        client = FakeRedis()
        cache = RedisPostCache(client, key_prefix="blog")

        # Act
        await cache.set("comments:recent:1:20", "payload", 120)

        # Assert
        assert client.data == {"blog:comments:recent:1:20": "payload"}
        assert client.expiry["blog:comments:recent:1:20"] == 120
        assert await cache.get("comments:recent:1:20") == "payload"

    @pytest.mark.asyncio
    async def test_delete_matching_only_touches_pattern(self):
        """Pattern deletes are scoped to the prefix and the pattern."""
        # Arrange
        client = FakeRedis()
        cache = RedisPostCache(client, key_prefix="blog")
        await cache.set("comments:recent:1:20", "a", 60)
        await cache.set("comments:recent:2:20", "b", 60)
        await cache.set("post:hello-world", "c", 60)
        client.data["other:comments:recent:1:20"] = "d"

        # Act
        removed = await cache.delete_matching("comments:recent:*")

        # Assert
        assert removed == 2
        assert set(client.data) == {"blog:post:hello-world", "other:comments:recent:1:20"}

    @pytest.mark.asyncio
    async def test_delete_matching_without_matches(self):
        """Nothing to delete returns zero."""
        cache = RedisPostCache(FakeRedis())

        assert await cache.delete_matching("comments:recent:*") == 0

    @pytest.mark.asyncio
    async def test_redis_errors_become_cache_errors(self):
        """Connection problems surface as CacheError."""
        # Arrange
        cache = RedisPostCache(FakeRedis(fail=True))

        # Act & Assert
        with pytest.raises(CacheError, match="Cache read failed"):
            await cache.get("post:hello-world")
        with pytest.raises(CacheError, match="Cache delete failed"):
            await cache.delete("post:hello-world")


class TestNullPostCache:
    """Tests for NullPostCache."""

    @pytest.mark.asyncio
    async def test_everything_misses(self):
        """With caching disabled nothing is ever stored."""
        # Arrange
        cache = NullPostCache()

        # Act
        await cache.set("post:hello-world", "value", 60)

        # Assert
        assert await cache.get("post:hello-world") is None
        assert await cache.delete_matching("*") == 0
