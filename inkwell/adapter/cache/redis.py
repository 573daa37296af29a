"""Redis-backed post cache.

Rendered posts and feed pages are cached under keys namespaced by a
configurable prefix, e.g. ``inkwell:post:hello-world``.
"""

import fnmatch
import time

import logfire
import redis.asyncio as redis

from inkwell.adapter.error import CacheError
from inkwell.domain.service.cache_service import PostCache


class RedisPostCache(PostCache):
    """Post cache stored in Redis."""

    def __init__(self, client: redis.Redis, key_prefix: str = "inkwell") -> None:
        """Initialize Redis cache.

        Args:
            client: Async Redis client (created with decode_responses=True)
            key_prefix: Namespace prepended to every key
        """
        self.client = client
        self.key_prefix = key_prefix

    def _key(self, key: str) -> str:
        return f"{self.key_prefix}:{key}"

    async def get(self, key: str) -> str | None:
        try:
            return await self.client.get(self._key(key))
        except redis.RedisError as e:
            raise CacheError(f"Cache read failed: {e}")

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        try:
            await self.client.set(self._key(key), value, ex=ttl_seconds)
        except redis.RedisError as e:
            raise CacheError(f"Cache write failed: {e}")

    async def delete(self, key: str) -> None:
        try:
            await self.client.delete(self._key(key))
        except redis.RedisError as e:
            raise CacheError(f"Cache delete failed: {e}")

    async def delete_matching(self, pattern: str) -> int:
        # SCAN instead of KEYS so large keyspaces don't block the server
        try:
            keys = [key async for key in self.client.scan_iter(match=self._key(pattern))]
            if not keys:
                return 0
            removed = await self.client.delete(*keys)
            logfire.debug("Cache keys removed", pattern=pattern, count=removed)
            return removed
        except redis.RedisError as e:
            raise CacheError(f"Cache pattern delete failed: {e}")


class NullPostCache(PostCache):
    """Cache used when caching is disabled: every read misses."""

    async def get(self, key: str) -> str | None:
        return None

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        return None

    async def delete(self, key: str) -> None:
        return None

    async def delete_matching(self, pattern: str) -> int:
        return 0


class MockPostCache(PostCache):
    """In-process post cache for testing.

    Records every invalidated key so tests can assert on them, and can be
    switched into a failing mode to exercise best-effort handling.
    """

    def __init__(self) -> None:
        """Initialize an empty cache."""
        self._entries: dict[str, tuple[str, float]] = {}
        self.deleted_keys: list[str] = []
        self.deleted_patterns: list[str] = []
        self.fail = False

    def _check(self) -> None:
        if self.fail:
            raise CacheError("Mock cache unavailable")

    async def get(self, key: str) -> str | None:
        self._check()
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if expires_at <= time.monotonic():
            del self._entries[key]
            return None
        return value

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        self._check()
        self._entries[key] = (value, time.monotonic() + ttl_seconds)

    async def delete(self, key: str) -> None:
        self._check()
        self.deleted_keys.append(key)
        self._entries.pop(key, None)

    async def delete_matching(self, pattern: str) -> int:
        self._check()
        self.deleted_patterns.append(pattern)
        matches = [key for key in self._entries if fnmatch.fnmatchcase(key, pattern)]
        for key in matches:
            del self._entries[key]
        return len(matches)
