"""Cache infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
import redis.asyncio as redis

from inkwell.adapter.cache import NullPostCache, RedisPostCache
from inkwell.config import CacheSettings
from inkwell.domain.service import PostCache
from inkwell.util.di.base import ProviderBase


class CacheProvider(ProviderBase):
    """Post cache component base."""

    __mock_component__ = "cache"


class ProdCacheProvider(CacheProvider):
    """Production cache provider using Redis."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_post_cache(
        self, cache_settings: CacheSettings
    ) -> AsyncIterator[PostCache]:
        """Provide the post cache.

        Falls back to a no-op cache when caching is disabled. The Redis
        connection pool is closed when the container closes.
        """
        if not cache_settings.enabled:
            logfire.info("Post cache disabled")
            yield NullPostCache()
            return

        client = redis.from_url(
            cache_settings.redis_url,
            max_connections=cache_settings.max_connections,
            socket_timeout=cache_settings.socket_timeout,
            socket_connect_timeout=cache_settings.socket_timeout,
            decode_responses=True,
        )
        yield RedisPostCache(client, key_prefix=cache_settings.key_prefix)
        await client.aclose()
