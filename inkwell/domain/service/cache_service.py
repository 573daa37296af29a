"""Rendered-content cache domain service."""

from functools import partial

import logfire

from inkwell.domain.value import Slug

from .base import Service
from .transaction import AfterCommitHooks


class PostCache:
    """Generic key/value cache interface for rendered posts and feeds."""

    async def get(self, key: str) -> str | None:
        """Read a cached value.

        Args:
            key: Cache key (without the service prefix)

        Returns:
            Cached value, or None on a miss
        """
        raise NotImplementedError

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        """Store a value that expires after ``ttl_seconds``."""
        raise NotImplementedError

    async def delete(self, key: str) -> None:
        """Remove a single key."""
        raise NotImplementedError

    async def delete_matching(self, pattern: str) -> int:
        """Remove every key matching a glob pattern.

        Returns:
            Number of keys removed
        """
        raise NotImplementedError


POST_KEY = "post:{slug}"
RECENT_COMMENTS_PATTERN = "comments:recent:*"
RECENT_COMMENTS_KEY = "comments:recent:{page}:{limit}"


class CacheService(Service):
    """Domain service wrapping the post cache.

    Cache failures are never fatal: reads degrade to misses and
    invalidations are logged and dropped. Invalidations requested inside a
    transaction wait for its commit, so a concurrent reader cannot
    repopulate the cache with pre-commit data.
    """

    def __init__(
        self,
        post_cache: PostCache,
        recent_comments_ttl: int = 120,
        after_commit: AfterCommitHooks | None = None,
    ) -> None:
        """Initialize cache service.

        Args:
            post_cache: Cache backend
            recent_comments_ttl: Lifetime of cached recent-comment pages in seconds
            after_commit: Request transaction hooks; None invalidates immediately
        """
        self.post_cache = post_cache
        self.recent_comments_ttl = recent_comments_ttl
        self.after_commit = after_commit
        self._pending: set[str] = set()

    async def invalidate_post(self, slug: Slug) -> None:
        """Drop the cached rendering of a post and the recent-comments feed.

        Called after every comment mutation on the post. The deletion runs
        once the surrounding transaction commits.
        """
        if self.after_commit is None:
            await self._invalidate_now(slug)
            return
        if str(slug) in self._pending:
            return
        self._pending.add(str(slug))
        self.after_commit.add(partial(self._invalidate_now, slug))

    async def _invalidate_now(self, slug: Slug) -> None:
        self._pending.discard(str(slug))
        with logfire.span("cache_service.invalidate_post", slug=str(slug)):
            try:
                await self.post_cache.delete(POST_KEY.format(slug=slug))
                removed = await self.post_cache.delete_matching(
                    RECENT_COMMENTS_PATTERN
                )
                logfire.debug(
                    "Post cache invalidated", slug=str(slug), feed_pages=removed
                )
            except Exception as e:
                logfire.warn(
                    "Post cache invalidation failed", slug=str(slug), error=str(e)
                )

    async def get_recent_comments(self, page: int, limit: int) -> str | None:
        """Read a cached page of the recent-comments feed."""
        try:
            return await self.post_cache.get(
                RECENT_COMMENTS_KEY.format(page=page, limit=limit)
            )
        except Exception as e:
            logfire.warn("Recent comments cache read failed", error=str(e))
            return None

    async def store_recent_comments(self, page: int, limit: int, payload: str) -> None:
        """Cache a rendered page of the recent-comments feed."""
        try:
            await self.post_cache.set(
                RECENT_COMMENTS_KEY.format(page=page, limit=limit),
                payload,
                self.recent_comments_ttl,
            )
        except Exception as e:
            logfire.warn("Recent comments cache write failed", error=str(e))
