"""Unit tests for CacheService."""

import pytest

from inkwell.domain.service import AfterCommitHooks, CacheService, PostCache
from inkwell.domain.value import Slug
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestInvalidatePost:
    """Tests for invalidate_post."""

    @pytest.mark.asyncio
    async def test_drops_post_and_feed_pages(self, unit_env):
        """The post key and every cached feed page are removed."""
        # Arrange
        cache_service = await unit_env.get(CacheService)
        post_cache = await unit_env.get(PostCache)
        await cache_service.store_recent_comments(1, 20, '{"page": 1}')
        await cache_service.store_recent_comments(2, 20, '{"page": 2}')

        # Act
        await cache_service.invalidate_post(Slug("hello-world"))
        await (await unit_env.get(AfterCommitHooks)).run()

        # Assert
        assert post_cache.deleted_keys == ["post:hello-world"]
        assert post_cache.deleted_patterns == ["comments:recent:*"]
        assert await cache_service.get_recent_comments(1, 20) is None
        assert await cache_service.get_recent_comments(2, 20) is None

    @pytest.mark.asyncio
    async def test_failures_are_swallowed(self, unit_env):
        """An unreachable cache never breaks the caller."""
        # Arrange
        cache_service = await unit_env.get(CacheService)
        post_cache = await unit_env.get(PostCache)
        post_cache.fail = True

        # Act
        await cache_service.invalidate_post(Slug("hello-world"))
        await (await unit_env.get(AfterCommitHooks)).run()
        await cache_service.store_recent_comments(1, 20, "{}")
        cached = await cache_service.get_recent_comments(1, 20)

        # Assert
        assert cached is None

    @pytest.mark.asyncio
    async def test_waits_for_commit(self, unit_env):
        """Nothing is deleted until the transaction's hooks run."""
        # Arrange
        cache_service = await unit_env.get(CacheService)
        post_cache = await unit_env.get(PostCache)
        after_commit = await unit_env.get(AfterCommitHooks)
        await cache_service.store_recent_comments(1, 20, "{}")

        # Act
        await cache_service.invalidate_post(Slug("hello-world"))
        await cache_service.invalidate_post(Slug("hello-world"))

        # Assert
        assert post_cache.deleted_keys == []
        assert await cache_service.get_recent_comments(1, 20) == "{}"
        await after_commit.run()
        assert post_cache.deleted_keys == ["post:hello-world"]

    @pytest.mark.asyncio
    async def test_without_transaction_deletes_immediately(self, unit_env):
        """A service with no transaction hooks invalidates inline."""
        # Arrange
        post_cache = await unit_env.get(PostCache)
        cache_service = CacheService(post_cache=post_cache)

        # Act
        await cache_service.invalidate_post(Slug("hello-world"))

        # Assert
        assert post_cache.deleted_keys == ["post:hello-world"]


class TestRecentComments:
    """Tests for the feed page cache."""

    @pytest.mark.asyncio
    async def test_pages_are_keyed_by_page_and_limit(self, unit_env):
        """Different page sizes are cached separately."""
        # Arrange
        cache_service = await unit_env.get(CacheService)

        # Act
        await cache_service.store_recent_comments(1, 20, "twenty")
        await cache_service.store_recent_comments(1, 50, "fifty")

        # Assert
        assert await cache_service.get_recent_comments(1, 20) == "twenty"
        assert await cache_service.get_recent_comments(1, 50) == "fifty"
        assert await cache_service.get_recent_comments(2, 20) is None
