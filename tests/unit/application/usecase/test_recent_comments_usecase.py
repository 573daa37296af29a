"""Unit tests for GetRecentCommentsUseCase."""

import pytest

from inkwell.application.usecase.comment import (
    GetRecentCommentsRequest,
    GetRecentCommentsUseCase,
)
from inkwell.domain.repository import CommentRepository, PostRepository, UserRepository
from inkwell.domain.service import AfterCommitHooks, CacheService, PostCache
from inkwell.domain.value import ModerationStatus
from tests.conftest import make_comment, make_post, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestRecentComments:
    """Tests for the global feed."""

    @pytest.mark.asyncio
    async def test_feed_only_shows_eligible_top_level_comments(self, unit_env):
        """Replies, hidden, deleted, unpublished and deactivated are excluded."""
        # Arrange
        use_case = await unit_env.get(GetRecentCommentsUseCase)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)

        author = make_user("alice")
        bob = make_user("bob")
        gone = make_user("ghost", deactivated=True)
        for user in (author, bob, gone):
            await user_repo.save(user)
        post = await post_repo.save(make_post(author, "Published"))
        draft = await post_repo.save(make_post(author, "Draft", published=False))

        older = await comment_repo.save(make_comment(post, bob, "Older", minutes_ago=5))
        newer = await comment_repo.save(make_comment(post, author, "Newer", minutes_ago=1))
        await comment_repo.save(make_comment(post, bob, "Reply", parent=older))
        await comment_repo.save(
            make_comment(post, bob, "Hidden", status=ModerationStatus.HIDDEN)
        )
        await comment_repo.save(make_comment(post, gone, "Ghost"))
        await comment_repo.save(make_comment(draft, bob, "On a draft"))
        deleted = await comment_repo.save(make_comment(post, bob, "Deleted"))
        await comment_repo.soft_delete_many([deleted.id], deleted.created_at)

        # Act
        response = await use_case.execute(GetRecentCommentsRequest(page=1, limit=20))

        # Assert
        assert [c.id for c in response.comments] == [str(newer.id), str(older.id)]
        assert response.comments[0].post.slug == post.slug.root
        assert response.pagination.total == 2
        assert response.pagination.total_pages == 1

    @pytest.mark.asyncio
    async def test_pages_are_cached(self, unit_env):
        """A second request for the same page is served from the cache."""
        # Arrange
        use_case = await unit_env.get(GetRecentCommentsUseCase)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        cache_service = await unit_env.get(CacheService)
        author = await user_repo.save(make_user("alice"))
        post = await post_repo.save(make_post(author))
        await comment_repo.save(make_comment(post, author, "First"))

        first = await use_case.execute(GetRecentCommentsRequest())
        await comment_repo.save(make_comment(post, author, "Second"))

        # Act
        second = await use_case.execute(GetRecentCommentsRequest())

        # Assert
        assert second == first
        assert await cache_service.get_recent_comments(1, 20) is not None

    @pytest.mark.asyncio
    async def test_invalidation_refreshes_feed(self, unit_env):
        """After a post invalidation the feed is rebuilt."""
        # Arrange
        use_case = await unit_env.get(GetRecentCommentsUseCase)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        cache_service = await unit_env.get(CacheService)
        author = await user_repo.save(make_user("alice"))
        post = await post_repo.save(make_post(author))
        await comment_repo.save(make_comment(post, author, "First"))
        await use_case.execute(GetRecentCommentsRequest())
        await comment_repo.save(make_comment(post, author, "Second"))

        # Act
        await cache_service.invalidate_post(post.slug)
        await (await unit_env.get(AfterCommitHooks)).run()
        response = await use_case.execute(GetRecentCommentsRequest())

        # Assert
        assert response.pagination.total == 2

    @pytest.mark.asyncio
    async def test_unavailable_cache_falls_back_to_store(self, unit_env):
        """Cache outages only cost the cache."""
        # Arrange
        use_case = await unit_env.get(GetRecentCommentsUseCase)
        post_cache = await unit_env.get(PostCache)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        post_cache.fail = True
        author = await user_repo.save(make_user("alice"))
        post = await post_repo.save(make_post(author))
        await comment_repo.save(make_comment(post, author))

        # Act
        response = await use_case.execute(GetRecentCommentsRequest())

        # Assert
        assert response.pagination.total == 1
