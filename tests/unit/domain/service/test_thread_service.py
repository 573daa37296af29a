"""Unit tests for ThreadService (comment tree assembly)."""

import pytest

from inkwell.domain.repository import CommentRepository, UserRepository
from inkwell.domain.service import (
    CommentLikeService,
    CommenterStatsService,
    ThreadService,
    count_nodes,
)
from inkwell.domain.value import ModerationStatus
from tests.conftest import make_comment, make_post, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def save_users(unit_env, *users):
    user_repo = await unit_env.get(UserRepository)
    for user in users:
        await user_repo.save(user)


class TestBuildThread:
    """Tests for build_thread."""

    @pytest.mark.asyncio
    async def test_nested_replies_for_anonymous_viewer(self, unit_env):
        """C1 with reply R1, which has reply R2, renders as one chain."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        comment_repo = await unit_env.get(CommentRepository)
        author = make_user("alice")
        bob = make_user("bob")
        await save_users(unit_env, author, bob)
        post = make_post(author)

        c1 = await comment_repo.save(make_comment(post, bob, "C1", minutes_ago=3))
        r1 = await comment_repo.save(
            make_comment(post, author, "R1", parent=c1, minutes_ago=2)
        )
        r2 = await comment_repo.save(
            make_comment(post, bob, "R2", parent=r1, minutes_ago=1)
        )

        # Act
        roots = await thread_service.build_thread(post)

        # Assert
        assert [n.comment.id for n in roots] == [c1.id]
        assert [n.comment.id for n in roots[0].replies] == [r1.id]
        assert [n.comment.id for n in roots[0].replies[0].replies] == [r2.id]
        assert roots[0].author.username.root == "bob"
        assert count_nodes(roots) == 3

    @pytest.mark.asyncio
    async def test_hidden_comments_only_visible_to_post_author(self, unit_env):
        """HIDDEN comments and their replies are withheld from other viewers."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        comment_repo = await unit_env.get(CommentRepository)
        author = make_user("alice")
        bob = make_user("bob")
        await save_users(unit_env, author, bob)
        post = make_post(author)

        visible = await comment_repo.save(make_comment(post, bob, minutes_ago=3))
        hidden = await comment_repo.save(
            make_comment(post, bob, status=ModerationStatus.HIDDEN, minutes_ago=2)
        )
        await comment_repo.save(make_comment(post, author, parent=hidden, minutes_ago=1))

        # Act
        as_anonymous = await thread_service.build_thread(post)
        as_commenter = await thread_service.build_thread(post, viewer_id=bob.id)
        as_author = await thread_service.build_thread(post, viewer_id=author.id)

        # Assert
        assert [n.comment.id for n in as_anonymous] == [visible.id]
        assert [n.comment.id for n in as_commenter] == [visible.id]
        assert [n.comment.id for n in as_author] == [visible.id, hidden.id]
        assert count_nodes(as_author) == 3

    @pytest.mark.asyncio
    async def test_deactivated_authors_are_dropped_with_replies(self, unit_env):
        """Comments by deactivated users vanish along with their subtree."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        comment_repo = await unit_env.get(CommentRepository)
        author = make_user("alice")
        gone = make_user("ghost", deactivated=True)
        await save_users(unit_env, author, gone)
        post = make_post(author)

        ghost_comment = await comment_repo.save(make_comment(post, gone, minutes_ago=2))
        await comment_repo.save(
            make_comment(post, author, parent=ghost_comment, minutes_ago=1)
        )

        # Act
        roots = await thread_service.build_thread(post, viewer_id=author.id)

        # Assert
        assert roots == []

    @pytest.mark.asyncio
    async def test_soft_deleted_subtree_is_gone(self, unit_env):
        """Deleted comments are not part of the tree."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        comment_repo = await unit_env.get(CommentRepository)
        author = make_user("alice")
        await save_users(unit_env, author)
        post = make_post(author)
        kept = await comment_repo.save(make_comment(post, author, minutes_ago=2))
        removed = await comment_repo.save(make_comment(post, author, minutes_ago=1))
        await comment_repo.soft_delete_many([removed.id], removed.created_at)

        # Act
        roots = await thread_service.build_thread(post)

        # Assert
        assert [n.comment.id for n in roots] == [kept.id]

    @pytest.mark.asyncio
    async def test_nodes_carry_likes_and_top_commenter_flag(self, unit_env):
        """Like counts and ledger standing are attached to every node."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        comment_repo = await unit_env.get(CommentRepository)
        like_service = await unit_env.get(CommentLikeService)
        stats_service = await unit_env.get(CommenterStatsService)
        author = make_user("alice")
        fan = make_user("bob")
        await save_users(unit_env, author, fan)
        post = make_post(author)

        fan_comment = await comment_repo.save(make_comment(post, fan, minutes_ago=2))
        own_comment = await comment_repo.save(make_comment(post, author, minutes_ago=1))
        await like_service.like(fan_comment, author.id)
        for _ in range(5):
            await stats_service.record_comment(fan.id, author.id)

        # Act
        roots = await thread_service.build_thread(post)

        # Assert
        by_id = {n.comment.id: n for n in roots}
        assert by_id[fan_comment.id].like_count == 1
        assert by_id[fan_comment.id].is_top_commenter is True
        assert by_id[own_comment.id].like_count == 0
        assert by_id[own_comment.id].is_top_commenter is False

    @pytest.mark.asyncio
    async def test_tree_stops_at_depth_cap(self, unit_env):
        """Replies below the cap are not rendered."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        comment_repo = await unit_env.get(CommentRepository)
        author = make_user("alice")
        await save_users(unit_env, author)
        post = make_post(author)

        parent = None
        for level in range(7):
            parent = await comment_repo.save(
                make_comment(post, author, f"Level {level}", parent=parent)
            )

        # Act
        roots = await thread_service.build_thread(post)

        # Assert: levels 0 through 5 are shown
        assert count_nodes(roots) == 6
