"""Unit tests for CommentService."""

import pytest

from inkwell.domain.error import (
    InvalidModerationActionError,
    NotAuthorizedError,
    NotFoundError,
    ThreadDepthExceededError,
    ValidationError,
)
from inkwell.domain.repository import CommentRepository
from inkwell.domain.service import CommentService
from inkwell.domain.value import ModerationStatus
from tests.conftest import make_comment, make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


async def build_chain(comment_service, post, author, length):
    """Create a top-level comment followed by ``length - 1`` nested replies."""
    chain = [await comment_service.create_comment(post, author.id, "Level 0")]
    for level in range(1, length):
        reply = await comment_service.create_comment(
            post, author.id, f"Level {level}", parent=chain[-1]
        )
        chain.append(reply)
    return chain


class TestThreadDepth:
    """Tests for the depth guard."""

    @pytest.mark.asyncio
    async def test_top_level_comment_has_depth_zero(self, unit_env):
        """A comment without a parent sits at depth 0."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author = make_user("alice")
        post = make_post(author)
        comment = await comment_service.create_comment(post, author.id, "Hello")

        # Act
        depth = await comment_service.get_thread_depth(comment.id)

        # Assert
        assert depth == 0

    @pytest.mark.asyncio
    async def test_depth_counts_edges_to_root(self, unit_env):
        """Each reply sits one level below its parent."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author = make_user("alice")
        post = make_post(author)
        chain = await build_chain(comment_service, post, author, 4)

        # Act
        depths = [await comment_service.get_thread_depth(c.id) for c in chain]

        # Assert
        assert depths == [0, 1, 2, 3]

    @pytest.mark.asyncio
    async def test_depth_is_capped_at_max(self, unit_env):
        """Walking stops at the cap even when the real chain is longer."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author = make_user("alice")
        post = make_post(author)

        # Build 8 levels directly, bypassing the guard
        parent = None
        for _ in range(8):
            parent = await comment_repo.save(make_comment(post, author, parent=parent))

        # Act
        depth = await comment_service.get_thread_depth(parent.id)

        # Assert
        assert depth == 5

    @pytest.mark.asyncio
    async def test_parent_cycle_terminates_at_cap(self, unit_env):
        """Corrupt parent links that loop still yield the capped depth."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author = make_user("alice")
        post = make_post(author)
        first = make_comment(post, author, "First")
        second = await comment_repo.save(
            make_comment(post, author, "Second", parent=first)
        )
        first = await comment_repo.save(
            first.model_copy(update={"parent_id": second.id})
        )

        # Act
        depth = await comment_service.get_thread_depth(first.id)

        # Assert
        assert depth == 5

    @pytest.mark.asyncio
    async def test_reply_at_depth_four_creates_depth_five(self, unit_env):
        """Replying to a depth 4 comment is allowed."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author = make_user("alice")
        post = make_post(author)
        chain = await build_chain(comment_service, post, author, 5)

        # Act
        reply = await comment_service.create_comment(
            post, author.id, "Deepest", parent=chain[-1]
        )

        # Assert
        assert await comment_service.get_thread_depth(reply.id) == 5

    @pytest.mark.asyncio
    async def test_reply_to_depth_five_is_rejected(self, unit_env):
        """Replying to a comment at the cap fails."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author = make_user("alice")
        post = make_post(author)
        chain = await build_chain(comment_service, post, author, 6)

        # Act & Assert
        with pytest.raises(ThreadDepthExceededError, match="Maximum thread depth"):
            await comment_service.create_comment(
                post, author.id, "Too deep", parent=chain[-1]
            )


class TestCreateComment:
    """Tests for create_comment and content validation."""

    @pytest.mark.asyncio
    async def test_new_comment_is_pending_and_trimmed(self, unit_env):
        """Comments start PENDING with surrounding whitespace removed."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author = make_user("alice")
        post = make_post(author)

        # Act
        comment = await comment_service.create_comment(post, author.id, "  Hi there  ")

        # Assert
        assert comment.content == "Hi there"
        assert comment.moderation_status == ModerationStatus.PENDING
        assert comment.parent_id is None
        assert await comment_repo.find_by_id(comment.id) == comment

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", ["", "   ", "x" * 5001])
    async def test_invalid_content_is_rejected(self, unit_env, content):
        """Blank and over-long content fail validation."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author = make_user("alice")
        post = make_post(author)

        # Act & Assert
        with pytest.raises(ValidationError):
            await comment_service.create_comment(post, author.id, content)

    @pytest.mark.asyncio
    async def test_comment_from_other_post_is_not_found(self, unit_env):
        """A comment is only found through the post it belongs to."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author = make_user("alice")
        post = make_post(author, "First")
        other_post = make_post(author, "Second")
        comment = await comment_service.create_comment(post, author.id, "Hello")

        # Act & Assert
        with pytest.raises(NotFoundError, match="Comment not found"):
            await comment_service.get_live_comment_in_post(other_post.id, comment.id)


class TestUpdateContent:
    """Tests for update_content."""

    @pytest.mark.asyncio
    async def test_author_can_edit(self, unit_env):
        """The author can replace the text."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author = make_user("alice")
        post = make_post(author)
        comment = await comment_service.create_comment(post, author.id, "Draft")

        # Act
        updated = await comment_service.update_content(comment, author.id, "Final")

        # Assert
        assert updated.content == "Final"
        assert updated.updated_at >= comment.updated_at

    @pytest.mark.asyncio
    async def test_other_user_cannot_edit(self, unit_env):
        """Editing someone else's comment is forbidden."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author = make_user("alice")
        intruder = make_user("mallory")
        post = make_post(author)
        comment = await comment_service.create_comment(post, author.id, "Mine")

        # Act & Assert
        with pytest.raises(NotAuthorizedError, match="your own comments"):
            await comment_service.update_content(comment, intruder.id, "Yours now")


class TestDeleteComment:
    """Tests for the soft-delete cascade."""

    @pytest.mark.asyncio
    async def test_delete_removes_whole_subtree(self, unit_env):
        """Deleting a comment also deletes every reply beneath it."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author = make_user("alice")
        replier = make_user("bob")
        post = make_post(author)

        root = await comment_service.create_comment(post, author.id, "Root")
        reply_a = await comment_service.create_comment(post, replier.id, "A", parent=root)
        await comment_service.create_comment(post, author.id, "A1", parent=reply_a)
        await comment_service.create_comment(post, replier.id, "B", parent=root)
        sibling = await comment_service.create_comment(post, author.id, "Sibling")

        # Act
        deleted = await comment_service.delete_comment(root, author.id)

        # Assert
        assert len(deleted) == 4
        assert deleted[0].id == root.id
        live = await comment_repo.find_by_post(post.id)
        assert [c.id for c in live] == [sibling.id]

        # Rows remain, marked deleted with one shared timestamp
        all_rows = await comment_repo.find_by_post(post.id, include_deleted=True)
        stamps = {c.deleted_at for c in all_rows if c.id != sibling.id}
        assert len(all_rows) == 5
        assert len(stamps) == 1 and None not in stamps

    @pytest.mark.asyncio
    async def test_only_author_can_delete(self, unit_env):
        """Deleting someone else's comment is forbidden."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author = make_user("alice")
        post = make_post(author)
        comment = await comment_service.create_comment(post, author.id, "Mine")

        # Act & Assert
        with pytest.raises(NotAuthorizedError, match="your own comments"):
            await comment_service.delete_comment(comment, make_user("bob").id)


class TestModeration:
    """Tests for moderate and get_moderation_queue."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "action,expected",
        [("approve", ModerationStatus.APPROVED), ("hide", ModerationStatus.HIDDEN)],
    )
    async def test_post_author_moderates(self, unit_env, action, expected):
        """Approve and hide map to their statuses."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author = make_user("alice")
        post = make_post(author)
        comment = await comment_service.create_comment(post, make_user("bob").id, "Hi")

        # Act
        updated = await comment_service.moderate(post, comment, author.id, action)

        # Assert
        assert updated.moderation_status == expected

    @pytest.mark.asyncio
    async def test_non_author_cannot_moderate(self, unit_env):
        """Only the post author may moderate, even with an invalid action."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author = make_user("alice")
        commenter = make_user("bob")
        post = make_post(author)
        comment = await comment_service.create_comment(post, commenter.id, "Hi")

        # Act & Assert
        with pytest.raises(NotAuthorizedError, match="Only the post author"):
            await comment_service.moderate(post, comment, commenter.id, "delete")

    @pytest.mark.asyncio
    async def test_unknown_action_is_rejected(self, unit_env):
        """Actions other than approve and hide fail validation."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author = make_user("alice")
        post = make_post(author)
        comment = await comment_service.create_comment(post, author.id, "Hi")

        # Act & Assert
        with pytest.raises(InvalidModerationActionError, match="approve"):
            await comment_service.moderate(post, comment, author.id, "delete")

    @pytest.mark.asyncio
    async def test_queue_is_newest_first_and_filterable(self, unit_env):
        """The queue lists live comments newest first, optionally by status."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author = make_user("alice")
        commenter = make_user("bob")
        post = make_post(author)
        older = await comment_repo.save(make_comment(post, commenter, minutes_ago=10))
        newer = await comment_repo.save(
            make_comment(post, commenter, status=ModerationStatus.HIDDEN, minutes_ago=1)
        )

        # Act
        everything = await comment_service.get_moderation_queue(post, author.id)
        hidden = await comment_service.get_moderation_queue(
            post, author.id, ModerationStatus.HIDDEN
        )

        # Assert
        assert [c.id for c in everything] == [newer.id, older.id]
        assert [c.id for c in hidden] == [newer.id]
