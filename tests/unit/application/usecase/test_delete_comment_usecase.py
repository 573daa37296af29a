"""Unit tests for DeleteCommentUseCase."""

import pytest

from inkwell.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    PinCommentRequest,
    PinCommentUseCase,
)
from inkwell.domain.error import NotAuthorizedError
from inkwell.domain.repository import (
    CommentRepository,
    CommenterStatsRepository,
    PostRepository,
    UserRepository,
)
from tests.conftest import make_post, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def seed(unit_env, users, post):
    user_repo = await unit_env.get(UserRepository)
    post_repo = await unit_env.get(PostRepository)
    for user in users:
        await user_repo.save(user)
    await post_repo.save(post)


async def comment_as(unit_env, user, post, parent_id=None):
    create = await unit_env.get(CreateCommentUseCase)
    return await create.execute(
        CreateCommentRequest(
            post_id=str(post.id),
            user_id=str(user.id),
            content=f"Comment by {user.username}",
            parent_id=parent_id,
        )
    )


class TestDeleteComment:
    """Tests for the delete comment flow."""

    @pytest.mark.asyncio
    async def test_cascade_walks_back_every_commenter(self, unit_env):
        """Each deleted reply is taken off its own author's ledger entry."""
        # Arrange
        use_case = await unit_env.get(DeleteCommentUseCase)
        stats_repo = await unit_env.get(CommenterStatsRepository)
        comment_repo = await unit_env.get(CommentRepository)
        author = make_user("alice")
        bob = make_user("bob")
        carol = make_user("carol")
        post = make_post(author)
        await seed(unit_env, [author, bob, carol], post)

        root = await comment_as(unit_env, bob, post)
        reply = await comment_as(unit_env, carol, post, parent_id=root.id)
        await comment_as(unit_env, bob, post, parent_id=reply.id)
        await comment_as(unit_env, author, post, parent_id=reply.id)
        await comment_as(unit_env, bob, post)

        # Act
        response = await use_case.execute(
            DeleteCommentRequest(post_id=str(post.id), comment_id=root.id, user_id=str(bob.id))
        )

        # Assert
        assert response.message == "Comment deleted successfully"
        assert response.deleted_count == 4
        assert (await stats_repo.find(author.id, bob.id)).comment_count == 1
        assert await stats_repo.find(author.id, carol.id) is None
        assert len(await comment_repo.find_by_post(post.id)) == 1

    @pytest.mark.asyncio
    async def test_deleting_pinned_comment_clears_pin(self, unit_env):
        """Removing the pinned comment leaves the post without a pin."""
        # Arrange
        use_case = await unit_env.get(DeleteCommentUseCase)
        pin = await unit_env.get(PinCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        author = make_user("alice")
        post = make_post(author)
        await seed(unit_env, [author], post)
        comment = await comment_as(unit_env, author, post)
        await pin.execute(
            PinCommentRequest(
                post_id=str(post.id),
                comment_id=comment.id,
                user_id=str(author.id),
                pinned=True,
            )
        )

        # Act
        await use_case.execute(
            DeleteCommentRequest(
                post_id=str(post.id), comment_id=comment.id, user_id=str(author.id)
            )
        )

        # Assert
        assert (await post_repo.find_by_id(post.id)).pinned_comment_id is None

    @pytest.mark.asyncio
    async def test_only_author_may_delete(self, unit_env):
        """Post authors cannot delete other users' comments."""
        # Arrange
        use_case = await unit_env.get(DeleteCommentUseCase)
        author = make_user("alice")
        bob = make_user("bob")
        post = make_post(author)
        await seed(unit_env, [author, bob], post)
        comment = await comment_as(unit_env, bob, post)

        # Act & Assert
        with pytest.raises(NotAuthorizedError, match="your own comments"):
            await use_case.execute(
                DeleteCommentRequest(
                    post_id=str(post.id), comment_id=comment.id, user_id=str(author.id)
                )
            )
