"""Post domain service."""

from typing import Iterable

import logfire

from inkwell.domain.error import CommentsDisabledError, NotAuthorizedError, NotFoundError
from inkwell.domain.model import Comment, Post
from inkwell.domain.repository import PostRepository
from inkwell.domain.value import CommentId, PostId, UserId

from .base import Service


class PostService(Service):
    """Domain service for the parts of a post the comment system owns.

    Post authoring happens elsewhere; here posts are looked up, and their
    comment settings and pinned comment are changed by the post author.
    """

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def get_live_post(self, post_id: PostId) -> Post:
        """Get a post that exists and has not been deleted.

        Args:
            post_id: Post ID

        Returns:
            Post

        Raises:
            NotFoundError: If the post is missing or deleted
        """
        with logfire.span("post_service.get_live_post", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post or post.deleted_at is not None:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return post

    async def get_commentable_post(self, post_id: PostId) -> Post:
        """Get a live post that accepts comments.

        Raises:
            NotFoundError: If the post is missing or deleted
            CommentsDisabledError: If the author turned comments off
        """
        post = await self.get_live_post(post_id)
        if not post.allow_comments:
            logfire.info("Comments disabled for post", post_id=str(post_id))
            raise CommentsDisabledError(str(post_id))
        return post

    async def get_posts_by_ids(self, post_ids: Iterable[PostId]) -> dict[PostId, Post]:
        """Fetch many posts in one query, keyed by ID."""
        unique_ids = list(dict.fromkeys(post_ids))
        if not unique_ids:
            return {}
        posts = await self.post_repository.find_by_ids(unique_ids)
        return {post.id: post for post in posts}

    async def set_allow_comments(
        self, post: Post, user_id: UserId, allow_comments: bool
    ) -> Post:
        """Turn comments on or off for a post.

        Raises:
            NotAuthorizedError: If the user is not the post author
        """
        with logfire.span(
            "post_service.set_allow_comments",
            post_id=str(post.id),
            user_id=str(user_id),
            allow_comments=allow_comments,
        ):
            self._require_author(
                post, user_id, "Only the post author can change comment settings"
            )

            updated = await self.post_repository.update_allow_comments(
                post.id, allow_comments
            )
            if updated is None:
                raise NotFoundError("Post", str(post.id))

            logfire.info(
                "Comment settings updated",
                post_id=str(post.id),
                allow_comments=allow_comments,
            )
            return updated

    async def pin_comment(self, post: Post, user_id: UserId, comment: Comment) -> Post:
        """Pin a comment to the top of a post, replacing any earlier pin.

        Args:
            post: Post being changed
            user_id: Acting user
            comment: Live comment of this post

        Returns:
            Updated post

        Raises:
            NotAuthorizedError: If the user is not the post author
        """
        with logfire.span(
            "post_service.pin_comment",
            post_id=str(post.id),
            comment_id=str(comment.id),
        ):
            self._require_author(post, user_id, "Only the post author can pin comments")
            return await self._set_pinned(post, comment.id)

    async def unpin_comment(self, post: Post, user_id: UserId, comment: Comment) -> Post:
        """Unpin a comment; a no-op when a different comment is pinned.

        Raises:
            NotAuthorizedError: If the user is not the post author
        """
        with logfire.span(
            "post_service.unpin_comment",
            post_id=str(post.id),
            comment_id=str(comment.id),
        ):
            self._require_author(post, user_id, "Only the post author can pin comments")
            if post.pinned_comment_id != comment.id:
                return post
            return await self._set_pinned(post, None)

    async def _set_pinned(self, post: Post, comment_id: CommentId | None) -> Post:
        updated = await self.post_repository.update_pinned_comment(post.id, comment_id)
        if updated is None:
            raise NotFoundError("Post", str(post.id))
        logfire.info(
            "Pinned comment changed",
            post_id=str(post.id),
            pinned_comment_id=str(comment_id) if comment_id else None,
        )
        return updated

    @staticmethod
    def _require_author(post: Post, user_id: UserId, message: str) -> None:
        if not post.is_authored_by(user_id):
            logfire.warn("Post author check failed", post_id=str(post.id))
            raise NotAuthorizedError(message)

    async def release_pinned_comment(
        self, post: Post, removed_ids: Iterable[CommentId]
    ) -> None:
        """Unpin the post's pinned comment if it is among ``removed_ids``."""
        if post.pinned_comment_id is None:
            return
        if post.pinned_comment_id in set(removed_ids):
            await self.post_repository.update_pinned_comment(post.id, None)
            logfire.info("Deleted comment unpinned", post_id=str(post.id))
