"""Comment like domain service."""

from typing import Iterable
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from inkwell.domain.error import ConflictError, NotLikedError
from inkwell.domain.model import Comment, CommentLike
from inkwell.domain.repository import CommentLikeRepository
from inkwell.domain.value import CommentId, CommentLikeId, UserId

from .base import Service


class CommentLikeService(Service):
    """Domain service for liking comments.

    Like counts are always recounted from the like rows.
    """

    def __init__(self, like_repository: CommentLikeRepository) -> None:
        """Initialize comment like service.

        Args:
            like_repository: Comment like repository
        """
        self.like_repository = like_repository

    async def like(self, comment: Comment, user_id: UserId) -> int:
        """Like a comment.

        Args:
            comment: Live comment
            user_id: Liking user

        Returns:
            Like count after the like

        Raises:
            ConflictError: If the user already liked the comment
        """
        with logfire.span(
            "comment_like_service.like",
            comment_id=str(comment.id),
            user_id=str(user_id),
        ):
            existing = await self.like_repository.find_by_user_and_comment(
                user_id, comment.id
            )
            if existing:
                logfire.warn(
                    "Duplicate like", comment_id=str(comment.id), user_id=str(user_id)
                )
                raise ConflictError("You have already liked this comment")

            like = CommentLike(
                id=CommentLikeId(uuid4()), user_id=user_id, comment_id=comment.id
            )
            try:
                await self.like_repository.save(like)
            except IntegrityError:
                # Lost a race with a concurrent like by the same user
                raise ConflictError("You have already liked this comment")

            count = await self.like_repository.count_by_comment(comment.id)
            logfire.info("Comment liked", comment_id=str(comment.id), like_count=count)
            return count

    async def unlike(self, comment: Comment, user_id: UserId) -> int:
        """Remove a like from a comment.

        Returns:
            Like count after the removal

        Raises:
            NotLikedError: If the user had not liked the comment
        """
        with logfire.span(
            "comment_like_service.unlike",
            comment_id=str(comment.id),
            user_id=str(user_id),
        ):
            removed = await self.like_repository.delete_by_user_and_comment(
                user_id, comment.id
            )
            if not removed:
                raise NotLikedError()

            count = await self.like_repository.count_by_comment(comment.id)
            logfire.info(
                "Comment unliked", comment_id=str(comment.id), like_count=count
            )
            return count

    async def count_likes(self, comment_id: CommentId) -> int:
        """Count the likes on one comment."""
        return await self.like_repository.count_by_comment(comment_id)

    async def count_likes_for_comments(
        self, comment_ids: Iterable[CommentId]
    ) -> dict[CommentId, int]:
        """Count likes for many comments with one grouped query.

        Every requested comment is present in the result, zero when unliked.
        """
        ids = list(dict.fromkeys(comment_ids))
        if not ids:
            return {}
        counts = await self.like_repository.count_by_comments(ids)
        return {cid: counts.get(cid, 0) for cid in ids}
