"""In-memory comment like repository for testing."""

from collections import Counter
from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from inkwell.domain.model.comment_like import CommentLike
from inkwell.domain.repository.comment_like import CommentLikeRepository
from inkwell.domain.value import CommentId, UserId


class InMemoryCommentLikeRepository(CommentLikeRepository):
    """In-memory implementation of CommentLikeRepository for testing."""

    def __init__(self) -> None:
        self._likes: list[CommentLike] = []

    async def find_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[CommentLike]:
        """Find a user's like on a comment."""
        for like in self._likes:
            if like.user_id == user_id and like.comment_id == comment_id:
                return like
        return None

    async def save(self, like: CommentLike) -> CommentLike:
        """Save a like, enforcing one like per user and comment."""
        if await self.find_by_user_and_comment(like.user_id, like.comment_id):
            raise IntegrityError("Duplicate like", None, Exception())
        self._likes.append(like)
        return like

    async def delete_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> bool:
        """Delete a user's like on a comment."""
        before = len(self._likes)
        self._likes = [
            like
            for like in self._likes
            if not (like.user_id == user_id and like.comment_id == comment_id)
        ]
        return len(self._likes) < before

    async def count_by_comment(self, comment_id: CommentId) -> int:
        """Count likes on a comment."""
        return sum(1 for like in self._likes if like.comment_id == comment_id)

    async def count_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, int]:
        """Count likes for many comments."""
        wanted = set(comment_ids)
        return dict(
            Counter(like.comment_id for like in self._likes if like.comment_id in wanted)
        )
