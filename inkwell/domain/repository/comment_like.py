"""Comment like repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Sequence

from inkwell.domain.model.comment_like import CommentLike
from inkwell.domain.value import CommentId, UserId


class CommentLikeRepository(ABC):
    """Repository for CommentLike entity."""

    @abstractmethod
    async def find_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[CommentLike]:
        """Find a user's like on a comment.

        Args:
            user_id: The user's ID
            comment_id: The comment's ID

        Returns:
            The like if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, like: CommentLike) -> CommentLike:
        """Save a like (create).

        Args:
            like: The like to save

        Returns:
            The saved like

        Raises:
            IntegrityError: If the user already liked the comment
        """
        pass

    @abstractmethod
    async def delete_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> bool:
        """Delete a user's like on a comment.

        Returns:
            True if a like was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def count_by_comment(self, comment_id: CommentId) -> int:
        """Count likes on a comment."""
        pass

    @abstractmethod
    async def count_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> Dict[CommentId, int]:
        """Count likes for many comments with a single grouped query.

        Comments without likes are absent from the result.

        Args:
            comment_ids: Comments to count likes for

        Returns:
            Mapping of comment ID to like count
        """
        pass
