"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence

from inkwell.domain.model.comment import Comment
from inkwell.domain.value import CommentId, ModerationStatus, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID, including soft-deleted comments.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(
        self,
        post_id: PostId,
        include_deleted: bool = False,
        status: Optional[ModerationStatus] = None,
    ) -> List[Comment]:
        """Find all comments (every depth) for a post, oldest first.

        Args:
            post_id: The post ID
            include_deleted: Whether to include soft-deleted comments
            status: Only return comments with this moderation status

        Returns:
            List of comments ordered by created_at ascending
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Update the content of a live comment.

        Args:
            comment_id: Comment ID
            content: New content

        Returns:
            Updated comment, or None if missing or deleted
        """
        pass

    @abstractmethod
    async def update_moderation_status(
        self, comment_id: CommentId, status: ModerationStatus
    ) -> Optional[Comment]:
        """Set the moderation status of a live comment.

        Args:
            comment_id: Comment ID
            status: New moderation status

        Returns:
            Updated comment, or None if missing or deleted
        """
        pass

    @abstractmethod
    async def soft_delete_many(
        self, comment_ids: Sequence[CommentId], deleted_at: datetime
    ) -> int:
        """Mark the given comments deleted (skipping already-deleted ones).

        Args:
            comment_ids: Comments to delete
            deleted_at: Deletion timestamp shared by the whole batch

        Returns:
            Number of comments that were marked deleted
        """
        pass

    @abstractmethod
    async def find_recent_top_level(self, limit: int, offset: int) -> List[Comment]:
        """Find recent top-level comments for the global feed.

        Only live, non-hidden comments by active users on published,
        live posts are returned, newest first.

        Args:
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            List of comments
        """
        pass

    @abstractmethod
    async def count_recent_top_level(self) -> int:
        """Count the comments eligible for the global feed."""
        pass
