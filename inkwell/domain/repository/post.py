"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from inkwell.domain.model.post import Post
from inkwell.domain.value import CommentId, PostId


class PostRepository(ABC):
    """Repository for Post entity.

    The comment subsystem only reads posts and updates their comment
    settings; post authoring lives elsewhere.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID, including soft-deleted posts."""
        pass

    @abstractmethod
    async def find_by_ids(self, post_ids: Sequence[PostId]) -> List[Post]:
        """Find many posts by ID (batch query)."""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        pass

    @abstractmethod
    async def update_allow_comments(
        self, post_id: PostId, allow_comments: bool
    ) -> Optional[Post]:
        """Enable or disable comments on a post.

        Returns:
            Updated post, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def update_pinned_comment(
        self, post_id: PostId, comment_id: Optional[CommentId]
    ) -> Optional[Post]:
        """Pin a comment to the top of a post (None to unpin).

        Returns:
            Updated post, or None if it doesn't exist
        """
        pass
