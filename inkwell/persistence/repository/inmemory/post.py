"""In-memory post repository for testing."""

from datetime import datetime, timezone
from typing import Optional, Sequence

from inkwell.domain.model.post import Post
from inkwell.domain.repository.post import PostRepository
from inkwell.domain.value import CommentId, PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_by_ids(self, post_ids: Sequence[PostId]) -> list[Post]:
        """Find many posts by ID."""
        return [self._posts[pid] for pid in post_ids if pid in self._posts]

    async def save(self, post: Post) -> Post:
        """Save or update a post."""
        self._posts[post.id] = post
        return post

    async def _update(self, post_id: PostId, **changes) -> Optional[Post]:
        post = self._posts.get(post_id)
        if post is None:
            return None
        updated = post.model_copy(
            update={**changes, "updated_at": datetime.now(timezone.utc)}
        )
        self._posts[post_id] = updated
        return updated

    async def update_allow_comments(
        self, post_id: PostId, allow_comments: bool
    ) -> Optional[Post]:
        """Enable or disable comments on a post."""
        return await self._update(post_id, allow_comments=allow_comments)

    async def update_pinned_comment(
        self, post_id: PostId, comment_id: Optional[CommentId]
    ) -> Optional[Post]:
        """Pin or unpin a comment."""
        return await self._update(post_id, pinned_comment_id=comment_id)
