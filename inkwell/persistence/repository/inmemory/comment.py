"""In-memory comment repository for testing."""

from datetime import datetime, timezone
from typing import Optional, Sequence

from inkwell.domain.model.comment import Comment
from inkwell.domain.repository.comment import CommentRepository
from inkwell.domain.value import CommentId, ModerationStatus, PostId

from .post import InMemoryPostRepository
from .user import InMemoryUserRepository


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    The global feed needs post and author state, which the SQL
    implementation gets from joins; here the sibling in-memory
    repositories are consulted instead.
    """

    def __init__(
        self,
        user_repository: InMemoryUserRepository,
        post_repository: InMemoryPostRepository,
    ) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._users = user_repository
        self._posts = post_repository

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_post(
        self,
        post_id: PostId,
        include_deleted: bool = False,
        status: Optional[ModerationStatus] = None,
    ) -> list[Comment]:
        """Find all comments for a post, oldest first."""
        comments = [c for c in self._comments.values() if c.post_id == post_id]

        if not include_deleted:
            comments = [c for c in comments if c.deleted_at is None]
        if status is not None:
            comments = [c for c in comments if c.moderation_status == status]

        # Stable sort keeps insertion order for equal timestamps
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def _update_live(self, comment_id: CommentId, **changes) -> Optional[Comment]:
        comment = self._comments.get(comment_id)
        if comment is None or comment.deleted_at is not None:
            return None
        updated = comment.model_copy(update=changes)
        self._comments[comment_id] = updated
        return updated

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Update the content of a live comment."""
        return await self._update_live(
            comment_id, content=content, updated_at=datetime.now(timezone.utc)
        )

    async def update_moderation_status(
        self, comment_id: CommentId, status: ModerationStatus
    ) -> Optional[Comment]:
        """Set the moderation status of a live comment."""
        return await self._update_live(comment_id, moderation_status=status)

    async def soft_delete_many(
        self, comment_ids: Sequence[CommentId], deleted_at: datetime
    ) -> int:
        """Mark live comments deleted."""
        count = 0
        for comment_id in comment_ids:
            if await self._update_live(comment_id, deleted_at=deleted_at):
                count += 1
        return count

    async def _recent_top_level(self) -> list[Comment]:
        eligible = []
        for comment in self._comments.values():
            if (
                comment.parent_id is not None
                or comment.deleted_at is not None
                or comment.moderation_status == ModerationStatus.HIDDEN
            ):
                continue
            post = await self._posts.find_by_id(comment.post_id)
            if post is None or not post.published or post.deleted_at is not None:
                continue
            author = await self._users.find_by_id(comment.user_id)
            if author is None or not author.is_active:
                continue
            eligible.append(comment)

        eligible.sort(key=lambda c: c.created_at, reverse=True)
        return eligible

    async def find_recent_top_level(self, limit: int, offset: int) -> list[Comment]:
        """Find recent top-level comments for the global feed."""
        comments = await self._recent_top_level()
        return comments[offset : offset + limit]

    async def count_recent_top_level(self) -> int:
        """Count the comments eligible for the global feed."""
        return len(await self._recent_top_level())
