"""PostgreSQL implementation of Comment repository."""

from datetime import datetime, timezone
from typing import List, Optional, Sequence

from sqlalchemy import desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model import Comment
from inkwell.domain.repository import CommentRepository
from inkwell.domain.value import CommentId, ModerationStatus, PostId
from inkwell.persistence.mappers import comment_to_dict, row_to_comment
from inkwell.persistence.tables import comments_table, posts_table, users_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_post(
        self,
        post_id: PostId,
        include_deleted: bool = False,
        status: Optional[ModerationStatus] = None,
    ) -> List[Comment]:
        """Find all comments for a post, oldest first."""
        stmt = select(comments_table).where(comments_table.c.post_id == post_id)

        if not include_deleted:
            stmt = stmt.where(comments_table.c.deleted_at.is_(None))
        if status is not None:
            stmt = stmt.where(comments_table.c.moderation_status == status.value)

        stmt = stmt.order_by(comments_table.c.created_at, comments_table.c.id)

        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        comment_dict = comment_to_dict(comment)
        existing = await self.find_by_id(comment.id)

        if existing:
            stmt = (
                update(comments_table)
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = insert(comments_table).values(**comment_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Update the content of a live comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.deleted_at.is_(None))
            .values(content=content, updated_at=datetime.now(timezone.utc))
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def update_moderation_status(
        self, comment_id: CommentId, status: ModerationStatus
    ) -> Optional[Comment]:
        """Set the moderation status of a live comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.deleted_at.is_(None))
            .values(moderation_status=status.value)
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def soft_delete_many(
        self, comment_ids: Sequence[CommentId], deleted_at: datetime
    ) -> int:
        """Mark comments deleted in a single UPDATE."""
        if not comment_ids:
            return 0

        stmt = (
            update(comments_table)
            .where(comments_table.c.id.in_(list(comment_ids)))
            .where(comments_table.c.deleted_at.is_(None))
            .values(deleted_at=deleted_at)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0

    def _recent_top_level_filter(self, stmt):
        """Restrict a statement over comments to global-feed eligibility."""
        return (
            stmt.join(posts_table, posts_table.c.id == comments_table.c.post_id)
            .join(users_table, users_table.c.id == comments_table.c.user_id)
            .where(comments_table.c.parent_id.is_(None))
            .where(comments_table.c.deleted_at.is_(None))
            .where(
                comments_table.c.moderation_status != ModerationStatus.HIDDEN.value
            )
            .where(posts_table.c.published.is_(True))
            .where(posts_table.c.deleted_at.is_(None))
            .where(users_table.c.deleted_at.is_(None))
        )

    async def find_recent_top_level(self, limit: int, offset: int) -> List[Comment]:
        """Find recent top-level comments for the global feed."""
        stmt = self._recent_top_level_filter(select(comments_table))
        stmt = (
            stmt.order_by(desc(comments_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_recent_top_level(self) -> int:
        """Count the comments eligible for the global feed."""
        stmt = self._recent_top_level_filter(
            select(func.count()).select_from(comments_table)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
