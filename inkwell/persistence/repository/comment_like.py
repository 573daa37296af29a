"""PostgreSQL implementation of CommentLike repository."""

from typing import Dict, Optional, Sequence

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model import CommentLike
from inkwell.domain.repository import CommentLikeRepository
from inkwell.domain.value import CommentId, UserId
from inkwell.persistence.mappers import comment_like_to_dict, row_to_comment_like
from inkwell.persistence.tables import comment_likes_table


class PostgresCommentLikeRepository(CommentLikeRepository):
    """PostgreSQL implementation of CommentLikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[CommentLike]:
        """Find a user's like on a comment."""
        stmt = select(comment_likes_table).where(
            and_(
                comment_likes_table.c.user_id == user_id,
                comment_likes_table.c.comment_id == comment_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment_like(row._asdict()) if row else None

    async def save(self, like: CommentLike) -> CommentLike:
        """Save a like (create).

        The unique constraint on (user_id, comment_id) raises IntegrityError
        for duplicates.
        """
        stmt = insert(comment_likes_table).values(**comment_like_to_dict(like))
        await self.session.execute(stmt)
        await self.session.flush()
        return like

    async def delete_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> bool:
        """Delete a user's like on a comment."""
        stmt = delete(comment_likes_table).where(
            and_(
                comment_likes_table.c.user_id == user_id,
                comment_likes_table.c.comment_id == comment_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return (result.rowcount or 0) > 0

    async def count_by_comment(self, comment_id: CommentId) -> int:
        """Count likes on a comment."""
        stmt = (
            select(func.count())
            .select_from(comment_likes_table)
            .where(comment_likes_table.c.comment_id == comment_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> Dict[CommentId, int]:
        """Count likes for many comments with a single grouped query."""
        if not comment_ids:
            return {}

        stmt = (
            select(comment_likes_table.c.comment_id, func.count().label("like_count"))
            .where(comment_likes_table.c.comment_id.in_(list(comment_ids)))
            .group_by(comment_likes_table.c.comment_id)
        )
        result = await self.session.execute(stmt)
        return {
            CommentId(row.comment_id): row.like_count for row in result.fetchall()
        }
