"""PostgreSQL implementation of the commenter statistics ledger."""

from datetime import datetime
from typing import List, Optional, Sequence

from sqlalchemy import and_, delete, desc, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model import CommenterStats
from inkwell.domain.repository import CommenterStatsRepository
from inkwell.domain.value import UserId
from inkwell.persistence.mappers import row_to_commenter_stats
from inkwell.persistence.tables import commenter_stats_table


class PostgresCommenterStatsRepository(CommenterStatsRepository):
    """PostgreSQL implementation of CommenterStatsRepository.

    Counter updates are single statements evaluated by the database, so
    concurrent writers never lose an increment.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _pair(self, post_author_id: UserId, commenter_id: UserId):
        return and_(
            commenter_stats_table.c.post_author_id == post_author_id,
            commenter_stats_table.c.commenter_id == commenter_id,
        )

    async def find(
        self, post_author_id: UserId, commenter_id: UserId
    ) -> Optional[CommenterStats]:
        """Find the ledger row for a (post author, commenter) pair."""
        stmt = select(commenter_stats_table).where(
            self._pair(post_author_id, commenter_id)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_commenter_stats(row._asdict()) if row else None

    async def find_many(
        self, post_author_id: UserId, commenter_ids: Sequence[UserId]
    ) -> List[CommenterStats]:
        """Find ledger rows for many commenters of one author."""
        if not commenter_ids:
            return []

        stmt = select(commenter_stats_table).where(
            and_(
                commenter_stats_table.c.post_author_id == post_author_id,
                commenter_stats_table.c.commenter_id.in_(list(commenter_ids)),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_commenter_stats(row._asdict()) for row in result.fetchall()]

    async def increment(
        self, post_author_id: UserId, commenter_id: UserId, at: datetime
    ) -> None:
        """Upsert-increment in one INSERT ... ON CONFLICT DO UPDATE."""
        stmt = pg_insert(commenter_stats_table).values(
            post_author_id=post_author_id,
            commenter_id=commenter_id,
            comment_count=1,
            last_comment_at=at,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[
                commenter_stats_table.c.post_author_id,
                commenter_stats_table.c.commenter_id,
            ],
            set_={
                "comment_count": commenter_stats_table.c.comment_count + 1,
                "last_comment_at": stmt.excluded.last_comment_at,
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def decrement(
        self, post_author_id: UserId, commenter_id: UserId, amount: int = 1
    ) -> None:
        """Drop the row if it would reach zero, otherwise subtract in place.

        Exactly one of the two statements matches an existing row.
        """
        pair = self._pair(post_author_id, commenter_id)

        await self.session.execute(
            delete(commenter_stats_table)
            .where(pair)
            .where(commenter_stats_table.c.comment_count <= amount)
        )
        await self.session.execute(
            update(commenter_stats_table)
            .where(pair)
            .where(commenter_stats_table.c.comment_count > amount)
            .values(comment_count=commenter_stats_table.c.comment_count - amount)
        )
        await self.session.flush()

    async def find_top(
        self, post_author_id: UserId, min_count: int, limit: int
    ) -> List[CommenterStats]:
        """Find an author's most active commenters."""
        stmt = (
            select(commenter_stats_table)
            .where(commenter_stats_table.c.post_author_id == post_author_id)
            .where(commenter_stats_table.c.comment_count >= min_count)
            .order_by(
                desc(commenter_stats_table.c.comment_count),
                desc(commenter_stats_table.c.last_comment_at),
            )
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_commenter_stats(row._asdict()) for row in result.fetchall()]
