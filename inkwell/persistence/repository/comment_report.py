"""PostgreSQL implementation of CommentReport repository."""

from typing import List, Optional, Sequence

from sqlalchemy import and_, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model import CommentReport
from inkwell.domain.repository import CommentReportRepository
from inkwell.domain.value import CommentId, CommentReportId, ReportStatus, UserId
from inkwell.persistence.mappers import comment_report_to_dict, row_to_comment_report
from inkwell.persistence.tables import comment_reports_table


class PostgresCommentReportRepository(CommentReportRepository):
    """PostgreSQL implementation of CommentReportRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, report_id: CommentReportId) -> Optional[CommentReport]:
        """Find a report by ID."""
        stmt = select(comment_reports_table).where(
            comment_reports_table.c.id == report_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment_report(row._asdict()) if row else None

    async def find_by_comment_and_reporter(
        self, comment_id: CommentId, reporter_id: UserId
    ) -> Optional[CommentReport]:
        """Find a user's report of a comment."""
        stmt = select(comment_reports_table).where(
            and_(
                comment_reports_table.c.comment_id == comment_id,
                comment_reports_table.c.reporter_id == reporter_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment_report(row._asdict()) if row else None

    async def find_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> List[CommentReport]:
        """Find all reports for many comments, newest first."""
        if not comment_ids:
            return []

        stmt = (
            select(comment_reports_table)
            .where(comment_reports_table.c.comment_id.in_(list(comment_ids)))
            .order_by(desc(comment_reports_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_comment_report(row._asdict()) for row in result.fetchall()]

    async def find_all(self, limit: int = 20, offset: int = 0) -> List[CommentReport]:
        """Find reports across all comments, newest first."""
        stmt = (
            select(comment_reports_table)
            .order_by(desc(comment_reports_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment_report(row._asdict()) for row in result.fetchall()]

    async def count(self) -> int:
        """Count all reports."""
        stmt = select(func.count()).select_from(comment_reports_table)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, report: CommentReport) -> CommentReport:
        """Save a report (create)."""
        stmt = insert(comment_reports_table).values(**comment_report_to_dict(report))
        await self.session.execute(stmt)
        await self.session.flush()
        return report

    async def update_status(
        self, report_id: CommentReportId, status: ReportStatus
    ) -> Optional[CommentReport]:
        """Update a report's status."""
        stmt = (
            update(comment_reports_table)
            .where(comment_reports_table.c.id == report_id)
            .values(status=status.value)
            .returning(comment_reports_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        await self.session.flush()
        return row_to_comment_report(row._asdict())
