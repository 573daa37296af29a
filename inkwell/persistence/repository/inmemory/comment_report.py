"""In-memory comment report repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from inkwell.domain.model.comment_report import CommentReport
from inkwell.domain.repository.comment_report import CommentReportRepository
from inkwell.domain.value import CommentId, CommentReportId, ReportStatus, UserId


class InMemoryCommentReportRepository(CommentReportRepository):
    """In-memory implementation of CommentReportRepository for testing."""

    def __init__(self) -> None:
        self._reports: dict[CommentReportId, CommentReport] = {}

    def _newest_first(self, reports: list[CommentReport]) -> list[CommentReport]:
        return sorted(reports, key=lambda r: r.created_at, reverse=True)

    async def find_by_id(self, report_id: CommentReportId) -> Optional[CommentReport]:
        """Find a report by ID."""
        return self._reports.get(report_id)

    async def find_by_comment_and_reporter(
        self, comment_id: CommentId, reporter_id: UserId
    ) -> Optional[CommentReport]:
        """Find a user's report of a comment."""
        for report in self._reports.values():
            if report.comment_id == comment_id and report.reporter_id == reporter_id:
                return report
        return None

    async def find_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> list[CommentReport]:
        """Find all reports for many comments."""
        wanted = set(comment_ids)
        return self._newest_first(
            [r for r in self._reports.values() if r.comment_id in wanted]
        )

    async def find_all(self, limit: int = 20, offset: int = 0) -> list[CommentReport]:
        """Find reports across all comments."""
        return self._newest_first(list(self._reports.values()))[offset : offset + limit]

    async def count(self) -> int:
        """Count all reports."""
        return len(self._reports)

    async def save(self, report: CommentReport) -> CommentReport:
        """Save a report, enforcing one report per reporter and comment."""
        if await self.find_by_comment_and_reporter(report.comment_id, report.reporter_id):
            raise IntegrityError("Duplicate report", None, Exception())
        self._reports[report.id] = report
        return report

    async def update_status(
        self, report_id: CommentReportId, status: ReportStatus
    ) -> Optional[CommentReport]:
        """Update a report's status."""
        report = self._reports.get(report_id)
        if report is None:
            return None
        updated = report.model_copy(update={"status": status})
        self._reports[report_id] = updated
        return updated
