"""Comment report repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from inkwell.domain.model.comment_report import CommentReport
from inkwell.domain.value import CommentId, CommentReportId, ReportStatus, UserId


class CommentReportRepository(ABC):
    """Repository for CommentReport entity."""

    @abstractmethod
    async def find_by_id(self, report_id: CommentReportId) -> Optional[CommentReport]:
        """Find a report by ID."""
        pass

    @abstractmethod
    async def find_by_comment_and_reporter(
        self, comment_id: CommentId, reporter_id: UserId
    ) -> Optional[CommentReport]:
        """Find a user's report of a comment."""
        pass

    @abstractmethod
    async def find_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> List[CommentReport]:
        """Find all reports for many comments (batch query), newest first."""
        pass

    @abstractmethod
    async def find_all(self, limit: int = 20, offset: int = 0) -> List[CommentReport]:
        """Find reports across all comments, newest first."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all reports."""
        pass

    @abstractmethod
    async def save(self, report: CommentReport) -> CommentReport:
        """Save a report (create).

        Raises:
            IntegrityError: If the reporter already reported the comment
        """
        pass

    @abstractmethod
    async def update_status(
        self, report_id: CommentReportId, status: ReportStatus
    ) -> Optional[CommentReport]:
        """Update a report's status.

        Returns:
            Updated report, or None if it doesn't exist
        """
        pass
