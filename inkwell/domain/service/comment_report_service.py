"""Comment report domain service."""

from collections import defaultdict
from typing import Iterable
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from inkwell.domain.error import (
    ConflictError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from inkwell.domain.model import Comment, CommentReport, User
from inkwell.domain.repository import CommentReportRepository
from inkwell.domain.value import CommentId, CommentReportId, ReportStatus, UserId

from .base import Service

MIN_REASON_LENGTH = 10
MAX_REASON_LENGTH = 500


class CommentReportService(Service):
    """Domain service for reporting comments and reviewing reports."""

    def __init__(self, report_repository: CommentReportRepository) -> None:
        """Initialize comment report service.

        Args:
            report_repository: Comment report repository
        """
        self.report_repository = report_repository

    async def report_comment(
        self, comment: Comment, reporter_id: UserId, reason: str
    ) -> CommentReport:
        """File a report against a live comment.

        Args:
            comment: Reported comment
            reporter_id: Reporting user
            reason: Why the comment is being reported

        Returns:
            Created report

        Raises:
            ValidationError: If the reason is too short or too long
            ConflictError: If the user already reported this comment
        """
        with logfire.span(
            "comment_report_service.report_comment",
            comment_id=str(comment.id),
            reporter_id=str(reporter_id),
        ):
            reason = reason.strip()
            if not MIN_REASON_LENGTH <= len(reason) <= MAX_REASON_LENGTH:
                raise ValidationError(
                    f"Reason must be between {MIN_REASON_LENGTH} and "
                    f"{MAX_REASON_LENGTH} characters"
                )

            existing = await self.report_repository.find_by_comment_and_reporter(
                comment.id, reporter_id
            )
            if existing:
                raise ConflictError("You have already reported this comment")

            report = CommentReport(
                id=CommentReportId(uuid4()),
                comment_id=comment.id,
                reporter_id=reporter_id,
                reason=reason,
            )
            try:
                saved = await self.report_repository.save(report)
            except IntegrityError:
                raise ConflictError("You have already reported this comment")

            logfire.info(
                "Comment reported", report_id=str(saved.id), comment_id=str(comment.id)
            )
            return saved

    async def get_reports_for_comments(
        self, comment_ids: Iterable[CommentId]
    ) -> dict[CommentId, list[CommentReport]]:
        """Group the reports of many comments by comment (one query)."""
        ids = list(dict.fromkeys(comment_ids))
        grouped: dict[CommentId, list[CommentReport]] = defaultdict(list)
        if not ids:
            return grouped
        for report in await self.report_repository.find_by_comments(ids):
            grouped[report.comment_id].append(report)
        return grouped

    async def list_reports(
        self, admin: User, page: int, limit: int
    ) -> tuple[list[CommentReport], int]:
        """Page through every report, newest first.

        Raises:
            NotAuthorizedError: If the user is not an administrator
        """
        with logfire.span(
            "comment_report_service.list_reports", page=page, limit=limit
        ):
            self._require_admin(admin)
            reports = await self.report_repository.find_all(
                limit=limit, offset=(page - 1) * limit
            )
            total = await self.report_repository.count()
            return reports, total

    async def update_status(
        self, admin: User, report_id: CommentReportId, status: ReportStatus
    ) -> CommentReport:
        """Move a report to a new review status.

        Raises:
            NotAuthorizedError: If the user is not an administrator
            NotFoundError: If the report does not exist
        """
        with logfire.span(
            "comment_report_service.update_status",
            report_id=str(report_id),
            status=status.value,
        ):
            self._require_admin(admin)
            updated = await self.report_repository.update_status(report_id, status)
            if updated is None:
                raise NotFoundError("Report", str(report_id))
            logfire.info(
                "Report status updated", report_id=str(report_id), status=status.value
            )
            return updated

    @staticmethod
    def _require_admin(user: User) -> None:
        if not user.is_admin:
            logfire.warn("Admin access denied", user_id=str(user.id))
            raise NotAuthorizedError("Admin access required")
