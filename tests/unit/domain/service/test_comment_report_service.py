"""Unit tests for CommentReportService."""

from uuid import uuid4

import pytest

from inkwell.domain.error import (
    ConflictError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from inkwell.domain.service import CommentReportService
from inkwell.domain.value import CommentReportId, ReportStatus, UserRole
from tests.conftest import make_comment, make_post, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

REASON = "This comment is spam advertising"


class TestReportComment:
    """Tests for filing reports."""

    @pytest.mark.asyncio
    async def test_duplicate_report_by_same_user_conflicts(self, unit_env):
        """One report per user and comment; other users may still report."""
        # Arrange
        report_service = await unit_env.get(CommentReportService)
        author = make_user("alice")
        comment = make_comment(make_post(author), author)
        bob = make_user("bob")
        carol = make_user("carol")
        first = await report_service.report_comment(comment, bob.id, REASON)

        # Act & Assert
        with pytest.raises(ConflictError, match="already reported"):
            await report_service.report_comment(comment, bob.id, REASON)
        other = await report_service.report_comment(comment, carol.id, REASON)

        assert first.status == ReportStatus.PENDING
        assert other.reporter_id == carol.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("reason", ["too short", "   short    ", "x" * 501])
    async def test_reason_length_is_enforced(self, unit_env, reason):
        """Reasons must be 10 to 500 characters after trimming."""
        # Arrange
        report_service = await unit_env.get(CommentReportService)
        author = make_user("alice")
        comment = make_comment(make_post(author), author)

        # Act & Assert
        with pytest.raises(ValidationError, match="between 10 and 500"):
            await report_service.report_comment(comment, make_user("bob").id, reason)


class TestReviewReports:
    """Tests for the administrator operations."""

    @pytest.mark.asyncio
    async def test_admin_pages_through_reports(self, unit_env):
        """Reports are paged with a total across all comments."""
        # Arrange
        report_service = await unit_env.get(CommentReportService)
        admin = make_user("root", role=UserRole.ADMIN)
        author = make_user("alice")
        post = make_post(author)
        first = await report_service.report_comment(
            make_comment(post, author), make_user("bob").id, REASON
        )
        second = await report_service.report_comment(
            make_comment(post, author), make_user("carol").id, REASON
        )

        # Act
        page_one, total = await report_service.list_reports(admin, page=1, limit=1)
        page_two, _ = await report_service.list_reports(admin, page=2, limit=1)

        # Assert
        assert total == 2
        assert {page_one[0].id, page_two[0].id} == {first.id, second.id}

    @pytest.mark.asyncio
    async def test_non_admin_is_refused(self, unit_env):
        """Regular users cannot review reports."""
        # Arrange
        report_service = await unit_env.get(CommentReportService)

        # Act & Assert
        with pytest.raises(NotAuthorizedError, match="Admin access required"):
            await report_service.list_reports(make_user("bob"), page=1, limit=20)

    @pytest.mark.asyncio
    async def test_admin_updates_status(self, unit_env):
        """A report can be moved to a review status."""
        # Arrange
        report_service = await unit_env.get(CommentReportService)
        admin = make_user("root", role=UserRole.ADMIN)
        author = make_user("alice")
        report = await report_service.report_comment(
            make_comment(make_post(author), author), make_user("bob").id, REASON
        )

        # Act
        updated = await report_service.update_status(
            admin, report.id, ReportStatus.RESOLVED
        )

        # Assert
        assert updated.status == ReportStatus.RESOLVED

    @pytest.mark.asyncio
    async def test_unknown_report_is_not_found(self, unit_env):
        """Updating a missing report fails."""
        # Arrange
        report_service = await unit_env.get(CommentReportService)
        admin = make_user("root", role=UserRole.ADMIN)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Report not found"):
            await report_service.update_status(
                admin, CommentReportId(uuid4()), ReportStatus.DISMISSED
            )
