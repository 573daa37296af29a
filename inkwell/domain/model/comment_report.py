"""Comment report entity."""

from datetime import datetime, timezone

from pydantic import Field

from inkwell.domain.model.common import DomainModel
from inkwell.domain.value import CommentId, CommentReportId, ReportStatus, UserId


class CommentReport(DomainModel):
    """A user's report of an abusive comment.

    Each user may report a given comment only once.
    """

    id: CommentReportId
    comment_id: CommentId
    reporter_id: UserId
    reason: str = Field(min_length=1, max_length=500)
    status: ReportStatus = ReportStatus.PENDING
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
