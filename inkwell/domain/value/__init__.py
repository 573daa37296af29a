"""Domain value objects for Inkwell."""

from inkwell.domain.value.identifiers import (
    CommentId,
    CommentLikeId,
    CommentReportId,
    NotificationId,
    PostId,
    UserId,
    parse_id,
)
from inkwell.domain.value.types import (
    AuthorSummary,
    ModerationAction,
    ModerationStatus,
    NotificationType,
    ReportStatus,
    Slug,
    Username,
    UserRole,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "CommentLikeId",
    "CommentReportId",
    "NotificationId",
    "parse_id",
    # Types
    "AuthorSummary",
    "ModerationAction",
    "ModerationStatus",
    "NotificationType",
    "ReportStatus",
    "Slug",
    "Username",
    "UserRole",
]
