"""PostgreSQL repository implementations."""

from inkwell.persistence.repository.comment import PostgresCommentRepository
from inkwell.persistence.repository.comment_like import PostgresCommentLikeRepository
from inkwell.persistence.repository.comment_report import (
    PostgresCommentReportRepository,
)
from inkwell.persistence.repository.commenter_stats import (
    PostgresCommenterStatsRepository,
)
from inkwell.persistence.repository.notification import PostgresNotificationRepository
from inkwell.persistence.repository.post import PostgresPostRepository
from inkwell.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresCommentLikeRepository",
    "PostgresCommentReportRepository",
    "PostgresCommentRepository",
    "PostgresCommenterStatsRepository",
    "PostgresNotificationRepository",
    "PostgresPostRepository",
    "PostgresUserRepository",
]
