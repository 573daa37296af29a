"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .comment_like import InMemoryCommentLikeRepository
from .comment_report import InMemoryCommentReportRepository
from .commenter_stats import InMemoryCommenterStatsRepository
from .notification import InMemoryNotificationRepository
from .post import InMemoryPostRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentLikeRepository",
    "InMemoryCommentReportRepository",
    "InMemoryCommentRepository",
    "InMemoryCommenterStatsRepository",
    "InMemoryNotificationRepository",
    "InMemoryPostRepository",
    "InMemoryUserRepository",
]
