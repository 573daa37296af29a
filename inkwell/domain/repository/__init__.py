"""Repository interfaces for the Inkwell domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from inkwell.domain.repository.comment import CommentRepository
from inkwell.domain.repository.comment_like import CommentLikeRepository
from inkwell.domain.repository.comment_report import CommentReportRepository
from inkwell.domain.repository.commenter_stats import CommenterStatsRepository
from inkwell.domain.repository.notification import NotificationRepository
from inkwell.domain.repository.post import PostRepository
from inkwell.domain.repository.user import UserRepository

__all__ = [
    "CommentRepository",
    "CommentLikeRepository",
    "CommentReportRepository",
    "CommenterStatsRepository",
    "NotificationRepository",
    "PostRepository",
    "UserRepository",
]
