"""Domain services."""

from .base import Service
from .cache_service import CacheService, PostCache
from .comment_like_service import CommentLikeService
from .comment_report_service import CommentReportService
from .comment_service import CommentService
from .commenter_stats_service import CommenterStatsService
from .jwt_service import JWTService
from .notification_service import NotificationService
from .post_service import PostService
from .thread_service import CommentNode, ThreadService, count_nodes, iter_nodes
from .transaction import AfterCommitHooks
from .user_service import UserService

__all__ = [
    "AfterCommitHooks",
    "CacheService",
    "CommentLikeService",
    "CommentNode",
    "CommentReportService",
    "CommentService",
    "CommenterStatsService",
    "JWTService",
    "NotificationService",
    "PostCache",
    "PostService",
    "Service",
    "ThreadService",
    "UserService",
    "count_nodes",
    "iter_nodes",
]
