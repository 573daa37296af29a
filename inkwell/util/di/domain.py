"""Domain layer DI providers."""

from dishka import Scope, provide

from inkwell.config import AuthSettings, CacheSettings, CommentSettings
from inkwell.domain.repository import (
    CommentLikeRepository,
    CommentReportRepository,
    CommentRepository,
    CommenterStatsRepository,
    NotificationRepository,
    PostRepository,
    UserRepository,
)
from inkwell.domain.service import (
    AfterCommitHooks,
    CacheService,
    CommentLikeService,
    CommentReportService,
    CommentService,
    CommenterStatsService,
    JWTService,
    NotificationService,
    PostCache,
    PostService,
    ThreadService,
    UserService,
)
from inkwell.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        comment_settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service with the configured thread rules."""
        return CommentService(
            comment_repository=comment_repository,
            max_thread_depth=comment_settings.max_thread_depth,
            max_content_length=comment_settings.max_content_length,
        )

    @provide
    def get_comment_like_service(
        self, like_repository: CommentLikeRepository
    ) -> CommentLikeService:
        """Provide comment like domain service."""
        return CommentLikeService(like_repository=like_repository)

    @provide
    def get_comment_report_service(
        self, report_repository: CommentReportRepository
    ) -> CommentReportService:
        """Provide comment report domain service."""
        return CommentReportService(report_repository=report_repository)

    @provide
    def get_commenter_stats_service(
        self,
        stats_repository: CommenterStatsRepository,
        comment_settings: CommentSettings,
    ) -> CommenterStatsService:
        """Provide commenter ledger service."""
        return CommenterStatsService(
            stats_repository=stats_repository,
            threshold=comment_settings.top_commenter_threshold,
        )

    @provide
    def get_notification_service(
        self, notification_repository: NotificationRepository
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(notification_repository=notification_repository)

    @provide
    def get_cache_service(
        self,
        post_cache: PostCache,
        cache_settings: CacheSettings,
        after_commit: AfterCommitHooks,
    ) -> CacheService:
        """Provide post cache service bound to the request transaction."""
        return CacheService(
            post_cache=post_cache,
            recent_comments_ttl=cache_settings.recent_comments_ttl_seconds,
            after_commit=after_commit,
        )

    @provide
    def get_thread_service(
        self,
        comment_repository: CommentRepository,
        user_service: UserService,
        like_service: CommentLikeService,
        stats_service: CommenterStatsService,
        comment_settings: CommentSettings,
    ) -> ThreadService:
        """Provide comment thread assembly service."""
        return ThreadService(
            comment_repository=comment_repository,
            user_service=user_service,
            like_service=like_service,
            stats_service=stats_service,
            max_thread_depth=comment_settings.max_thread_depth,
        )
