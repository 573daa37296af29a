"""Application layer DI providers."""

from dishka import Scope, provide

from inkwell.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    GetRecentCommentsUseCase,
    LikeCommentUseCase,
    PinCommentUseCase,
    ReportCommentUseCase,
    UnlikeCommentUseCase,
    UpdateCommentUseCase,
)
from inkwell.application.usecase.moderation import (
    GetModerationQueueUseCase,
    ModerateCommentUseCase,
)
from inkwell.application.usecase.post import UpdateCommentSettingsUseCase
from inkwell.application.usecase.report import (
    ListReportsUseCase,
    UpdateReportStatusUseCase,
)
from inkwell.application.usecase.user import GetTopCommentersUseCase
from inkwell.domain.service import (
    CacheService,
    CommentLikeService,
    CommentReportService,
    CommentService,
    CommenterStatsService,
    NotificationService,
    PostService,
    ThreadService,
    UserService,
)
from inkwell.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, post_service: PostService, thread_service: ThreadService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            post_service=post_service, thread_service=thread_service
        )

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
        stats_service: CommenterStatsService,
        cache_service: CacheService,
        notification_service: NotificationService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
            user_service=user_service,
            stats_service=stats_service,
            cache_service=cache_service,
            notification_service=notification_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
        like_service: CommentLikeService,
        stats_service: CommenterStatsService,
        cache_service: CacheService,
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
            user_service=user_service,
            like_service=like_service,
            stats_service=stats_service,
            cache_service=cache_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
        stats_service: CommenterStatsService,
        cache_service: CacheService,
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
            user_service=user_service,
            stats_service=stats_service,
            cache_service=cache_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_like_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
        like_service: CommentLikeService,
        cache_service: CacheService,
        notification_service: NotificationService,
    ) -> LikeCommentUseCase:
        """Provide like comment use case."""
        return LikeCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
            user_service=user_service,
            like_service=like_service,
            cache_service=cache_service,
            notification_service=notification_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_unlike_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
        like_service: CommentLikeService,
        cache_service: CacheService,
    ) -> UnlikeCommentUseCase:
        """Provide unlike comment use case."""
        return UnlikeCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
            user_service=user_service,
            like_service=like_service,
            cache_service=cache_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_report_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
        report_service: CommentReportService,
    ) -> ReportCommentUseCase:
        """Provide report comment use case."""
        return ReportCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
            user_service=user_service,
            report_service=report_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_pin_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
        cache_service: CacheService,
    ) -> PinCommentUseCase:
        """Provide pin comment use case."""
        return PinCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
            user_service=user_service,
            cache_service=cache_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_recent_comments_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
        like_service: CommentLikeService,
        stats_service: CommenterStatsService,
        cache_service: CacheService,
    ) -> GetRecentCommentsUseCase:
        """Provide recent comments feed use case."""
        return GetRecentCommentsUseCase(
            comment_service=comment_service,
            post_service=post_service,
            user_service=user_service,
            like_service=like_service,
            stats_service=stats_service,
            cache_service=cache_service,
        )

    # Moderation use cases
    @provide(scope=Scope.REQUEST)
    def get_moderate_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
        like_service: CommentLikeService,
        stats_service: CommenterStatsService,
        cache_service: CacheService,
    ) -> ModerateCommentUseCase:
        """Provide moderate comment use case."""
        return ModerateCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
            user_service=user_service,
            like_service=like_service,
            stats_service=stats_service,
            cache_service=cache_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_moderation_queue_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
        like_service: CommentLikeService,
        report_service: CommentReportService,
    ) -> GetModerationQueueUseCase:
        """Provide moderation queue use case."""
        return GetModerationQueueUseCase(
            comment_service=comment_service,
            post_service=post_service,
            user_service=user_service,
            like_service=like_service,
            report_service=report_service,
        )

    # Report review use cases
    @provide(scope=Scope.REQUEST)
    def get_list_reports_use_case(
        self, user_service: UserService, report_service: CommentReportService
    ) -> ListReportsUseCase:
        """Provide list reports use case."""
        return ListReportsUseCase(
            user_service=user_service, report_service=report_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_report_status_use_case(
        self, user_service: UserService, report_service: CommentReportService
    ) -> UpdateReportStatusUseCase:
        """Provide update report status use case."""
        return UpdateReportStatusUseCase(
            user_service=user_service, report_service=report_service
        )

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_update_comment_settings_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        cache_service: CacheService,
    ) -> UpdateCommentSettingsUseCase:
        """Provide update comment settings use case."""
        return UpdateCommentSettingsUseCase(
            post_service=post_service,
            user_service=user_service,
            cache_service=cache_service,
        )

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_top_commenters_use_case(
        self, user_service: UserService, stats_service: CommenterStatsService
    ) -> GetTopCommentersUseCase:
        """Provide top commenters use case."""
        return GetTopCommentersUseCase(
            user_service=user_service, stats_service=stats_service
        )
