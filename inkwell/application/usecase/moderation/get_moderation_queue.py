"""Get moderation queue use case."""

from pydantic import BaseModel

from inkwell.application.usecase.common import CommentItem, ReportItem
from inkwell.domain.service import (
    CommentLikeService,
    CommentReportService,
    CommentService,
    PostService,
    UserService,
)
from inkwell.domain.value import ModerationStatus, PostId, UserId, parse_id


class QueuePostItem(BaseModel):
    """Summary of the moderated post."""

    id: str
    title: str
    slug: str


class ModerationQueueItem(CommentItem):
    """Comment awaiting the author's attention, with its reports."""

    reports: list[ReportItem]
    report_count: int


class GetModerationQueueRequest(BaseModel):
    """Get moderation queue request."""

    post_id: str  # UUID string
    user_id: str | None  # Current user ID (must be the post author)
    status: ModerationStatus | None = None


class GetModerationQueueResponse(BaseModel):
    """Get moderation queue response."""

    post: QueuePostItem
    comments: list[ModerationQueueItem]
    total: int


class GetModerationQueueUseCase:
    """Use case for listing a post's comments for moderation."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
        like_service: CommentLikeService,
        report_service: CommentReportService,
    ) -> None:
        """Initialize get moderation queue use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            user_service: User domain service
            like_service: Like counts
            report_service: Comment report service
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.user_service = user_service
        self.like_service = like_service
        self.report_service = report_service

    async def execute(
        self, request: GetModerationQueueRequest
    ) -> GetModerationQueueResponse:
        """Execute moderation queue flow.

        Returns every live comment of the post (optionally one status only),
        newest first, including HIDDEN ones and comments by deactivated
        users, each with the reports filed against it.

        Raises:
            AuthenticationRequiredError: If there is no active principal
            NotFoundError: If the post is missing or deleted
            NotAuthorizedError: If the user is not the post author
        """
        user = await self.user_service.get_active_user(
            UserId(parse_id(request.user_id)) if request.user_id else None
        )
        post = await self.post_service.get_live_post(PostId(parse_id(request.post_id)))

        comments = await self.comment_service.get_moderation_queue(
            post, user.id, request.status
        )

        authors = await self.user_service.get_users_by_ids(c.user_id for c in comments)
        like_counts = await self.like_service.count_likes_for_comments(
            c.id for c in comments
        )
        reports = await self.report_service.get_reports_for_comments(
            c.id for c in comments
        )

        items = []
        for comment in comments:
            author = authors.get(comment.user_id)
            if author is None:
                continue
            comment_reports = [
                ReportItem.from_report(r) for r in reports.get(comment.id, [])
            ]
            base = CommentItem.build(
                comment, author, like_count=like_counts.get(comment.id, 0)
            )
            items.append(
                ModerationQueueItem(
                    **base.model_dump(),
                    reports=comment_reports,
                    report_count=len(comment_reports),
                )
            )

        return GetModerationQueueResponse(
            post=QueuePostItem(id=str(post.id), title=post.title, slug=post.slug.root),
            comments=items,
            total=len(items),
        )
