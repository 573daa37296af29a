"""Report comment use case."""

from pydantic import BaseModel

from inkwell.application.usecase.common import ReportItem
from inkwell.domain.service import (
    CommentReportService,
    CommentService,
    PostService,
    UserService,
)
from inkwell.domain.value import CommentId, PostId, UserId, parse_id


class ReportCommentRequest(BaseModel):
    """Report comment request."""

    post_id: str  # UUID string
    comment_id: str  # UUID string
    user_id: str | None  # Reporting user ID from the verified token, if any
    reason: str


class ReportCommentResponse(ReportItem):
    """Report comment response."""

    pass


class ReportCommentUseCase:
    """Use case for reporting an abusive comment."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
        report_service: CommentReportService,
    ) -> None:
        """Initialize report comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            user_service: User domain service
            report_service: Comment report service
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.user_service = user_service
        self.report_service = report_service

    async def execute(self, request: ReportCommentRequest) -> ReportCommentResponse:
        """Execute report flow.

        Raises:
            AuthenticationRequiredError: If there is no active principal
            NotFoundError: If the post or comment is missing or deleted
            ValidationError: If the reason length is out of range
            ConflictError: If the user already reported this comment
        """
        user = await self.user_service.get_active_user(
            UserId(parse_id(request.user_id)) if request.user_id else None
        )
        post = await self.post_service.get_live_post(PostId(parse_id(request.post_id)))
        comment = await self.comment_service.get_live_comment_in_post(
            post.id, CommentId(parse_id(request.comment_id))
        )

        report = await self.report_service.report_comment(
            comment, user.id, request.reason
        )
        return ReportCommentResponse.from_report(report)
