"""Update comment report status use case (admin)."""

from pydantic import BaseModel

from inkwell.application.usecase.common import ReportItem
from inkwell.domain.service import CommentReportService, UserService
from inkwell.domain.value import CommentReportId, ReportStatus, UserId, parse_id


class UpdateReportStatusRequest(BaseModel):
    """Update report status request."""

    report_id: str  # UUID string
    user_id: str | None  # Current user ID (must be an admin)
    status: ReportStatus


class UpdateReportStatusResponse(ReportItem):
    """Update report status response."""

    pass


class UpdateReportStatusUseCase:
    """Use case for administrators resolving a comment report."""

    def __init__(
        self, user_service: UserService, report_service: CommentReportService
    ) -> None:
        """Initialize update report status use case.

        Args:
            user_service: User domain service
            report_service: Comment report service
        """
        self.user_service = user_service
        self.report_service = report_service

    async def execute(
        self, request: UpdateReportStatusRequest
    ) -> UpdateReportStatusResponse:
        """Execute update report status flow.

        Raises:
            AuthenticationRequiredError: If there is no active principal
            NotAuthorizedError: If the user is not an administrator
            NotFoundError: If the report does not exist
        """
        user = await self.user_service.get_active_user(
            UserId(parse_id(request.user_id)) if request.user_id else None
        )
        report = await self.report_service.update_status(
            user, CommentReportId(parse_id(request.report_id)), request.status
        )
        return UpdateReportStatusResponse.from_report(report)
