"""List comment reports use case (admin)."""

from pydantic import BaseModel, Field

from inkwell.application.usecase.common import Pagination, ReportItem
from inkwell.domain.service import CommentReportService, UserService
from inkwell.domain.value import UserId, parse_id


class ListReportsRequest(BaseModel):
    """List reports request."""

    user_id: str | None  # Current user ID (must be an admin)
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)


class ListReportsResponse(BaseModel):
    """List reports response."""

    reports: list[ReportItem]
    pagination: Pagination


class ListReportsUseCase:
    """Use case for administrators reviewing comment reports."""

    def __init__(
        self, user_service: UserService, report_service: CommentReportService
    ) -> None:
        """Initialize list reports use case.

        Args:
            user_service: User domain service
            report_service: Comment report service
        """
        self.user_service = user_service
        self.report_service = report_service

    async def execute(self, request: ListReportsRequest) -> ListReportsResponse:
        """Execute list reports flow.

        Raises:
            AuthenticationRequiredError: If there is no active principal
            NotAuthorizedError: If the user is not an administrator
        """
        user = await self.user_service.get_active_user(
            UserId(parse_id(request.user_id)) if request.user_id else None
        )
        reports, total = await self.report_service.list_reports(
            user, request.page, request.limit
        )
        return ListReportsResponse(
            reports=[ReportItem.from_report(r) for r in reports],
            pagination=Pagination.of(request.page, request.limit, total),
        )
