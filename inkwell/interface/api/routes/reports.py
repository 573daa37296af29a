"""Comment report review routes (administrators only)."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from inkwell.application.usecase.report import (
    ListReportsRequest,
    ListReportsResponse,
    ListReportsUseCase,
    UpdateReportStatusRequest,
    UpdateReportStatusResponse,
    UpdateReportStatusUseCase,
)
from inkwell.domain.service import JWTService
from inkwell.domain.value import ReportStatus
from inkwell.interface.api.auth import get_auth_token

router = APIRouter(prefix="/reports", tags=["reports"], route_class=DishkaRoute)


class UpdateReportStatusAPIRequest(BaseModel):
    """API request for changing a report's status."""

    status: ReportStatus


@router.get("/comments", response_model=ListReportsResponse)
async def list_comment_reports(
    list_reports_use_case: FromDishka[ListReportsUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    auth_token: str | None = Depends(get_auth_token),
) -> ListReportsResponse:
    """List comment reports, newest first."""
    user_id = jwt_service.get_user_id_from_token(auth_token)
    request = ListReportsRequest(user_id=user_id, page=page, limit=limit)
    return await list_reports_use_case.execute(request)


@router.patch("/comments/{report_id}", response_model=UpdateReportStatusResponse)
async def update_comment_report_status(
    report_id: str,
    request: UpdateReportStatusAPIRequest,
    update_report_status_use_case: FromDishka[UpdateReportStatusUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> UpdateReportStatusResponse:
    """Mark a report as reviewed, resolved or dismissed.

    Args:
        report_id: Report UUID
        request: New status
        update_report_status_use_case: Update report status use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie or Authorization header

    Returns:
        Updated report
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    use_case_request = UpdateReportStatusRequest(
        report_id=report_id, user_id=user_id, status=request.status
    )
    return await update_report_status_use_case.execute(use_case_request)
