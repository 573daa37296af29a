"""Moderation routes (post author only)."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from inkwell.application.usecase.moderation import (
    GetModerationQueueRequest,
    GetModerationQueueResponse,
    GetModerationQueueUseCase,
    ModerateCommentRequest,
    ModerateCommentResponse,
    ModerateCommentUseCase,
)
from inkwell.domain.service import JWTService
from inkwell.domain.value import ModerationStatus
from inkwell.interface.api.auth import get_auth_token

router = APIRouter(prefix="/posts", tags=["moderation"], route_class=DishkaRoute)


class ModerateCommentAPIRequest(BaseModel):
    """API request for moderating a comment."""

    # Validated by the domain so unknown actions get a domain error
    action: str


@router.patch(
    "/{post_id}/comments/{comment_id}/moderate",
    response_model=ModerateCommentResponse,
)
async def moderate_comment(
    post_id: str,
    comment_id: str,
    request: ModerateCommentAPIRequest,
    moderate_comment_use_case: FromDishka[ModerateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> ModerateCommentResponse:
    """Approve or hide a comment on one of your posts.

    Args:
        post_id: Post UUID
        comment_id: Comment UUID
        request: Moderation action ("approve" or "hide")
        moderate_comment_use_case: Moderate comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie or Authorization header

    Returns:
        The comment with its new moderation status
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    use_case_request = ModerateCommentRequest(
        post_id=post_id,
        comment_id=comment_id,
        user_id=user_id,
        action=request.action,
    )
    return await moderate_comment_use_case.execute(use_case_request)


@router.get("/{post_id}/moderation-queue", response_model=GetModerationQueueResponse)
async def get_moderation_queue(
    post_id: str,
    get_moderation_queue_use_case: FromDishka[GetModerationQueueUseCase],
    jwt_service: FromDishka[JWTService],
    status: ModerationStatus | None = Query(default=None),
    auth_token: str | None = Depends(get_auth_token),
) -> GetModerationQueueResponse:
    """List every comment on one of your posts with the reports against it.

    Newest first; filter with ``?status=PENDING|APPROVED|HIDDEN``.
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    use_case_request = GetModerationQueueRequest(
        post_id=post_id, user_id=user_id, status=status
    )
    return await get_moderation_queue_use_case.execute(use_case_request)
