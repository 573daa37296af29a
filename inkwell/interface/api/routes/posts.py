"""Post-level comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from inkwell.application.usecase.comment import (
    GetRecentCommentsRequest,
    GetRecentCommentsResponse,
    GetRecentCommentsUseCase,
)
from inkwell.application.usecase.post import (
    UpdateCommentSettingsRequest,
    UpdateCommentSettingsResponse,
    UpdateCommentSettingsUseCase,
)
from inkwell.domain.service import JWTService
from inkwell.interface.api.auth import get_auth_token

# Registered before the comments router so these literal paths are matched
# ahead of /posts/{post_id}/comments/{comment_id}
router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class UpdateCommentSettingsAPIRequest(BaseModel):
    """API request for changing a post's comment settings."""

    allow_comments: bool


@router.get("/recent-comments", response_model=GetRecentCommentsResponse)
async def get_recent_comments(
    get_recent_comments_use_case: FromDishka[GetRecentCommentsUseCase],
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
) -> GetRecentCommentsResponse:
    """Site-wide feed of recent top-level comments on published posts.

    Args:
        get_recent_comments_use_case: Get recent comments use case from DI
        page: Page number (1-based)
        limit: Page size (max 100)

    Returns:
        Feed page with pagination block
    """
    request = GetRecentCommentsRequest(page=page, limit=limit)
    return await get_recent_comments_use_case.execute(request)


@router.patch(
    "/{post_id}/comments/settings", response_model=UpdateCommentSettingsResponse
)
async def update_comment_settings(
    post_id: str,
    request: UpdateCommentSettingsAPIRequest,
    update_comment_settings_use_case: FromDishka[UpdateCommentSettingsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> UpdateCommentSettingsResponse:
    """Turn comments on or off for a post. Post author only."""
    user_id = jwt_service.get_user_id_from_token(auth_token)
    use_case_request = UpdateCommentSettingsRequest(
        post_id=post_id, user_id=user_id, allow_comments=request.allow_comments
    )
    return await update_comment_settings_use_case.execute(use_case_request)
