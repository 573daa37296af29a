"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from inkwell.application.usecase.user import (
    GetTopCommentersRequest,
    GetTopCommentersResponse,
    GetTopCommentersUseCase,
)

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/{user_id}/top-commenters", response_model=GetTopCommentersResponse)
async def get_top_commenters(
    user_id: str,
    get_top_commenters_use_case: FromDishka[GetTopCommentersUseCase],
    limit: int = Query(default=10, ge=1, le=100),
) -> GetTopCommentersResponse:
    """Most active commenters on a user's posts.

    Only commenters who reached the top-commenter threshold are listed.

    Args:
        user_id: Post author's UUID
        get_top_commenters_use_case: Get top commenters use case from DI
        limit: Maximum number of commenters to return

    Returns:
        Commenters ordered by comment count, then most recent comment
    """
    request = GetTopCommentersRequest(user_id=user_id, limit=limit)
    return await get_top_commenters_use_case.execute(request)
