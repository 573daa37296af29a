"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from inkwell.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    LikeCommentRequest,
    LikeCommentResponse,
    LikeCommentUseCase,
    PinCommentRequest,
    PinCommentResponse,
    PinCommentUseCase,
    ReportCommentRequest,
    ReportCommentResponse,
    ReportCommentUseCase,
    UnlikeCommentRequest,
    UnlikeCommentResponse,
    UnlikeCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from inkwell.domain.service import JWTService
from inkwell.interface.api.auth import get_auth_token

router = APIRouter(prefix="/posts", tags=["comments"], route_class=DishkaRoute)


class CommentContentAPIRequest(BaseModel):
    """API request body carrying comment text."""

    content: str = Field(min_length=1)


class ReportCommentAPIRequest(BaseModel):
    """API request for reporting a comment."""

    reason: str = Field(min_length=10, max_length=500)


@router.get("/{post_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    post_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> GetCommentsResponse:
    """Get the comment tree of a post.

    Authentication is optional. The post author also sees hidden comments.

    Args:
        post_id: Post UUID
        get_comments_use_case: Get comments use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie or Authorization header (optional)

    Returns:
        Nested comment tree with like counts and top-commenter flags
    """
    viewer_id = jwt_service.get_user_id_from_token(auth_token)
    request = GetCommentsRequest(post_id=post_id, viewer_id=viewer_id)
    return await get_comments_use_case.execute(request)


@router.post(
    "/{post_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: str,
    request: CommentContentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> CreateCommentResponse:
    """Create a top-level comment on a post.

    Requires authentication.

    Args:
        post_id: Post UUID
        request: Comment content
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie or Authorization header

    Returns:
        Created comment details
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    use_case_request = CreateCommentRequest(
        post_id=post_id,
        user_id=user_id,
        content=request.content,
    )
    return await create_comment_use_case.execute(use_case_request)


@router.post(
    "/{post_id}/comments/{comment_id}/replies",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def reply_to_comment(
    post_id: str,
    comment_id: str,
    request: CommentContentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> CreateCommentResponse:
    """Reply to a comment.

    Replies nested deeper than the thread depth cap are rejected with 400.
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    use_case_request = CreateCommentRequest(
        post_id=post_id,
        user_id=user_id,
        content=request.content,
        parent_id=comment_id,
    )
    return await create_comment_use_case.execute(use_case_request)


@router.patch("/{post_id}/comments/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    post_id: str,
    comment_id: str,
    request: CommentContentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> UpdateCommentResponse:
    """Update a comment's content.

    Only the comment author can edit.

    Args:
        post_id: Post UUID
        comment_id: Comment UUID
        request: New content
        update_comment_use_case: Update comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie or Authorization header

    Returns:
        Updated comment details
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    use_case_request = UpdateCommentRequest(
        post_id=post_id,
        comment_id=comment_id,
        user_id=user_id,
        content=request.content,
    )
    return await update_comment_use_case.execute(use_case_request)


@router.delete(
    "/{post_id}/comments/{comment_id}", response_model=DeleteCommentResponse
)
async def delete_comment(
    post_id: str,
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> DeleteCommentResponse:
    """Soft delete a comment together with all of its replies.

    Only the comment author can delete.
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    use_case_request = DeleteCommentRequest(
        post_id=post_id, comment_id=comment_id, user_id=user_id
    )
    return await delete_comment_use_case.execute(use_case_request)


@router.post(
    "/{post_id}/comments/{comment_id}/like",
    response_model=LikeCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def like_comment(
    post_id: str,
    comment_id: str,
    like_comment_use_case: FromDishka[LikeCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> LikeCommentResponse:
    """Like a comment. Liking twice is a conflict."""
    user_id = jwt_service.get_user_id_from_token(auth_token)
    use_case_request = LikeCommentRequest(
        post_id=post_id, comment_id=comment_id, user_id=user_id
    )
    return await like_comment_use_case.execute(use_case_request)


@router.delete(
    "/{post_id}/comments/{comment_id}/like", response_model=UnlikeCommentResponse
)
async def unlike_comment(
    post_id: str,
    comment_id: str,
    unlike_comment_use_case: FromDishka[UnlikeCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> UnlikeCommentResponse:
    """Remove a like from a comment."""
    user_id = jwt_service.get_user_id_from_token(auth_token)
    use_case_request = UnlikeCommentRequest(
        post_id=post_id, comment_id=comment_id, user_id=user_id
    )
    return await unlike_comment_use_case.execute(use_case_request)


@router.post(
    "/{post_id}/comments/{comment_id}/report",
    response_model=ReportCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def report_comment(
    post_id: str,
    comment_id: str,
    request: ReportCommentAPIRequest,
    report_comment_use_case: FromDishka[ReportCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> ReportCommentResponse:
    """Report a comment for review by an administrator.

    Each user can report a given comment once.

    Args:
        post_id: Post UUID
        comment_id: Comment UUID
        request: Report reason (10 to 500 characters)
        report_comment_use_case: Report comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie or Authorization header

    Returns:
        Created report
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    use_case_request = ReportCommentRequest(
        post_id=post_id,
        comment_id=comment_id,
        user_id=user_id,
        reason=request.reason,
    )
    return await report_comment_use_case.execute(use_case_request)


@router.post("/{post_id}/comments/{comment_id}/pin", response_model=PinCommentResponse)
async def pin_comment(
    post_id: str,
    comment_id: str,
    pin_comment_use_case: FromDishka[PinCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> PinCommentResponse:
    """Pin a comment to the top of the post. Post author only."""
    user_id = jwt_service.get_user_id_from_token(auth_token)
    use_case_request = PinCommentRequest(
        post_id=post_id, comment_id=comment_id, user_id=user_id, pinned=True
    )
    return await pin_comment_use_case.execute(use_case_request)


@router.delete(
    "/{post_id}/comments/{comment_id}/pin", response_model=PinCommentResponse
)
async def unpin_comment(
    post_id: str,
    comment_id: str,
    pin_comment_use_case: FromDishka[PinCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> PinCommentResponse:
    """Unpin a comment. Post author only."""
    user_id = jwt_service.get_user_id_from_token(auth_token)
    use_case_request = PinCommentRequest(
        post_id=post_id, comment_id=comment_id, user_id=user_id, pinned=False
    )
    return await pin_comment_use_case.execute(use_case_request)
