"""Unlike comment use case."""

from pydantic import BaseModel

from inkwell.domain.service import (
    CacheService,
    CommentLikeService,
    CommentService,
    PostService,
    UserService,
)
from inkwell.domain.value import CommentId, PostId, UserId, parse_id


class UnlikeCommentRequest(BaseModel):
    """Unlike comment request."""

    post_id: str  # UUID string
    comment_id: str  # UUID string
    user_id: str | None  # User ID from the verified token, if any


class UnlikeCommentResponse(BaseModel):
    """Unlike comment response with the recounted total."""

    comment_id: str
    like_count: int


class UnlikeCommentUseCase:
    """Use case for removing a like from a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
        like_service: CommentLikeService,
        cache_service: CacheService,
    ) -> None:
        """Initialize unlike comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            user_service: User domain service
            like_service: Comment like service
            cache_service: Post cache service
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.user_service = user_service
        self.like_service = like_service
        self.cache_service = cache_service

    async def execute(self, request: UnlikeCommentRequest) -> UnlikeCommentResponse:
        """Execute unlike flow.

        Raises:
            AuthenticationRequiredError: If there is no active principal
            NotFoundError: If the post or comment is missing or deleted
            NotLikedError: If the user had not liked the comment
        """
        user = await self.user_service.get_active_user(
            UserId(parse_id(request.user_id)) if request.user_id else None
        )
        post = await self.post_service.get_live_post(PostId(parse_id(request.post_id)))
        comment = await self.comment_service.get_live_comment_in_post(
            post.id, CommentId(parse_id(request.comment_id))
        )

        like_count = await self.like_service.unlike(comment, user.id)
        await self.cache_service.invalidate_post(post.slug)

        return UnlikeCommentResponse(comment_id=str(comment.id), like_count=like_count)
