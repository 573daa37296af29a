"""Pin comment use case."""

from pydantic import BaseModel

from inkwell.domain.service import CacheService, CommentService, PostService, UserService
from inkwell.domain.value import CommentId, PostId, UserId, parse_id


class PinCommentRequest(BaseModel):
    """Pin or unpin comment request."""

    post_id: str  # UUID string
    comment_id: str  # UUID string
    user_id: str | None  # Current user ID (must be the post author)
    pinned: bool  # True to pin, False to unpin


class PinCommentResponse(BaseModel):
    """Pin comment response."""

    post_id: str
    pinned_comment_id: str | None


class PinCommentUseCase:
    """Use case for pinning a comment to the top of a post."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
        cache_service: CacheService,
    ) -> None:
        """Initialize pin comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            user_service: User domain service
            cache_service: Post cache service
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.user_service = user_service
        self.cache_service = cache_service

    async def execute(self, request: PinCommentRequest) -> PinCommentResponse:
        """Execute pin flow.

        Pinning replaces any previously pinned comment. Unpinning clears the
        pin when it is this comment, and is a no-op otherwise.

        Raises:
            AuthenticationRequiredError: If there is no active principal
            NotFoundError: If the post or comment is missing or deleted
            NotAuthorizedError: If the user is not the post author
        """
        user = await self.user_service.get_active_user(
            UserId(parse_id(request.user_id)) if request.user_id else None
        )
        post = await self.post_service.get_live_post(PostId(parse_id(request.post_id)))
        comment = await self.comment_service.get_live_comment_in_post(
            post.id, CommentId(parse_id(request.comment_id))
        )

        if request.pinned:
            post = await self.post_service.pin_comment(post, user.id, comment)
        else:
            post = await self.post_service.unpin_comment(post, user.id, comment)

        await self.cache_service.invalidate_post(post.slug)

        return PinCommentResponse(
            post_id=str(post.id),
            pinned_comment_id=str(post.pinned_comment_id)
            if post.pinned_comment_id
            else None,
        )
