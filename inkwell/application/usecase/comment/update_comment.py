"""Update comment use case."""

from pydantic import BaseModel

from inkwell.application.usecase.common import CommentItem
from inkwell.domain.service import (
    CacheService,
    CommentLikeService,
    CommentService,
    CommenterStatsService,
    PostService,
    UserService,
)
from inkwell.domain.value import CommentId, PostId, UserId, parse_id


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    post_id: str  # UUID string
    comment_id: str  # UUID string
    user_id: str | None  # Current user ID (must be author)
    content: str


class UpdateCommentResponse(CommentItem):
    """Update comment response."""

    pass


class UpdateCommentUseCase:
    """Use case for editing a comment's text."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
        like_service: CommentLikeService,
        stats_service: CommenterStatsService,
        cache_service: CacheService,
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            user_service: User domain service
            like_service: Like counts
            stats_service: Commenter ledger service
            cache_service: Post cache service
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.user_service = user_service
        self.like_service = like_service
        self.stats_service = stats_service
        self.cache_service = cache_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Only the content and updated_at change.

        Raises:
            AuthenticationRequiredError: If there is no active principal
            NotFoundError: If the post or comment is missing or deleted
            NotAuthorizedError: If the user didn't write the comment
        """
        user = await self.user_service.get_active_user(
            UserId(parse_id(request.user_id)) if request.user_id else None
        )
        post = await self.post_service.get_live_post(PostId(parse_id(request.post_id)))
        comment = await self.comment_service.get_live_comment_in_post(
            post.id, CommentId(parse_id(request.comment_id))
        )

        updated = await self.comment_service.update_content(
            comment, user.id, request.content
        )
        await self.cache_service.invalidate_post(post.slug)

        like_count = await self.like_service.count_likes(updated.id)
        is_top = await self.stats_service.is_top_commenter(user.id, post.author_id)

        return UpdateCommentResponse.build(
            updated, user, like_count=like_count, is_top_commenter=is_top
        )
