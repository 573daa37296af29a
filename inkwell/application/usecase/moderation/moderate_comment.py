"""Moderate comment use case."""

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


class ModerateCommentRequest(BaseModel):
    """Moderate comment request."""

    post_id: str  # UUID string
    comment_id: str  # UUID string
    user_id: str | None  # Current user ID (must be the post author)
    action: str  # "approve" or "hide"


class ModerateCommentResponse(CommentItem):
    """Moderate comment response."""

    pass


class ModerateCommentUseCase:
    """Use case for a post author approving or hiding a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
        like_service: CommentLikeService,
        stats_service: CommenterStatsService,
        cache_service: CacheService,
    ) -> None:
        """Initialize moderate comment use case.

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

    async def execute(self, request: ModerateCommentRequest) -> ModerateCommentResponse:
        """Execute moderation flow.

        The commenter ledger is left untouched: hiding is not deleting.

        Raises:
            AuthenticationRequiredError: If there is no active principal
            NotFoundError: If the post or comment is missing or deleted
            NotAuthorizedError: If the user is not the post author
            InvalidModerationActionError: If the action is unknown
        """
        user = await self.user_service.get_active_user(
            UserId(parse_id(request.user_id)) if request.user_id else None
        )
        post = await self.post_service.get_live_post(PostId(parse_id(request.post_id)))
        comment = await self.comment_service.get_live_comment_in_post(
            post.id, CommentId(parse_id(request.comment_id))
        )

        moderated = await self.comment_service.moderate(
            post, comment, user.id, request.action
        )
        await self.cache_service.invalidate_post(post.slug)

        author = await self.user_service.get_by_id(moderated.user_id)
        like_count = await self.like_service.count_likes(moderated.id)
        is_top = await self.stats_service.is_top_commenter(
            moderated.user_id, post.author_id
        )

        return ModerateCommentResponse.build(
            moderated, author, like_count=like_count, is_top_commenter=is_top
        )
