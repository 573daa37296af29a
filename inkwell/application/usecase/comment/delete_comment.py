"""Delete comment use case."""

from pydantic import BaseModel

from inkwell.domain.service import (
    CacheService,
    CommentService,
    CommenterStatsService,
    PostService,
    UserService,
)
from inkwell.domain.value import CommentId, PostId, UserId, parse_id


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    post_id: str  # UUID string
    comment_id: str  # UUID string
    user_id: str | None  # Current user ID (must be author)


class DeleteCommentResponse(BaseModel):
    """Delete comment acknowledgement."""

    message: str
    deleted_count: int


class DeleteCommentUseCase:
    """Use case for soft deleting a comment and its replies."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
        stats_service: CommenterStatsService,
        cache_service: CacheService,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            user_service: User domain service
            stats_service: Commenter ledger service
            cache_service: Post cache service
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.user_service = user_service
        self.stats_service = stats_service
        self.cache_service = cache_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        The subtree deletion and the ledger walk-back share the request's
        transaction, so either all of it lands or none of it does.

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

        deleted = await self.comment_service.delete_comment(comment, user.id)

        await self.stats_service.record_removals(
            (c.user_id for c in deleted), post.author_id
        )
        await self.post_service.release_pinned_comment(post, (c.id for c in deleted))
        await self.cache_service.invalidate_post(post.slug)

        return DeleteCommentResponse(
            message="Comment deleted successfully", deleted_count=len(deleted)
        )
