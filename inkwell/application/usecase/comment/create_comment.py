"""Create comment use case."""

from pydantic import BaseModel

from inkwell.application.usecase.common import CommentItem
from inkwell.domain.service import (
    CacheService,
    CommentService,
    CommenterStatsService,
    NotificationService,
    PostService,
    UserService,
)
from inkwell.domain.value import CommentId, PostId, UserId, parse_id


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    user_id: str | None  # User ID from the verified token, if any
    content: str
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(CommentItem):
    """Create comment response."""

    pass


class CreateCommentUseCase:
    """Use case for commenting on a post or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
        stats_service: CommenterStatsService,
        cache_service: CacheService,
        notification_service: NotificationService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            user_service: User domain service
            stats_service: Commenter ledger service
            cache_service: Post cache service
            notification_service: Notification service
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.user_service = user_service
        self.stats_service = stats_service
        self.cache_service = cache_service
        self.notification_service = notification_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Resolve the active principal
        2. Load the post and check it accepts comments
        3. For replies, load the parent (live, same post)
        4. Create the comment (depth guard runs for replies)
        5. Count it in the commenter ledger
        6. Invalidate cached renderings and notify, both best-effort

        Args:
            request: Create comment request

        Returns:
            The created comment

        Raises:
            AuthenticationRequiredError: If there is no active principal
            NotFoundError: If the post or parent comment is missing
            CommentsDisabledError: If the post has comments turned off
            ThreadDepthExceededError: If the parent is at the depth cap
        """
        user = await self.user_service.get_active_user(
            UserId(parse_id(request.user_id)) if request.user_id else None
        )
        post = await self.post_service.get_commentable_post(
            PostId(parse_id(request.post_id))
        )

        parent = None
        if request.parent_id:
            parent = await self.comment_service.get_live_comment_in_post(
                post.id, CommentId(parse_id(request.parent_id))
            )

        comment = await self.comment_service.create_comment(
            post=post,
            author_id=user.id,
            content=request.content,
            parent=parent,
        )

        await self.stats_service.record_comment(user.id, post.author_id)
        await self.cache_service.invalidate_post(post.slug)
        await self.notification_service.notify_comment(post, comment, user, parent)

        is_top = await self.stats_service.is_top_commenter(user.id, post.author_id)

        return CreateCommentResponse.build(comment, user, is_top_commenter=is_top)
