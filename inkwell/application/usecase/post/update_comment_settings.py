"""Update comment settings use case."""

from pydantic import BaseModel

from inkwell.domain.service import CacheService, PostService, UserService
from inkwell.domain.value import PostId, UserId, parse_id


class UpdateCommentSettingsRequest(BaseModel):
    """Update comment settings request."""

    post_id: str  # UUID string
    user_id: str | None  # Current user ID (must be the post author)
    allow_comments: bool


class UpdateCommentSettingsResponse(BaseModel):
    """Update comment settings response."""

    post_id: str
    allow_comments: bool


class UpdateCommentSettingsUseCase:
    """Use case for a post author turning comments on or off."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        cache_service: CacheService,
    ) -> None:
        """Initialize update comment settings use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
            cache_service: Post cache service
        """
        self.post_service = post_service
        self.user_service = user_service
        self.cache_service = cache_service

    async def execute(
        self, request: UpdateCommentSettingsRequest
    ) -> UpdateCommentSettingsResponse:
        """Execute update comment settings flow.

        Raises:
            AuthenticationRequiredError: If there is no active principal
            NotFoundError: If the post is missing or deleted
            NotAuthorizedError: If the user is not the post author
        """
        user = await self.user_service.get_active_user(
            UserId(parse_id(request.user_id)) if request.user_id else None
        )
        post = await self.post_service.get_live_post(PostId(parse_id(request.post_id)))

        updated = await self.post_service.set_allow_comments(
            post, user.id, request.allow_comments
        )
        await self.cache_service.invalidate_post(updated.slug)

        return UpdateCommentSettingsResponse(
            post_id=str(updated.id), allow_comments=updated.allow_comments
        )
