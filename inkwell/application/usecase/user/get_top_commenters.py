"""Get top commenters use case."""

from datetime import datetime
from pydantic import BaseModel, Field

from inkwell.application.usecase.common import AuthorItem
from inkwell.domain.service import CommenterStatsService, UserService
from inkwell.domain.value import UserId, parse_id


class TopCommenterItem(BaseModel):
    """One of an author's top commenters."""

    user: AuthorItem
    comment_count: int
    last_comment_at: datetime


class GetTopCommentersRequest(BaseModel):
    """Get top commenters request."""

    user_id: str  # Post author's user ID (UUID string)
    limit: int = Field(default=10, ge=1, le=100)


class GetTopCommentersResponse(BaseModel):
    """Get top commenters response."""

    user_id: str
    threshold: int
    commenters: list[TopCommenterItem]


class GetTopCommentersUseCase:
    """Use case for listing the most active commenters on an author's posts."""

    def __init__(
        self, user_service: UserService, stats_service: CommenterStatsService
    ) -> None:
        """Initialize get top commenters use case.

        Args:
            user_service: User domain service
            stats_service: Commenter ledger service
        """
        self.user_service = user_service
        self.stats_service = stats_service

    async def execute(self, request: GetTopCommentersRequest) -> GetTopCommentersResponse:
        """Execute top commenters flow.

        Deactivated commenters are left out.

        Raises:
            NotFoundError: If the author does not exist
        """
        author = await self.user_service.get_by_id(UserId(parse_id(request.user_id)))

        rows = await self.stats_service.get_top_commenters(author.id, request.limit)
        commenters = await self.user_service.get_users_by_ids(
            row.commenter_id for row in rows
        )

        items = [
            TopCommenterItem(
                user=AuthorItem.from_user(commenters[row.commenter_id]),
                comment_count=row.comment_count,
                last_comment_at=row.last_comment_at,
            )
            for row in rows
            if row.commenter_id in commenters and commenters[row.commenter_id].is_active
        ]

        return GetTopCommentersResponse(
            user_id=str(author.id),
            threshold=self.stats_service.threshold,
            commenters=items,
        )
