"""Comment like entity.

A user can like a given comment at most once. Like counts are always
derived from these rows, never stored on the comment.
"""

from datetime import datetime, timezone

from pydantic import Field

from inkwell.domain.model.common import DomainModel
from inkwell.domain.value import CommentId, CommentLikeId, UserId


class CommentLike(DomainModel):
    """A user's like on a comment (unique per user and comment)."""

    id: CommentLikeId
    user_id: UserId
    comment_id: CommentId
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
