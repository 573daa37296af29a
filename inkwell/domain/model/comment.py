"""Comment entity.

Comments are threaded discussions on posts. A reply points at its parent
through ``parent_id``; nesting is capped (see ``CommentSettings``) and depth is
computed by walking parent links rather than stored.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from inkwell.domain.model.common import DomainModel
from inkwell.domain.value import CommentId, ModerationStatus, PostId, UserId


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a post or a reply to another comment.

    - parent_id: Direct parent comment (None for top-level)
    - moderation_status: Set by the post author; HIDDEN comments are only
      shown to the post author
    - deleted_at: Soft delete marker; a deleted comment's replies are
      deleted with it
    """

    id: CommentId
    post_id: PostId
    user_id: UserId
    content: str = Field(min_length=1)
    parent_id: Optional[CommentId] = None
    moderation_status: ModerationStatus = ModerationStatus.PENDING
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        """Whether the comment has been soft deleted."""
        return self.deleted_at is not None

    @property
    def is_top_level(self) -> bool:
        """Whether the comment is a direct comment on the post."""
        return self.parent_id is None
