"""Post entity.

Posts are owned by the posts service; the comment subsystem only reads
their ownership, visibility and comment settings.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from inkwell.domain.model.common import DomainModel
from inkwell.domain.value import CommentId, PostId, Slug, UserId


class Post(DomainModel):
    """Post as seen by the comment subsystem."""

    id: PostId
    title: str = Field(min_length=1, max_length=300)
    slug: Slug
    author_id: UserId
    published: bool = True
    allow_comments: bool = True
    pinned_comment_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    deleted_at: Optional[datetime] = None

    def is_authored_by(self, user_id: Optional[UserId]) -> bool:
        """Check whether the given user wrote this post."""
        return user_id is not None and self.author_id == user_id
