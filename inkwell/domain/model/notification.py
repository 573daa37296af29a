"""Notification entity."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from inkwell.domain.model.common import DomainModel
from inkwell.domain.value import (
    CommentId,
    NotificationId,
    NotificationType,
    PostId,
    UserId,
)


class Notification(DomainModel):
    """Notification delivered to ``user_id`` about something ``actor_id`` did."""

    id: NotificationId
    type: NotificationType
    user_id: UserId
    actor_id: UserId
    post_id: Optional[PostId] = None
    comment_id: Optional[CommentId] = None
    message: str
    read: bool = False
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
