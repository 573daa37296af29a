"""Notification domain service."""

from uuid import uuid4

import logfire

from inkwell.domain.model import Comment, Notification, Post, User
from inkwell.domain.repository import NotificationRepository
from inkwell.domain.value import NotificationId, NotificationType, UserId

from .base import Service


class NotificationService(Service):
    """Raises notifications for comment activity.

    Delivery is best-effort: a failure is logged and never propagates to the
    write that triggered it.
    """

    def __init__(self, notification_repository: NotificationRepository) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
        """
        self.notification_repository = notification_repository

    async def notify_comment(
        self, post: Post, comment: Comment, actor: User, parent: Comment | None = None
    ) -> None:
        """Tell the post author about a comment and a parent's author about a reply.

        Nobody is notified about their own activity, and the post author is
        not notified twice when they also wrote the parent.
        """
        notified: set[UserId] = {actor.id}

        if post.author_id not in notified:
            await self._send(
                NotificationType.POST_COMMENT,
                recipient_id=post.author_id,
                actor=actor,
                post=post,
                comment=comment,
                message=f"{actor.username} commented on your post \"{post.title}\"",
            )
            notified.add(post.author_id)

        if parent is not None and parent.user_id not in notified:
            await self._send(
                NotificationType.COMMENT_REPLY,
                recipient_id=parent.user_id,
                actor=actor,
                post=post,
                comment=comment,
                message=f"{actor.username} replied to your comment",
            )

    async def notify_like(self, post: Post, comment: Comment, actor: User) -> None:
        """Tell a comment's author that someone liked it."""
        if comment.user_id == actor.id:
            return
        await self._send(
            NotificationType.COMMENT_LIKE,
            recipient_id=comment.user_id,
            actor=actor,
            post=post,
            comment=comment,
            message=f"{actor.username} liked your comment",
        )

    async def _send(
        self,
        type: NotificationType,
        recipient_id: UserId,
        actor: User,
        post: Post,
        comment: Comment,
        message: str,
    ) -> None:
        notification = Notification(
            id=NotificationId(uuid4()),
            type=type,
            user_id=recipient_id,
            actor_id=actor.id,
            post_id=post.id,
            comment_id=comment.id,
            message=message,
        )
        try:
            await self.notification_repository.save(notification)
            logfire.info(
                "Notification created",
                type=type.value,
                recipient_id=str(recipient_id),
                comment_id=str(comment.id),
            )
        except Exception as e:
            logfire.error(
                "Failed to create notification",
                type=type.value,
                recipient_id=str(recipient_id),
                error=str(e),
            )
