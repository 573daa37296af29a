"""Unit tests for NotificationService."""

import pytest

from inkwell.domain.repository import NotificationRepository
from inkwell.domain.service import NotificationService
from inkwell.domain.value import NotificationType
from tests.conftest import make_comment, make_post, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestNotifyComment:
    """Tests for comment notifications."""

    @pytest.mark.asyncio
    async def test_post_author_is_notified(self, unit_env):
        """A comment by someone else notifies the post author."""
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        notification_repo = await unit_env.get(NotificationRepository)
        author = make_user("alice")
        bob = make_user("bob")
        post = make_post(author, "Async Python")
        comment = make_comment(post, bob)

        # Act
        await notification_service.notify_comment(post, comment, bob)

        # Assert
        notifications = await notification_repo.find_by_user(author.id)
        assert len(notifications) == 1
        assert notifications[0].type == NotificationType.POST_COMMENT
        assert notifications[0].actor_id == bob.id
        assert notifications[0].message == 'bob commented on your post "Async Python"'

    @pytest.mark.asyncio
    async def test_no_notification_for_own_activity(self, unit_env):
        """Commenting on your own post notifies nobody."""
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        notification_repo = await unit_env.get(NotificationRepository)
        author = make_user("alice")
        post = make_post(author)

        # Act
        await notification_service.notify_comment(post, make_comment(post, author), author)

        # Assert
        assert await notification_repo.find_by_user(author.id) == []

    @pytest.mark.asyncio
    async def test_reply_notifies_parent_author(self, unit_env):
        """A reply notifies both the post author and the parent's author."""
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        notification_repo = await unit_env.get(NotificationRepository)
        author = make_user("alice")
        bob = make_user("bob")
        carol = make_user("carol")
        post = make_post(author)
        parent = make_comment(post, bob)
        reply = make_comment(post, carol, parent=parent)

        # Act
        await notification_service.notify_comment(post, reply, carol, parent)

        # Assert
        to_author = await notification_repo.find_by_user(author.id)
        to_bob = await notification_repo.find_by_user(bob.id)
        assert [n.type for n in to_author] == [NotificationType.POST_COMMENT]
        assert [n.type for n in to_bob] == [NotificationType.COMMENT_REPLY]

    @pytest.mark.asyncio
    async def test_store_failure_is_swallowed(self, unit_env):
        """Notification delivery is best-effort."""
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        notification_repo = await unit_env.get(NotificationRepository)
        notification_repo.fail = True
        author = make_user("alice")
        bob = make_user("bob")
        post = make_post(author)

        # Act
        await notification_service.notify_like(post, make_comment(post, author), bob)

        # Assert
        notification_repo.fail = False
        assert await notification_repo.find_by_user(author.id) == []
