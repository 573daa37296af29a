"""In-memory notification repository for testing."""

from inkwell.domain.model.notification import Notification
from inkwell.domain.repository.notification import NotificationRepository
from inkwell.domain.value import UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing.

    Set ``fail`` to make every save raise, to exercise best-effort delivery.
    """

    def __init__(self) -> None:
        self._notifications: list[Notification] = []
        self.fail = False

    async def save(self, notification: Notification) -> Notification:
        """Save a notification."""
        if self.fail:
            raise RuntimeError("Notification store unavailable")
        self._notifications.append(notification)
        return notification

    async def find_by_user(self, user_id: UserId, limit: int = 20) -> list[Notification]:
        """Find a user's notifications, newest first."""
        matching = [n for n in self._notifications if n.user_id == user_id]
        matching.sort(key=lambda n: n.created_at, reverse=True)
        return matching[:limit]
