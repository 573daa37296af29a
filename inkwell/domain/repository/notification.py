"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List

from inkwell.domain.model.notification import Notification
from inkwell.domain.value import UserId


class NotificationRepository(ABC):
    """Repository for Notification entity."""

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Save a notification (create).

        Implementations must isolate a failed insert so that it does not
        abort the caller's surrounding transaction.
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId, limit: int = 20) -> List[Notification]:
        """Find a user's notifications, newest first."""
        pass
