"""PostgreSQL implementation of Notification repository."""

from typing import List

from sqlalchemy import desc, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model import Notification
from inkwell.domain.repository import NotificationRepository
from inkwell.domain.value import UserId
from inkwell.persistence.mappers import notification_to_dict, row_to_notification
from inkwell.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, notification: Notification) -> Notification:
        """Insert a notification inside a SAVEPOINT.

        A failed insert rolls back to the savepoint only, leaving the
        request's transaction usable.
        """
        stmt = insert(notifications_table).values(
            **notification_to_dict(notification)
        )
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return notification

    async def find_by_user(self, user_id: UserId, limit: int = 20) -> List[Notification]:
        """Find a user's notifications, newest first."""
        stmt = (
            select(notifications_table)
            .where(notifications_table.c.user_id == user_id)
            .order_by(desc(notifications_table.c.created_at))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(row._asdict()) for row in result.fetchall()]
