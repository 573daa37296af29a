"""User entity."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from inkwell.domain.model.common import DomainModel
from inkwell.domain.value import UserId, Username, UserRole


class User(DomainModel):
    """User account.

    A user with ``deleted_at`` set is deactivated: their comments disappear
    from threads and they can no longer act.
    """

    id: UserId
    username: Username
    email: Optional[str] = None
    role: UserRole = UserRole.USER
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    deleted_at: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        return self.deleted_at is None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
