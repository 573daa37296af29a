"""Domain value objects for Inkwell.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from inkwell.domain.value.common import RootValueObject, ValueObject
from inkwell.domain.value.identifiers import UserId


class ModerationStatus(str, Enum):
    """Moderation status of a comment.

    Only HIDDEN comments are withheld from readers; PENDING and APPROVED
    comments are visible to everyone.
    """

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    HIDDEN = "HIDDEN"

    @property
    def is_visible(self) -> bool:
        """Whether readers other than the post author can see the comment."""
        return self is not ModerationStatus.HIDDEN


class ModerationAction(str, Enum):
    """Action a post author can take on a comment."""

    APPROVE = "approve"
    HIDE = "hide"

    @property
    def target_status(self) -> ModerationStatus:
        """Status a comment ends up in after this action."""
        if self is ModerationAction.APPROVE:
            return ModerationStatus.APPROVED
        return ModerationStatus.HIDDEN


class ReportStatus(str, Enum):
    """Review status of a comment report."""

    PENDING = "PENDING"
    REVIEWED = "REVIEWED"
    RESOLVED = "RESOLVED"
    DISMISSED = "DISMISSED"


class UserRole(str, Enum):
    """Role of a user account."""

    USER = "USER"
    ADMIN = "ADMIN"


class NotificationType(str, Enum):
    """Kinds of notification raised by comment activity."""

    POST_COMMENT = "POST_COMMENT"
    COMMENT_REPLY = "COMMENT_REPLY"
    COMMENT_LIKE = "COMMENT_LIKE"


class Username(RootValueObject[str]):
    """Public username of an account."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username is non-empty and within length limits."""
        if len(v) < 1 or len(v) > 50:
            raise ValueError("Username must be 1-50 characters")
        return v


class Slug(RootValueObject[str]):
    """URL-safe slug for posts.

    Must be lowercase, alphanumeric with hyphens, 1-200 characters.
    Examples: 'hello-world', 'notes-on-async-python'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        if len(v) > 200:
            raise ValueError("Slug must be 1-200 characters")
        return v


class AuthorSummary(ValueObject):
    """Public summary of a comment's author."""

    id: UserId
    username: Username
