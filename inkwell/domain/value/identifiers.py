"""Strongly typed identifiers for Inkwell domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

from inkwell.domain.error import ValidationError

UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
CommentLikeId = NewType("CommentLikeId", UUID)
CommentReportId = NewType("CommentReportId", UUID)
NotificationId = NewType("NotificationId", UUID)


def parse_id(value: str) -> UUID:
    """Parse an identifier received from a caller.

    Raises:
        ValidationError: If the value is not a UUID
    """
    try:
        return UUID(value)
    except ValueError as e:
        raise ValidationError(f"Invalid identifier: {value!r}") from e
