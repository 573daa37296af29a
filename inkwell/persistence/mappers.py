"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from inkwell.domain.model import (
    Comment,
    CommentLike,
    CommentReport,
    CommenterStats,
    Notification,
    Post,
    User,
)
from inkwell.domain.value import (
    CommentId,
    CommentLikeId,
    CommentReportId,
    ModerationStatus,
    NotificationId,
    NotificationType,
    PostId,
    ReportStatus,
    Slug,
    UserId,
    Username,
    UserRole,
)


def _uuid(value: Any) -> UUID:
    """Normalize a UUID column value (asyncpg returns UUID, tests may pass str)."""
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> UUID | None:
    return _uuid(value) if value is not None else None


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=row.get("email"),
        role=UserRole(row["role"]),
        created_at=row["created_at"],
        deleted_at=row.get("deleted_at"),
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    data = user.model_dump()
    data["role"] = user.role.value
    return data


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model."""
    pinned = _optional_uuid(row.get("pinned_comment_id"))
    return Post(
        id=PostId(_uuid(row["id"])),
        title=row["title"],
        slug=Slug(row["slug"]),
        author_id=UserId(_uuid(row["author_id"])),
        published=row["published"],
        allow_comments=row["allow_comments"],
        pinned_comment_id=CommentId(pinned) if pinned else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return post.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    parent_id = _optional_uuid(row.get("parent_id"))
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        content=row["content"],
        parent_id=CommentId(parent_id) if parent_id else None,
        moderation_status=ModerationStatus(row["moderation_status"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    data = comment.model_dump()
    data["moderation_status"] = comment.moderation_status.value
    return data


def row_to_comment_like(row: Dict[str, Any]) -> CommentLike:
    """Convert database row to CommentLike domain model."""
    return CommentLike(
        id=CommentLikeId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
        created_at=row["created_at"],
    )


def comment_like_to_dict(like: CommentLike) -> Dict[str, Any]:
    """Convert CommentLike domain model to database dict."""
    return like.model_dump()


def row_to_commenter_stats(row: Dict[str, Any]) -> CommenterStats:
    """Convert database row to CommenterStats domain model."""
    return CommenterStats(
        post_author_id=UserId(_uuid(row["post_author_id"])),
        commenter_id=UserId(_uuid(row["commenter_id"])),
        comment_count=row["comment_count"],
        last_comment_at=row["last_comment_at"],
    )


def row_to_comment_report(row: Dict[str, Any]) -> CommentReport:
    """Convert database row to CommentReport domain model."""
    return CommentReport(
        id=CommentReportId(_uuid(row["id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
        reporter_id=UserId(_uuid(row["reporter_id"])),
        reason=row["reason"],
        status=ReportStatus(row["status"]),
        created_at=row["created_at"],
    )


def comment_report_to_dict(report: CommentReport) -> Dict[str, Any]:
    """Convert CommentReport domain model to database dict."""
    data = report.model_dump()
    data["status"] = report.status.value
    return data


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    post_id = _optional_uuid(row.get("post_id"))
    comment_id = _optional_uuid(row.get("comment_id"))
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        type=NotificationType(row["type"]),
        user_id=UserId(_uuid(row["user_id"])),
        actor_id=UserId(_uuid(row["actor_id"])),
        post_id=PostId(post_id) if post_id else None,
        comment_id=CommentId(comment_id) if comment_id else None,
        message=row["message"],
        read=row["read"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    data = notification.model_dump()
    data["type"] = notification.type.value
    return data
