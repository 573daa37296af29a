"""Response models shared across use cases."""

import math
from datetime import datetime

from pydantic import BaseModel

from inkwell.domain.model import Comment, CommentReport, User
from inkwell.domain.value import ModerationStatus, ReportStatus


class AuthorItem(BaseModel):
    """Public author summary."""

    id: str
    username: str

    @classmethod
    def from_user(cls, user: User) -> "AuthorItem":
        return cls(id=str(user.id), username=user.username.root)


class CommentItem(BaseModel):
    """Comment as returned by the API."""

    id: str
    post_id: str
    user_id: str
    parent_id: str | None
    content: str
    moderation_status: ModerationStatus
    created_at: datetime
    updated_at: datetime
    author: AuthorItem
    like_count: int
    is_top_commenter: bool

    @classmethod
    def build(
        cls,
        comment: Comment,
        author: User,
        like_count: int = 0,
        is_top_commenter: bool = False,
    ) -> "CommentItem":
        """Build an item from a comment and its derived fields."""
        return cls(
            id=str(comment.id),
            post_id=str(comment.post_id),
            user_id=str(comment.user_id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            content=comment.content,
            moderation_status=comment.moderation_status,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            author=AuthorItem.from_user(author),
            like_count=like_count,
            is_top_commenter=is_top_commenter,
        )


class ReportItem(BaseModel):
    """Comment report as returned by the API."""

    id: str
    comment_id: str
    reporter_id: str
    reason: str
    status: ReportStatus
    created_at: datetime

    @classmethod
    def from_report(cls, report: CommentReport) -> "ReportItem":
        return cls(
            id=str(report.id),
            comment_id=str(report.comment_id),
            reporter_id=str(report.reporter_id),
            reason=report.reason,
            status=report.status,
            created_at=report.created_at,
        )


class Pagination(BaseModel):
    """Pagination block for paged listings."""

    page: int
    limit: int
    total: int
    total_pages: int

    @classmethod
    def of(cls, page: int, limit: int, total: int) -> "Pagination":
        return cls(
            page=page,
            limit=limit,
            total=total,
            total_pages=math.ceil(total / limit) if limit else 0,
        )
