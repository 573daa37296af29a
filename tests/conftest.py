"""Test configuration and helpers."""

import re
from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

from inkwell.config import Settings
from inkwell.domain.model import Comment, Post, User
from inkwell.domain.value import (
    CommentId,
    ModerationStatus,
    PostId,
    Slug,
    UserId,
    Username,
    UserRole,
)
from inkwell.util.jwt import create_token


def make_slug(title: str, post_id: UUID | str | None = None) -> Slug:
    """Generate a valid slug for a test post title."""
    slug_str = re.sub(r"[^a-z0-9]+", "-", title.lower())
    slug_str = re.sub(r"-+", "-", slug_str).strip("-")[:100]

    if not slug_str and post_id:
        slug_str = f"post-{str(post_id)[:8]}"
    elif not slug_str:
        slug_str = "test-post"

    return Slug(slug_str)


def make_user(
    username: str, role: UserRole = UserRole.USER, deactivated: bool = False
) -> User:
    """Build a user; ``deactivated`` sets ``deleted_at``."""
    return User(
        id=UserId(uuid4()),
        username=Username(username),
        role=role,
        deleted_at=datetime.now(timezone.utc) if deactivated else None,
    )


def make_post(
    author: User,
    title: str = "Hello World",
    published: bool = True,
    allow_comments: bool = True,
) -> Post:
    """Build a post by ``author`` with a slug unique to this post."""
    post_id = PostId(uuid4())
    return Post(
        id=post_id,
        title=title,
        slug=Slug(f"{make_slug(title, post_id)}-{str(post_id)[:8]}"),
        author_id=author.id,
        published=published,
        allow_comments=allow_comments,
    )


def make_comment(
    post: Post,
    author: User,
    content: str = "A comment",
    parent: Comment | None = None,
    status: ModerationStatus = ModerationStatus.PENDING,
    minutes_ago: int = 0,
) -> Comment:
    """Build a comment directly, bypassing the service rules."""
    created_at = datetime.now(timezone.utc) - timedelta(minutes=minutes_ago)
    return Comment(
        id=CommentId(uuid4()),
        post_id=post.id,
        user_id=author.id,
        content=content,
        parent_id=parent.id if parent else None,
        moderation_status=status,
        created_at=created_at,
        updated_at=created_at,
    )


def token_for(user: User) -> str:
    """Sign a token for ``user`` with the configured shared secret."""
    return create_token(str(user.id), Settings().auth)
