"""SQLAlchemy table definitions for Inkwell.

These Core tables mirror the schema created by the Alembic migrations. Users
and posts are owned by neighbouring services; only the columns the comment
system reads or writes are declared here.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

moderation_status_enum = postgresql.ENUM(
    "PENDING", "APPROVED", "HIDDEN", name="moderation_status", create_type=False
)
report_status_enum = postgresql.ENUM(
    "PENDING",
    "REVIEWED",
    "RESOLVED",
    "DISMISSED",
    name="report_status",
    create_type=False,
)
user_role_enum = postgresql.ENUM("USER", "ADMIN", name="user_role", create_type=False)
notification_type_enum = postgresql.ENUM(
    "POST_COMMENT",
    "COMMENT_REPLY",
    "COMMENT_LIKE",
    name="notification_type",
    create_type=False,
)

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("username", String(50), nullable=False, unique=True),
    Column("email", String(255), nullable=True),
    Column("role", user_role_enum, nullable=False, server_default="USER"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),  # Deactivation
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("title", String(300), nullable=False),
    Column("slug", String(200), nullable=False, unique=True),
    Column("author_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("published", Boolean, nullable=False, server_default="true"),
    Column("allow_comments", Boolean, nullable=False, server_default="true"),
    # No FK: comments reference posts, so this would be circular
    Column("pinned_comment_id", UUID, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_posts_author_id", posts_table.c.author_id)

# ============================================================================
# COMMENTS TABLE (self-referential threads)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("post_id", UUID, ForeignKey("posts.id"), nullable=False),
    Column("user_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("parent_id", UUID, ForeignKey("comments.id"), nullable=True),
    Column("content", Text, nullable=False),
    Column(
        "moderation_status",
        moderation_status_enum,
        nullable=False,
        server_default="PENDING",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint(
        "char_length(content) BETWEEN 1 AND 5000", name="comment_content_length"
    ),
)

Index("idx_comments_post_id", comments_table.c.post_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_user_id", comments_table.c.user_id)
Index("idx_comments_created_at", comments_table.c.created_at)
Index("idx_comments_deleted_at", comments_table.c.deleted_at)

# ============================================================================
# COMMENT LIKES TABLE
# ============================================================================
comment_likes_table = Table(
    "comment_likes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("user_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("comment_id", UUID, ForeignKey("comments.id"), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "comment_id", name="uq_comment_like_user_comment"),
)

Index("idx_comment_likes_comment_id", comment_likes_table.c.comment_id)

# ============================================================================
# COMMENTER STATS TABLE (top-commenter ledger)
# ============================================================================
commenter_stats_table = Table(
    "commenter_stats",
    metadata,
    Column("post_author_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("commenter_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    Column("last_comment_at", TIMESTAMP(timezone=True), nullable=False),
    UniqueConstraint(
        "post_author_id", "commenter_id", name="uq_commenter_stats_author_commenter"
    ),
    CheckConstraint("comment_count >= 0", name="comment_count_non_negative"),
)

Index(
    "idx_commenter_stats_author_count",
    commenter_stats_table.c.post_author_id,
    commenter_stats_table.c.comment_count,
)

# ============================================================================
# COMMENT REPORTS TABLE
# ============================================================================
comment_reports_table = Table(
    "comment_reports",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("comment_id", UUID, ForeignKey("comments.id"), nullable=False),
    Column("reporter_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("reason", String(500), nullable=False),
    Column("status", report_status_enum, nullable=False, server_default="PENDING"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("comment_id", "reporter_id", name="uq_comment_report_reporter"),
)

Index("idx_comment_reports_created_at", comment_reports_table.c.created_at)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("type", notification_type_enum, nullable=False),
    Column("user_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("actor_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("post_id", UUID, ForeignKey("posts.id"), nullable=True),
    Column("comment_id", UUID, ForeignKey("comments.id"), nullable=True),
    Column("message", Text, nullable=False),
    Column("read", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_notifications_user_created",
    notifications_table.c.user_id,
    notifications_table.c.created_at,
)
