"""SQLAlchemy table definitions for the forum.

These table definitions are used by the Core-level repositories and match
the schema created by the Alembic migrations.
"""

from sqlalchemy import (
    Column,
    ForeignKey,
    Identity,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", Integer, Identity(), primary_key=True),
    Column("username", String(50), nullable=False),
    Column("email", String(100), nullable=False),  # Stored lower-cased
    Column("password_hash", String(255), nullable=False),
    Column("role", String(20), nullable=False, server_default="User"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=func.now()
    ),
)

# Case-insensitive uniqueness
Index("ux_users_username_lower", func.lower(users_table.c.username), unique=True)
Index("ux_users_email", users_table.c.email, unique=True)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", Integer, Identity(), primary_key=True),
    Column("title", String(200), nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "author_id",
        Integer,
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=func.now()
    ),
)

Index("idx_posts_created_at", posts_table.c.created_at)
Index("idx_posts_author_id", posts_table.c.author_id)
Index("idx_posts_author_created", posts_table.c.author_id, posts_table.c.created_at)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Integer, Identity(), primary_key=True),
    Column("content", String(2000), nullable=False),
    Column(
        "post_id", Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "author_id",
        Integer,
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=func.now()
    ),
)

Index("idx_comments_post_id", comments_table.c.post_id)
Index("idx_comments_author_id", comments_table.c.author_id)
Index("idx_comments_created_at", comments_table.c.created_at)
Index(
    "idx_comments_post_created", comments_table.c.post_id, comments_table.c.created_at
)

# ============================================================================
# LIKES TABLE
# ============================================================================
likes_table = Table(
    "likes",
    metadata,
    Column("id", Integer, Identity(), primary_key=True),
    Column(
        "post_id", Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=func.now()
    ),
    UniqueConstraint("post_id", "user_id", name="uq_likes_post_user"),
)

Index("idx_likes_post_id", likes_table.c.post_id)
Index("idx_likes_user_id", likes_table.c.user_id)

# ============================================================================
# POST_TAGS TABLE (moderation tags)
# ============================================================================
post_tags_table = Table(
    "post_tags",
    metadata,
    Column("id", Integer, Identity(), primary_key=True),
    Column(
        "post_id", Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False
    ),
    Column("tag", String(50), nullable=False),
    Column(
        "created_by_user_id",
        Integer,
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=func.now()
    ),
    UniqueConstraint("post_id", "tag", name="uq_post_tags_post_tag"),
)

Index("idx_post_tags_post_id", post_tags_table.c.post_id)
Index("idx_post_tags_created_by", post_tags_table.c.created_by_user_id)
Index("idx_post_tags_tag_created", post_tags_table.c.tag, post_tags_table.c.created_at)
