"""SQLAlchemy table definitions for the forum.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Enum,
    Float,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# DISCUSSIONS TABLE
# ============================================================================
discussions_table = Table(
    "discussions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", Text, nullable=True),
    Column("document_path", Text, nullable=True),
    Column("closed", Boolean, nullable=False, server_default="false"),
    Column(
        "anonymity",
        Enum(
            "ALLOWED",
            "ENFORCED",
            "FORBIDDEN",
            name="discussion_anonymity",
            create_type=False,
        ),
        nullable=False,
        server_default="ALLOWED",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("first_name", String(255), nullable=True),
    Column("last_name", String(255), nullable=True),
    Column("username", String(255), nullable=True, unique=True),
    Column("avatar_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# CREDENTIALS TABLE
# ============================================================================
credentials_table = Table(
    "credentials",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("description", Text, nullable=False),
    Column("verified", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_credentials_user_id", credentials_table.c.user_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "discussion_id",
        UUID,
        ForeignKey("discussions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("content", Text, nullable=False),
    Column("published", Boolean, nullable=False, server_default="true"),
    Column("admin_unpublished", Boolean, nullable=False, server_default="false"),
    Column("up_votes", Integer, nullable=False, server_default="0"),
    Column("down_votes", Integer, nullable=False, server_default="0"),
    Column("hotness", Float, nullable=False, server_default="0"),
    # [{"user_id": "...", "vote": 1 | -1}, ...]
    Column("votes", JSONB, nullable=False, server_default="[]"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_discussion_id", comments_table.c.discussion_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_user_id", comments_table.c.user_id)

# ============================================================================
# DISCUSSION PREFERENCES TABLE
# ============================================================================
discussion_preferences_table = Table(
    "discussion_preferences",
    metadata,
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "discussion_id",
        UUID,
        ForeignKey("discussions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("anonymous", Boolean, nullable=True),
    Column(
        "credential_id",
        UUID,
        ForeignKey("credentials.id", ondelete="SET NULL"),
        nullable=True,
    ),
    UniqueConstraint("user_id", "discussion_id", name="uq_discussion_preference"),
)

Index(
    "idx_discussion_preferences_discussion_id",
    discussion_preferences_table.c.discussion_id,
)
