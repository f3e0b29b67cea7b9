"""initial_schema

Create the schema for threaded discussions:
- Discussions (anonymity rule per discussion)
- Users (public profile data shown next to comments)
- Credentials (badges users can attach to their comments)
- Comments (flat rows with parent links, vote counters and hotness)
- Discussion preferences (per-user anonymity and credential choice)

Revision ID: 3c1f5a9e27d4
Revises:
Create Date: 2026-10-19 10:12:04.513877

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f5a9e27d4"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM type (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE discussion_anonymity AS ENUM ('ALLOWED', 'ENFORCED', 'FORBIDDEN');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.create_table(
        "discussions",
        sa.Column(
            "id",
            postgresql.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("title", sa.Text(), nullable=True),
        sa.Column("document_path", sa.Text(), nullable=True),
        sa.Column("closed", sa.Boolean(), server_default="false", nullable=False),
        sa.Column(
            "anonymity",
            postgresql.ENUM(
                "ALLOWED",
                "ENFORCED",
                "FORBIDDEN",
                name="discussion_anonymity",
                create_type=False,
            ),
            server_default="ALLOWED",
            nullable=False,
        ),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "users",
        sa.Column(
            "id",
            postgresql.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("first_name", sa.String(length=255), nullable=True),
        sa.Column("last_name", sa.String(length=255), nullable=True),
        sa.Column("username", sa.String(length=255), nullable=True),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
    )

    op.create_table(
        "credentials",
        sa.Column(
            "id",
            postgresql.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("user_id", postgresql.UUID(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("verified", sa.Boolean(), server_default="false", nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_credentials_user_id", "credentials", ["user_id"])

    op.create_table(
        "comments",
        sa.Column(
            "id",
            postgresql.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("discussion_id", postgresql.UUID(), nullable=False),
        sa.Column("parent_id", postgresql.UUID(), nullable=True),
        sa.Column("user_id", postgresql.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("published", sa.Boolean(), server_default="true", nullable=False),
        sa.Column(
            "admin_unpublished", sa.Boolean(), server_default="false", nullable=False
        ),
        sa.Column("up_votes", sa.Integer(), server_default="0", nullable=False),
        sa.Column("down_votes", sa.Integer(), server_default="0", nullable=False),
        sa.Column("hotness", sa.Float(), server_default="0", nullable=False),
        sa.Column(
            "votes",
            postgresql.JSONB(astext_type=sa.Text()),
            server_default=sa.text("'[]'::jsonb"),
            nullable=False,
        ),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(
            ["discussion_id"], ["discussions.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["parent_id"], ["comments.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.CheckConstraint("up_votes >= 0", name="check_up_votes_non_negative"),
        sa.CheckConstraint("down_votes >= 0", name="check_down_votes_non_negative"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_comments_discussion_id", "comments", ["discussion_id"])
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])
    op.create_index("idx_comments_user_id", "comments", ["user_id"])

    op.create_table(
        "discussion_preferences",
        sa.Column("user_id", postgresql.UUID(), nullable=False),
        sa.Column("discussion_id", postgresql.UUID(), nullable=False),
        sa.Column("anonymous", sa.Boolean(), nullable=True),
        sa.Column("credential_id", postgresql.UUID(), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["discussion_id"], ["discussions.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(
            ["credential_id"], ["credentials.id"], ondelete="SET NULL"
        ),
        sa.UniqueConstraint(
            "user_id", "discussion_id", name="uq_discussion_preference"
        ),
    )
    op.create_index(
        "idx_discussion_preferences_discussion_id",
        "discussion_preferences",
        ["discussion_id"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("discussion_preferences")
    op.drop_table("comments")
    op.drop_table("credentials")
    op.drop_table("users")
    op.drop_table("discussions")
    op.execute("DROP TYPE IF EXISTS discussion_anonymity")
