# pylint: skip-file
# ruff: noqa
"""Initial schema - create all tables

Revision ID: 001
Revises:
Create Date: 2025-01-15 00:00:00

This migration creates all database tables for the Chirp application.

Tables created:
- users: Accounts, with logical-delete columns
- posts: User posts
- likes: One like per (user, post)
- followers: Directed follow graph, no self-follows
- messages: Direct messages with per-participant hiding
- notifications: Events addressed to a user

Enums created:
- notification_type: newFollower, newLike, newMessage
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


notification_type_enum = sa.Enum(
    "newFollower",
    "newLike",
    "newMessage",
    name="notification_type",
)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    ]


def _user_fk(name: str, index: bool = True) -> sa.Column:
    return sa.Column(
        name,
        sa.Uuid(),
        sa.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=index,
    )


def upgrade() -> None:
    """Upgrade database schema."""
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("username", sa.String(255), nullable=False, unique=True, index=True),
        sa.Column("fullname", sa.String(255), nullable=False),
        sa.Column("description", sa.String(200), nullable=True),
        sa.Column("profile_picture", sa.String(512), nullable=True),
        sa.Column("email", sa.String(320), nullable=False, unique=True, index=True),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("original_email", sa.String(320), nullable=True, index=True),
        sa.Column("original_username", sa.String(255), nullable=True),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "posts",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("header", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("image", sa.String(2048), nullable=True),
        _user_fk("user_id"),
        *_timestamps(),
    )

    op.create_table(
        "likes",
        sa.Column("id", sa.Uuid(), primary_key=True),
        _user_fk("user_id"),
        sa.Column(
            "post_id",
            sa.Uuid(),
            sa.ForeignKey("posts.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        *_timestamps(),
        sa.UniqueConstraint("user_id", "post_id", name="uq_likes_user_post"),
    )

    op.create_table(
        "followers",
        sa.Column("id", sa.Uuid(), primary_key=True),
        _user_fk("follower_id"),
        _user_fk("following_id"),
        *_timestamps(),
        sa.UniqueConstraint("follower_id", "following_id", name="uq_followers_pair"),
        sa.CheckConstraint("follower_id <> following_id", name="ck_followers_not_self"),
    )

    op.create_table(
        "messages",
        sa.Column("id", sa.Uuid(), primary_key=True),
        _user_fk("sender_id", index=False),
        _user_fk("receiver_id"),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("is_read", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("sender_deleted", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("receiver_deleted", sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
    )
    op.create_index(
        "ix_messages_pair_created", "messages", ["sender_id", "receiver_id", "created_at"]
    )

    op.create_table(
        "notifications",
        sa.Column("id", sa.Uuid(), primary_key=True),
        _user_fk("user_id", index=False),
        sa.Column("type", notification_type_enum, nullable=False),
        sa.Column("content", sa.String(500), nullable=False),
        sa.Column("is_read", sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
    )
    op.create_index("ix_notifications_user_created", "notifications", ["user_id", "created_at"])


def downgrade() -> None:
    """Downgrade database schema."""
    # Drop tables in reverse order (respect foreign keys)
    op.drop_index("ix_notifications_user_created", table_name="notifications")
    op.drop_table("notifications")
    op.drop_index("ix_messages_pair_created", table_name="messages")
    op.drop_table("messages")
    op.drop_table("followers")
    op.drop_table("likes")
    op.drop_table("posts")
    op.drop_table("users")

    notification_type_enum.drop(op.get_bind(), checkfirst=True)
