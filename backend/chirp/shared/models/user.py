"""
User Entity Model

Represents a registered application user.

Model Hierarchy:
================
    User
       ├── posts (Post[])               - Posts authored by the user
       └── notifications (Notification[]) - Notifications addressed to the user

SAMPLE USER RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id                │ 550e8400-e29b-41d4-a716-446655440000                     │
│ username          │ "ada"                                                    │
│ fullname          │ "Ada Lovelace"                                           │
│ email             │ "ada@example.com"                                        │
│ password_hash     │ "$2b$10$..."                                             │
│ description       │ "First programmer"                                       │
│ profile_picture   │ "uploads/profilePicture-1736937000000-123456789.png"     │
│ deleted_at        │ NULL                                                     │
│ created_at        │ 2025-01-01T00:00:00Z                                     │
└──────────────────────────────────────────────────────────────────────────────┘

LOGICAL DELETE:
    When a user deletes their account the row is kept. deleted_at is set,
    email and username are replaced by unreachable placeholders, and the
    real values move to original_email/original_username so that the
    account can later be restored.
"""

from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from chirp.shared.models.base import Base, TimestampMixin, SoftDeleteMixin


if TYPE_CHECKING:
    from chirp.shared.models.post import Post
    from chirp.shared.models.notification import Notification


class User(Base, TimestampMixin, SoftDeleteMixin):
    """
    User model representing a registered application user.

    Attributes:
        id: Unique identifier (UUID v4)
        username: Public handle (unique)
        fullname: Display name
        email: Login address (unique, stored lowercase)
        password_hash: Bcrypt hashed password
        description: Optional short bio (max 200 characters)
        profile_picture: Relative path of the uploaded picture
        original_email: Real email while logically deleted
        original_username: Real username while logically deleted
    """

    __tablename__ = "users"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # PROFILE
    # ═══════════════════════════════════════════════════════════════════════════

    username: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )

    fullname: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    description: Mapped[Optional[str]] = mapped_column(
        String(200),
        nullable=True,
    )

    profile_picture: Mapped[Optional[str]] = mapped_column(
        String(512),
        nullable=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # AUTHENTICATION
    # ═══════════════════════════════════════════════════════════════════════════

    email: Mapped[str] = mapped_column(
        String(320),
        unique=True,
        nullable=False,
        index=True,
    )

    password_hash: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # LOGICAL DELETE
    # ═══════════════════════════════════════════════════════════════════════════

    original_email: Mapped[Optional[str]] = mapped_column(
        String(320),
        nullable=True,
        index=True,
    )

    original_username: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    posts: Mapped[list["Post"]] = relationship(
        "Post",
        back_populates="author",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    notifications: Mapped[list["Notification"]] = relationship(
        "Notification",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<User(id={self.id}, username={self.username})>"
