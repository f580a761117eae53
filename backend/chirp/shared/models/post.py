"""
Post Entity Model

A short article published by a user: a header, a body and an optional
image URL.

Model Hierarchy:
================
    Post
       ├── author (User)
       └── likes (Like[])   - deleted together with the post

Cascade:
========
    Deleting a post deletes its likes. The ORM relationship carries
    "all, delete-orphan" and the foreign key carries ON DELETE CASCADE,
    so the rule holds for ORM deletes and for bulk SQL deletes alike.
"""

from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from chirp.shared.models.base import Base, TimestampMixin


if TYPE_CHECKING:
    from chirp.shared.models.user import User
    from chirp.shared.models.like import Like


class Post(Base, TimestampMixin):
    """
    Post model.

    Attributes:
        id: Unique identifier
        header: Title line
        content: Body text
        image: Optional http(s) image URL
        user_id: Author (FK → users.id)
    """

    __tablename__ = "posts"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    header: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    image: Mapped[Optional[str]] = mapped_column(
        String(2048),
        nullable=True,
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    # Author is always rendered with the post, so load it eagerly
    author: Mapped["User"] = relationship(
        "User",
        back_populates="posts",
        lazy="selectin",
    )

    likes: Mapped[list["Like"]] = relationship(
        "Like",
        back_populates="post",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Post(id={self.id}, user_id={self.user_id})>"
