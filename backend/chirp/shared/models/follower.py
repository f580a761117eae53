"""
Follower Entity Model

Directed follow relationship: follower_id follows following_id.

Constraints:
============
    - (follower_id, following_id) is unique: no duplicate follows
    - follower_id != following_id: no self-follows
"""

from typing import TYPE_CHECKING
import uuid

from sqlalchemy import CheckConstraint, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from chirp.shared.models.base import Base, TimestampMixin


if TYPE_CHECKING:
    from chirp.shared.models.user import User


class Follower(Base, TimestampMixin):
    """Follower model."""

    __tablename__ = "followers"
    __table_args__ = (
        UniqueConstraint("follower_id", "following_id", name="uq_followers_pair"),
        CheckConstraint("follower_id <> following_id", name="ck_followers_not_self"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    # The user who follows
    follower_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # The user being followed
    following_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    follower: Mapped["User"] = relationship(
        "User",
        foreign_keys=[follower_id],
        lazy="selectin",
    )

    following: Mapped["User"] = relationship(
        "User",
        foreign_keys=[following_id],
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<Follower({self.follower_id} -> {self.following_id})>"
