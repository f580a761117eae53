"""
Notification Entity Model

An event addressed to one user: a new follower, a like on one of their
posts, or a new direct message. Notifications are persisted first and then
pushed to the user's open WebSocket connections, if any.
"""

from typing import TYPE_CHECKING
import uuid

from sqlalchemy import Boolean, Enum as SQLEnum, ForeignKey, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from chirp.shared.models.base import Base, TimestampMixin
from chirp.shared.models.enums import NotificationType


if TYPE_CHECKING:
    from chirp.shared.models.user import User


class Notification(Base, TimestampMixin):
    """Notification model."""

    __tablename__ = "notifications"
    __table_args__ = (
        Index("ix_notifications_user_created", "user_id", "created_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    type: Mapped[NotificationType] = mapped_column(
        SQLEnum(
            NotificationType,
            name="notification_type",
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
    )

    content: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
    )

    is_read: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
    )

    user: Mapped["User"] = relationship("User", back_populates="notifications")

    def __repr__(self) -> str:
        return f"<Notification(id={self.id}, type={self.type})>"
