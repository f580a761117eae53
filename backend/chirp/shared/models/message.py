"""
Message Entity Model

Direct message between two users.

Per-user deletion:
==================
    Deleting a message only hides it for the participant who deleted it.
    sender_deleted / receiver_deleted record which side has hidden it; the
    other participant keeps seeing the message.
"""

import uuid

from sqlalchemy import Boolean, ForeignKey, Index, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from chirp.shared.models.base import Base, TimestampMixin


class Message(Base, TimestampMixin):
    """
    Message model.

    Attributes:
        sender_id: Author of the message
        receiver_id: Addressee
        content: Trimmed text, 1 to 2000 characters
        is_read: Set by the receiver
        sender_deleted: Hidden for the sender
        receiver_deleted: Hidden for the receiver
    """

    __tablename__ = "messages"
    __table_args__ = (
        Index("ix_messages_pair_created", "sender_id", "receiver_id", "created_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    sender_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    receiver_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    is_read: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
    )

    sender_deleted: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
    )

    receiver_deleted: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
    )

    def is_participant(self, user_id: uuid.UUID) -> bool:
        return user_id in (self.sender_id, self.receiver_id)

    def __repr__(self) -> str:
        return f"<Message(id={self.id}, {self.sender_id} -> {self.receiver_id})>"
