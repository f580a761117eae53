"""
Message Repository

Database operations specific to the Message model.

Visibility rule:
================
    A message is visible to its sender while sender_deleted is false and
    to its receiver while receiver_deleted is false. Hiding is per user.
"""

from uuid import UUID

from sqlalchemy import and_, or_, select

from chirp.shared.models.message import Message
from chirp.shared.repositories.base import BaseRepository


class MessageRepository(BaseRepository[Message]):
    """Repository for Message model operations."""

    def __init__(self, session) -> None:
        super().__init__(Message, session)

    @staticmethod
    def _visible_to(user_id: UUID):
        return or_(
            and_(Message.sender_id == user_id, Message.sender_deleted.is_(False)),
            and_(Message.receiver_id == user_id, Message.receiver_deleted.is_(False)),
        )

    async def list_for_user(self, user_id: UUID) -> list[Message]:
        """Inbox and outbox of a user, newest first."""
        result = await self.session.execute(
            select(Message)
            .where(self._visible_to(user_id))
            .order_by(Message.created_at.desc())
        )
        return list(result.scalars().all())

    async def conversation(self, user_id: UUID, other_id: UUID) -> list[Message]:
        """
        Messages exchanged between two users in both directions, oldest first,
        as seen by user_id.
        """
        result = await self.session.execute(
            select(Message)
            .where(
                or_(
                    and_(
                        Message.sender_id == user_id,
                        Message.receiver_id == other_id,
                        Message.sender_deleted.is_(False),
                    ),
                    and_(
                        Message.sender_id == other_id,
                        Message.receiver_id == user_id,
                        Message.receiver_deleted.is_(False),
                    ),
                )
            )
            .order_by(Message.created_at.asc())
        )
        return list(result.scalars().all())

    async def hide_for_user(self, message: Message, user_id: UUID) -> Message:
        """Hide a message for one participant only."""
        if message.sender_id == user_id:
            message.sender_deleted = True
        if message.receiver_id == user_id:
            message.receiver_deleted = True
        return await self.save(message)

    async def mark_read(self, message: Message) -> Message:
        message.is_read = True
        return await self.save(message)
