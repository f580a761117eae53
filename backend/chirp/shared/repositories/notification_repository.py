"""
Notification Repository

Database operations specific to the Notification model.
"""

from uuid import UUID

from sqlalchemy import select, update

from chirp.shared.models.notification import Notification
from chirp.shared.repositories.base import BaseRepository


class NotificationRepository(BaseRepository[Notification]):
    """Repository for Notification model operations."""

    def __init__(self, session) -> None:
        super().__init__(Notification, session)

    async def list_for_user(self, user_id: UUID, *, unread_only: bool = False) -> list[Notification]:
        """Notifications addressed to a user, newest first."""
        query = select(Notification).where(Notification.user_id == user_id)
        if unread_only:
            query = query.where(Notification.is_read.is_(False))
        result = await self.session.execute(query.order_by(Notification.created_at.desc()))
        return list(result.scalars().all())

    async def mark_read(self, notification: Notification) -> Notification:
        notification.is_read = True
        return await self.save(notification)

    async def mark_all_read(self, user_id: UUID) -> int:
        """
        Mark every unread notification of a user as read.

        Returns:
            Number of notifications updated

        SQL Generated:
            UPDATE notifications SET is_read = true
            WHERE user_id = '...' AND is_read = false
        """
        result = await self.session.execute(
            update(Notification)
            .where(Notification.user_id == user_id, Notification.is_read.is_(False))
            .values(is_read=True)
            .execution_options(synchronize_session="fetch")
        )
        await self.session.flush()
        return result.rowcount or 0
