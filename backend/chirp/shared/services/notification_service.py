"""
Notification Service

Stores notifications and pushes them to the addressee's open sockets.

Flow:
=====
    LikeService / FollowerService / MessageService
        │ notify(user_id, type, content)
        ▼
    NotificationRepository.create()      ← persisted first
        │
        ▼
    registry.send_to_user(user_id, payload)   ← best effort, may reach 0 sockets

Push payload:
    {"id": "...", "type": "newLike", "content": "...", "created_at": "2025-..."}
"""

from typing import Any, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from chirp.shared.core.exceptions import AuthorizationError, NotificationNotFoundError
from chirp.shared.core.logging import get_logger
from chirp.shared.models.enums import NotificationType
from chirp.shared.models.notification import Notification
from chirp.shared.models.user import User
from chirp.shared.realtime import ConnectionRegistry, registry as default_registry
from chirp.shared.repositories.notification_repository import NotificationRepository
from chirp.shared.repositories.user_repository import UserRepository

logger = get_logger(__name__)

# notifications.content is VARCHAR(500)
CONTENT_MAX_LENGTH = 500


def notification_payload(notification: Notification) -> dict[str, Any]:
    """Wire representation pushed over WebSocket."""
    return {
        "id": str(notification.id),
        "type": NotificationType(notification.type).value,
        "content": notification.content,
        "created_at": notification.created_at.isoformat(),
    }


class NotificationService:
    """
    Service for notification business logic.

    Handles:
    - Creating and pushing notifications
    - Listing, marking read and deleting a user's notifications
    """

    def __init__(self, session: AsyncSession, registry: ConnectionRegistry | None = None) -> None:
        self.session = session
        self.repo = NotificationRepository(session)
        self.users = UserRepository(session)
        self.registry = registry or default_registry

    async def notify(
        self,
        user_id: UUID,
        notification_type: NotificationType,
        content: str,
    ) -> Optional[Notification]:
        """
        Persist a notification and push it to the user's live connections.

        Content longer than CONTENT_MAX_LENGTH is cut to fit the column.

        Returns:
            The stored notification, or None when the addressee is
            unknown or logically deleted
        """
        if not await self.users.get_active(user_id):
            logger.info("Notification skipped for inactive user", user_id=str(user_id))
            return None

        notification = await self.repo.create(
            user_id=user_id,
            type=notification_type,
            content=content[:CONTENT_MAX_LENGTH],
        )
        delivered = await self.registry.send_to_user(
            str(user_id), notification_payload(notification)
        )
        logger.info(
            "Notification created",
            notification_id=str(notification.id),
            type=notification_type.value,
            delivered=delivered,
        )
        return notification

    async def list_notifications(self, user: User, unread_only: bool = False) -> list[Notification]:
        return await self.repo.list_for_user(user.id, unread_only=unread_only)

    async def _get_owned(self, user: User, notification_id: UUID) -> Notification:
        notification = await self.repo.get(notification_id)
        if not notification:
            raise NotificationNotFoundError(notification_id)
        if notification.user_id != user.id:
            raise AuthorizationError("This notification belongs to another user")
        return notification

    async def mark_read(self, user: User, notification_id: UUID) -> Notification:
        """
        Mark one notification read.

        Raises:
            NotificationNotFoundError: Unknown id
            AuthorizationError: Notification addressed to someone else
        """
        notification = await self._get_owned(user, notification_id)
        return await self.repo.mark_read(notification)

    async def mark_all_read(self, user: User) -> int:
        return await self.repo.mark_all_read(user.id)

    async def delete_notification(self, user: User, notification_id: UUID) -> None:
        notification = await self._get_owned(user, notification_id)
        await self.repo.delete(notification.id)
