"""
Message Service

Direct messages between users.

Deletion is per participant: delete_message() hides the message for the
caller only, the other participant still sees it.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from chirp.shared.core.exceptions import AuthorizationError, MessageNotFoundError, UserNotFoundError
from chirp.shared.core.logging import get_logger
from chirp.shared.models.enums import NotificationType
from chirp.shared.models.message import Message
from chirp.shared.models.user import User
from chirp.shared.repositories.message_repository import MessageRepository
from chirp.shared.repositories.user_repository import UserRepository
from chirp.shared.schemas.message import MessageCreate
from chirp.shared.services.notification_service import NotificationService

logger = get_logger(__name__)

PREVIEW_LENGTH = 50


class MessageService:
    """Service for direct message business logic."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = MessageRepository(session)
        self.users = UserRepository(session)
        self.notifications = NotificationService(session)

    async def send_message(self, sender: User, data: MessageCreate) -> Message:
        """
        Send a message and notify the receiver.

        Raises:
            UserNotFoundError: Receiver missing or deleted
        """
        receiver = await self.users.get_active(data.receiver_id)
        if not receiver:
            raise UserNotFoundError(data.receiver_id)

        message = await self.repo.create(
            sender_id=sender.id,
            receiver_id=receiver.id,
            content=data.content,
        )

        if receiver.id != sender.id:
            preview = data.content[:PREVIEW_LENGTH]
            await self.notifications.notify(
                receiver.id,
                NotificationType.NEW_MESSAGE,
                f"New message from {sender.username}: {preview}",
            )
        logger.info("Message sent", message_id=str(message.id))
        return message

    async def list_messages(self, user: User) -> list[Message]:
        return await self.repo.list_for_user(user.id)

    async def get_conversation(self, user: User, other_id: UUID) -> list[Message]:
        """
        Raises:
            UserNotFoundError: The other user does not exist
        """
        if not await self.users.exists(other_id):
            raise UserNotFoundError(other_id)
        return await self.repo.conversation(user.id, other_id)

    async def _get_visible(self, user: User, message_id: UUID) -> Message:
        message = await self.repo.get(message_id)
        if not message:
            raise MessageNotFoundError(message_id)
        if not message.is_participant(user.id):
            raise AuthorizationError("You are not part of this conversation")
        hidden = (message.sender_id == user.id and message.sender_deleted) or (
            message.receiver_id == user.id and message.receiver_deleted
        )
        if hidden:
            raise MessageNotFoundError(message_id)
        return message

    async def delete_message(self, user: User, message_id: UUID) -> None:
        """
        Hide a message for the caller.

        Raises:
            MessageNotFoundError: Unknown or already hidden for the caller
            AuthorizationError: Caller is neither sender nor receiver
        """
        message = await self._get_visible(user, message_id)
        await self.repo.hide_for_user(message, user.id)

    async def mark_read(self, user: User, message_id: UUID) -> Message:
        """
        Raises:
            AuthorizationError: Caller is not the receiver
        """
        message = await self._get_visible(user, message_id)
        if message.receiver_id != user.id:
            raise AuthorizationError("Only the receiver can mark a message as read")
        return await self.repo.mark_read(message)
