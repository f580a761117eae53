"""
Follower Service

Follow graph operations.

Rules:
======
    follow(self)         → 400
    follow(unknown)      → 404
    follow(twice)        → 409
    unfollow(not-followed) → 404
"""

from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from chirp.shared.core.exceptions import (
    BadRequestError,
    DuplicateResourceError,
    FollowNotFoundError,
    UserNotFoundError,
)
from chirp.shared.core.logging import get_logger
from chirp.shared.models.enums import NotificationType
from chirp.shared.models.follower import Follower
from chirp.shared.models.user import User
from chirp.shared.repositories.follower_repository import FollowerRepository
from chirp.shared.repositories.user_repository import UserRepository
from chirp.shared.services.notification_service import NotificationService

logger = get_logger(__name__)


class FollowerService:
    """Service for follow-related business logic."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = FollowerRepository(session)
        self.users = UserRepository(session)
        self.notifications = NotificationService(session)

    async def _get_active_user(self, user_id: UUID) -> User:
        user = await self.users.get_active(user_id)
        if not user:
            raise UserNotFoundError(user_id)
        return user

    async def follow(self, user: User, target_id: UUID) -> Follower:
        """
        Make user follow target_id.

        Raises:
            BadRequestError: Self-follow
            UserNotFoundError: Target missing or deleted
            DuplicateResourceError: Already following
        """
        if user.id == target_id:
            raise BadRequestError("You cannot follow yourself")

        target = await self._get_active_user(target_id)
        if await self.repo.get_relationship(user.id, target.id):
            raise DuplicateResourceError("You already follow this user")

        try:
            relationship = await self.repo.create(follower_id=user.id, following_id=target.id)
        except IntegrityError:
            raise DuplicateResourceError("You already follow this user")

        await self.notifications.notify(
            target.id,
            NotificationType.NEW_FOLLOWER,
            f"{user.username} started following you",
        )
        logger.info("User followed", follower_id=str(user.id), following_id=str(target.id))
        return relationship

    async def unfollow(self, user: User, target_id: UUID) -> None:
        """
        Raises:
            FollowNotFoundError: user does not follow target_id
        """
        relationship = await self.repo.get_relationship(user.id, target_id)
        if not relationship:
            raise FollowNotFoundError()
        await self.repo.delete(relationship.id)
        logger.info("User unfollowed", follower_id=str(user.id), following_id=str(target_id))

    async def list_followers(self, user_id: UUID) -> list[Follower]:
        user = await self._get_active_user(user_id)
        return await self.repo.list_followers(user.id)

    async def list_following(self, user_id: UUID) -> list[Follower]:
        user = await self._get_active_user(user_id)
        return await self.repo.list_following(user.id)
