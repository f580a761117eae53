"""
User Service

Profile management, logical delete and restore.

Logical delete lifecycle:
=========================
    active ──delete_user()──▶ deleted (placeholders in email/username)
       ▲                          │
       └──────restore_user()──────┘   only while both originals are still free
"""

from typing import Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from chirp.shared.core.exceptions import (
    AuthenticationError,
    ConflictError,
    DuplicateResourceError,
    UserNotFoundError,
)
from chirp.shared.core.logging import get_logger
from chirp.shared.models.user import User
from chirp.shared.realtime import ConnectionRegistry, registry as default_registry
from chirp.shared.repositories.user_repository import UserRepository
from chirp.shared.schemas.user import UserUpdate
from chirp.shared.utils.security import SecurityUtils

logger = get_logger(__name__)


class UserService:
    """Service for user profile business logic."""

    def __init__(self, session: AsyncSession, registry: ConnectionRegistry | None = None) -> None:
        self.session = session
        self.repo = UserRepository(session)
        self.registry = registry or default_registry

    async def list_users(self, *, offset: int = 0, limit: int = 20) -> Tuple[list[User], int]:
        """Active users page and total count."""
        users = await self.repo.list_active(offset=offset, limit=limit)
        total = await self.repo.count_active()
        return users, total

    async def get_user(self, user_id: UUID) -> User:
        """
        Raises:
            UserNotFoundError: Unknown or logically deleted user
        """
        user = await self.repo.get_active(user_id)
        if not user:
            raise UserNotFoundError(user_id)
        return user

    async def update_user(self, user: User, data: UserUpdate) -> User:
        """
        Apply a partial profile update.

        Email and username changes are re-checked for uniqueness; a new
        password is re-hashed.

        Raises:
            DuplicateResourceError: New email or username already taken
        """
        changes = data.model_dump(exclude_unset=True)

        email = changes.get("email")
        if email and email != user.email and await self.repo.email_exists(email, exclude_id=user.id):
            raise DuplicateResourceError("Email already registered")

        username = changes.get("username")
        if (
            username
            and username != user.username
            and await self.repo.username_exists(username, exclude_id=user.id)
        ):
            raise DuplicateResourceError("Username already taken")

        password = changes.pop("password", None)
        if password:
            changes["password_hash"] = SecurityUtils.hash_password(password)

        for field, value in changes.items():
            # username, fullname and email are NOT NULL
            if value is None and field in ("username", "fullname", "email"):
                continue
            setattr(user, field, value)

        user = await self.repo.save(user)
        logger.info("User updated", user_id=str(user.id), fields=sorted(changes))
        return user

    async def delete_user(self, user: User) -> User:
        """
        Logically delete a user (see UserRepository.logical_delete).

        The user's open notification sockets are closed with 1008.
        """
        user = await self.repo.logical_delete(user)
        closed = await self.registry.close_user(str(user.id))
        logger.info("User logically deleted", user_id=str(user.id), sockets_closed=closed)
        return user

    async def restore_user(self, email: str, password: str) -> User:
        """
        Restore a logically deleted account from its original credentials.

        Raises:
            AuthenticationError: No deleted account matches the credentials
            ConflictError: Original email or username was taken meanwhile
        """
        # Several deleted accounts may share an original email
        candidates = await self.repo.list_deleted_by_original_email(email)
        user = next(
            (c for c in candidates if SecurityUtils.verify_password(password, c.password_hash)),
            None,
        )
        if not user:
            raise AuthenticationError("Invalid email or password")

        if await self.repo.email_exists(user.original_email, exclude_id=user.id):
            raise ConflictError("The original email is now used by another account")
        if await self.repo.username_exists(user.original_username, exclude_id=user.id):
            raise ConflictError("The original username is now used by another account")

        user = await self.repo.restore(user)
        logger.info("User restored", user_id=str(user.id))
        return user

    async def set_profile_picture(self, user: User, path: str) -> User:
        user.profile_picture = path
        return await self.repo.save(user)
