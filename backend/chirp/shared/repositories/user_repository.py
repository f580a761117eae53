"""
User Repository

Database operations specific to the User model.
Extends BaseRepository with user-specific query methods.

Active vs. Deleted:
===================
Users are never removed. A logically deleted user keeps its row with
deleted_at set, so every lookup used by authentication and listings goes
through the *_active helpers or filters on deleted_at IS NULL.

Placeholder rotation on logical delete:
    email     "ada@example.com"  →  "deleted_<id>_<ts>@deleted.invalid"
    username  "ada"              →  "deleted_<id>_<ts>"
The originals are parked in original_email/original_username so the
unique columns are free for new registrations.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import func, select

from chirp.shared.models.base import utcnow
from chirp.shared.models.user import User
from chirp.shared.repositories.base import BaseRepository


DELETED_EMAIL_DOMAIN = "deleted.invalid"


class UserRepository(BaseRepository[User]):
    """
    Repository for User model operations.

    Inherits from BaseRepository:
        - get(id), exists(id)
        - create(), save(), delete(id), remove()
    """

    def __init__(self, session) -> None:
        super().__init__(User, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUPS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_active(self, user_id: UUID) -> Optional[User]:
        """Get a user by id unless it has been logically deleted."""
        result = await self.session.execute(
            select(User).where(User.id == user_id, User.deleted_at.is_(None))
        )
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Find an active user by email address (case-insensitive).

        Example:
            user = await repo.get_by_email("ADA@example.com")
        """
        result = await self.session.execute(
            select(User).where(
                User.email == email.strip().lower(),
                User.deleted_at.is_(None),
            )
        )
        return result.scalar_one_or_none()

    async def email_exists(self, email: str, exclude_id: Optional[UUID] = None) -> bool:
        """Check whether an email is taken, optionally ignoring one user."""
        query = select(func.count()).select_from(User).where(User.email == email.strip().lower())
        if exclude_id is not None:
            query = query.where(User.id != exclude_id)
        result = await self.session.execute(query)
        return (result.scalar() or 0) > 0

    async def username_exists(self, username: str, exclude_id: Optional[UUID] = None) -> bool:
        """Check whether a username is taken, optionally ignoring one user."""
        query = select(func.count()).select_from(User).where(User.username == username)
        if exclude_id is not None:
            query = query.where(User.id != exclude_id)
        result = await self.session.execute(query)
        return (result.scalar() or 0) > 0

    # ═══════════════════════════════════════════════════════════════════════════
    # LISTINGS
    # ═══════════════════════════════════════════════════════════════════════════

    async def list_active(self, *, offset: int = 0, limit: int = 20) -> list[User]:
        """Active users, newest first."""
        result = await self.session.execute(
            select(User)
            .where(User.deleted_at.is_(None))
            .order_by(User.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def count_active(self) -> int:
        result = await self.session.execute(
            select(func.count()).select_from(User).where(User.deleted_at.is_(None))
        )
        return result.scalar() or 0

    # ═══════════════════════════════════════════════════════════════════════════
    # LOGICAL DELETE / RESTORE
    # ═══════════════════════════════════════════════════════════════════════════

    async def logical_delete(self, user: User) -> User:
        """
        Mark a user deleted and rotate its unique fields to placeholders.

        The placeholders cannot collide: they embed the user id and the
        deletion timestamp, and the email domain is reserved (.invalid).
        """
        now = utcnow()
        placeholder = f"deleted_{user.id.hex}_{int(now.timestamp() * 1000)}"

        user.original_email = user.email
        user.original_username = user.username
        user.email = f"{placeholder}@{DELETED_EMAIL_DOMAIN}"
        user.username = placeholder
        user.deleted_at = now

        return await self.save(user)

    async def list_deleted_by_original_email(self, email: str) -> list[User]:
        """Deleted accounts that used this email, most recently deleted first."""
        result = await self.session.execute(
            select(User)
            .where(
                User.original_email == email.strip().lower(),
                User.deleted_at.is_not(None),
            )
            .order_by(User.deleted_at.desc())
        )
        return list(result.scalars().all())

    async def restore(self, user: User) -> User:
        """
        Bring a logically deleted user back with its original email/username.

        Callers must check that both originals are still free.
        """
        user.email = user.original_email
        user.username = user.original_username
        user.original_email = None
        user.original_username = None
        user.deleted_at = None

        return await self.save(user)
