"""
Follower Repository

Database operations specific to the Follower model.

Direction:
==========
    list_followers(user)  → rows where following_id = user  (who follows me)
    list_following(user)  → rows where follower_id = user   (whom I follow)

Both listings skip relationships whose other side has been logically
deleted.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import select

from chirp.shared.models.follower import Follower
from chirp.shared.models.user import User
from chirp.shared.repositories.base import BaseRepository


class FollowerRepository(BaseRepository[Follower]):
    """Repository for Follower model operations."""

    def __init__(self, session) -> None:
        super().__init__(Follower, session)

    async def get_relationship(self, follower_id: UUID, following_id: UUID) -> Optional[Follower]:
        result = await self.session.execute(
            select(Follower).where(
                Follower.follower_id == follower_id,
                Follower.following_id == following_id,
            )
        )
        return result.scalar_one_or_none()

    async def list_followers(self, user_id: UUID) -> list[Follower]:
        """Relationships in which someone active follows user_id."""
        result = await self.session.execute(
            select(Follower)
            .join(User, Follower.follower_id == User.id)
            .where(Follower.following_id == user_id, User.deleted_at.is_(None))
            .order_by(Follower.created_at.desc())
        )
        return list(result.scalars().all())

    async def list_following(self, user_id: UUID) -> list[Follower]:
        """Relationships in which user_id follows someone active."""
        result = await self.session.execute(
            select(Follower)
            .join(User, Follower.following_id == User.id)
            .where(Follower.follower_id == user_id, User.deleted_at.is_(None))
            .order_by(Follower.created_at.desc())
        )
        return list(result.scalars().all())

    async def following_ids(self, user_id: UUID) -> list[UUID]:
        """Ids of every user that user_id follows."""
        result = await self.session.execute(
            select(Follower.following_id).where(Follower.follower_id == user_id)
        )
        return list(result.scalars().all())
