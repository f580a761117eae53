"""
Like Repository

Database operations specific to the Like model.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import func, select

from chirp.shared.models.like import Like
from chirp.shared.repositories.base import BaseRepository


class LikeRepository(BaseRepository[Like]):
    """Repository for Like model operations."""

    def __init__(self, session) -> None:
        super().__init__(Like, session)

    async def get_user_like(self, user_id: UUID, post_id: UUID) -> Optional[Like]:
        """The like a user left on a post, if any."""
        result = await self.session.execute(
            select(Like).where(Like.user_id == user_id, Like.post_id == post_id)
        )
        return result.scalar_one_or_none()

    async def list_for_post(self, post_id: UUID) -> list[Like]:
        """Likes on a post, oldest first, with the liking user loaded."""
        result = await self.session.execute(
            select(Like).where(Like.post_id == post_id).order_by(Like.created_at)
        )
        return list(result.scalars().all())

    async def count_for_post(self, post_id: UUID) -> int:
        result = await self.session.execute(
            select(func.count()).select_from(Like).where(Like.post_id == post_id)
        )
        return result.scalar() or 0
