"""
Post Repository

Database operations specific to the Post model.

Every query here returns posts with their author loaded (Post.author is a
selectin relationship), which is what the API renders.

Listings only include posts whose author is active. A logically deleted
user's posts stay in the table but drop out of /api/posts and feeds.
"""

from typing import Any, Optional
from uuid import UUID

from sqlalchemy import func, select

from chirp.shared.models.post import Post
from chirp.shared.models.user import User
from chirp.shared.repositories.base import BaseRepository


class PostRepository(BaseRepository[Post]):
    """Repository for Post model operations."""

    def __init__(self, session) -> None:
        super().__init__(Post, session)

    def _active_authors(self):
        return select(Post).join(User, Post.user_id == User.id).where(User.deleted_at.is_(None))

    async def get_with_author(self, post_id: UUID) -> Optional[Post]:
        """Fetch a post by an active author and (re)load that author."""
        result = await self.session.execute(
            self._active_authors()
            .where(Post.id == post_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def list_with_authors(self, *, offset: int = 0, limit: int = 20) -> list[Post]:
        """All posts by active users, newest first."""
        result = await self.session.execute(
            self._active_authors()
            .order_by(Post.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def count_all(self) -> int:
        result = await self.session.execute(
            select(func.count())
            .select_from(Post)
            .join(User, Post.user_id == User.id)
            .where(User.deleted_at.is_(None))
        )
        return result.scalar() or 0

    async def list_by_authors(
        self,
        author_ids: list[UUID],
        *,
        offset: int = 0,
        limit: int = 20,
    ) -> list[Post]:
        """
        Posts written by any of the given users, newest first.

        Used for the feed. Returns [] without querying when the list is empty.
        """
        if not author_ids:
            return []
        result = await self.session.execute(
            self._active_authors()
            .where(Post.user_id.in_(author_ids))
            .order_by(Post.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def count_by_authors(self, author_ids: list[UUID]) -> int:
        if not author_ids:
            return 0
        result = await self.session.execute(
            select(func.count())
            .select_from(Post)
            .join(User, Post.user_id == User.id)
            .where(User.deleted_at.is_(None), Post.user_id.in_(author_ids))
        )
        return result.scalar() or 0

    async def update_fields(self, post: Post, fields: dict[str, Any]) -> Post:
        """Apply already-validated field changes to a loaded post."""
        for field, value in fields.items():
            setattr(post, field, value)
        return await self.save(post)

    async def delete_post(self, post: Post) -> None:
        """
        Delete a post and, through the cascade, all of its likes.

        SQL Generated:
            DELETE FROM posts WHERE id = '...'
            -- likes removed by ON DELETE CASCADE
        """
        await self.remove(post)
