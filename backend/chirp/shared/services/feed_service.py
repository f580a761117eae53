"""
Feed Service

The feed of a user is every post written by an active user they follow,
newest first.
"""

from typing import Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from chirp.shared.models.post import Post
from chirp.shared.models.user import User
from chirp.shared.repositories.follower_repository import FollowerRepository
from chirp.shared.repositories.post_repository import PostRepository


class FeedService:
    """Service for the personalised post feed."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.followers = FollowerRepository(session)
        self.posts = PostRepository(session)

    async def get_feed(self, user: User, *, offset: int = 0, limit: int = 20) -> Tuple[list[Post], int]:
        """Page of followed users' posts and the total count."""
        author_ids = await self.followers.following_ids(user.id)
        posts = await self.posts.list_by_authors(author_ids, offset=offset, limit=limit)
        total = await self.posts.count_by_authors(author_ids)
        return posts, total
