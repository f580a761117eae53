"""
Like Service

A user likes a post at most once. Liking someone else's post notifies
the post's author.
"""

from typing import Tuple
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from chirp.shared.core.exceptions import DuplicateResourceError, LikeNotFoundError, PostNotFoundError
from chirp.shared.models.enums import NotificationType
from chirp.shared.models.like import Like
from chirp.shared.models.post import Post
from chirp.shared.models.user import User
from chirp.shared.repositories.like_repository import LikeRepository
from chirp.shared.repositories.post_repository import PostRepository
from chirp.shared.services.notification_service import NotificationService

HEADER_PREVIEW_LENGTH = 50


class LikeService:
    """Service for like-related business logic."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = LikeRepository(session)
        self.posts = PostRepository(session)
        self.notifications = NotificationService(session)

    async def _get_post(self, post_id: UUID) -> Post:
        # Posts of logically deleted authors are not likeable
        post = await self.posts.get_with_author(post_id)
        if not post:
            raise PostNotFoundError(post_id)
        return post

    async def like_post(self, user: User, post_id: UUID) -> Like:
        """
        Like a post.

        Raises:
            PostNotFoundError: Unknown post
            DuplicateResourceError: Already liked by this user
        """
        post = await self._get_post(post_id)
        if await self.repo.get_user_like(user.id, post.id):
            raise DuplicateResourceError("You already liked this post")

        try:
            like = await self.repo.create(user_id=user.id, post_id=post.id)
        except IntegrityError:
            # Concurrent duplicate; the request transaction is rolled back
            raise DuplicateResourceError("You already liked this post")

        if post.user_id != user.id:
            header = post.header
            if len(header) > HEADER_PREVIEW_LENGTH:
                header = header[:HEADER_PREVIEW_LENGTH] + "..."
            await self.notifications.notify(
                post.user_id,
                NotificationType.NEW_LIKE,
                f"{user.username} liked your post \"{header}\"",
            )
        return like

    async def unlike_post(self, user: User, post_id: UUID) -> None:
        """
        Raises:
            PostNotFoundError: Unknown post
            LikeNotFoundError: The user has not liked the post
        """
        post = await self._get_post(post_id)
        like = await self.repo.get_user_like(user.id, post.id)
        if not like:
            raise LikeNotFoundError()
        await self.repo.delete(like.id)

    async def list_likes(self, post_id: UUID) -> Tuple[list[Like], int]:
        """Likes of a post and their count."""
        post = await self._get_post(post_id)
        likes = await self.repo.list_for_post(post.id)
        return likes, len(likes)
