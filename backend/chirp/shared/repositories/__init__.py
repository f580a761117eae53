"""
Repository Layer

Repositories wrap all SQL for one model each. Services receive an
AsyncSession and build the repositories they need.

    from chirp.shared.repositories import PostRepository

    repo = PostRepository(db)
    posts = await repo.list_with_authors(offset=0, limit=20)
"""

from chirp.shared.repositories.base import BaseRepository
from chirp.shared.repositories.user_repository import UserRepository
from chirp.shared.repositories.post_repository import PostRepository
from chirp.shared.repositories.like_repository import LikeRepository
from chirp.shared.repositories.follower_repository import FollowerRepository
from chirp.shared.repositories.message_repository import MessageRepository
from chirp.shared.repositories.notification_repository import NotificationRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "PostRepository",
    "LikeRepository",
    "FollowerRepository",
    "MessageRepository",
    "NotificationRepository",
]
