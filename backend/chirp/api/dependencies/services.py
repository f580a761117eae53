"""
Service Dependencies

FastAPI dependencies for service injection.

Services are created per-request, which is fine because:
- Services are stateless (only hold db session reference)
- Each request gets its own db session
- No shared state between requests

Usage:
======
    from chirp.api.dependencies.services import get_post_service

    @router.post("")
    async def create_post(
        data: PostCreate,
        current_user: CurrentUser,
        post_service: PostService = Depends(get_post_service),
    ):
        return await post_service.create_post(current_user, data)
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from chirp.api.dependencies.database import get_db
from chirp.shared.services.auth_service import AuthService
from chirp.shared.services.feed_service import FeedService
from chirp.shared.services.follower_service import FollowerService
from chirp.shared.services.like_service import LikeService
from chirp.shared.services.message_service import MessageService
from chirp.shared.services.notification_service import NotificationService
from chirp.shared.services.post_service import PostService
from chirp.shared.services.upload_service import UploadService
from chirp.shared.services.user_service import UserService


async def get_auth_service(
    db: AsyncSession = Depends(get_db),
) -> AuthService:
    """
    Dependency to get AuthService instance.

    Creates a new service instance per request with the request's db session.
    """
    return AuthService(db)


async def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(db)


async def get_post_service(db: AsyncSession = Depends(get_db)) -> PostService:
    return PostService(db)


async def get_like_service(db: AsyncSession = Depends(get_db)) -> LikeService:
    return LikeService(db)


async def get_follower_service(db: AsyncSession = Depends(get_db)) -> FollowerService:
    return FollowerService(db)


async def get_feed_service(db: AsyncSession = Depends(get_db)) -> FeedService:
    return FeedService(db)


async def get_message_service(db: AsyncSession = Depends(get_db)) -> MessageService:
    return MessageService(db)


async def get_notification_service(db: AsyncSession = Depends(get_db)) -> NotificationService:
    return NotificationService(db)


async def get_upload_service() -> UploadService:
    """UploadService has no database dependency."""
    return UploadService()
