"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories,
the real-time registry, and domain rules.

Service Pattern:
================
    Handler → Service → Repository → Database
                ↘ ConnectionRegistry (notification push)

Services should:
- Contain business logic and validation
- Coordinate multiple repositories if needed
- Raise ChirpException subclasses for rule violations
- NOT handle HTTP concerns (that's for handlers)

Available Services:
===================
- AuthService: Registration, login, token resolution
- UserService: Profiles, logical delete, restore
- PostService: Posts and ownership
- LikeService: Likes
- FollowerService: Follow graph
- FeedService: Personal feed
- MessageService: Direct messages
- NotificationService: Notifications and push
- UploadService: Profile picture storage

Usage:
======
    from chirp.shared.services import PostService

    service = PostService(db)
    post = await service.create_post(user, data)
"""

from chirp.shared.services.auth_service import AuthService
from chirp.shared.services.user_service import UserService
from chirp.shared.services.post_service import PostService
from chirp.shared.services.like_service import LikeService
from chirp.shared.services.follower_service import FollowerService
from chirp.shared.services.feed_service import FeedService
from chirp.shared.services.message_service import MessageService
from chirp.shared.services.notification_service import NotificationService
from chirp.shared.services.upload_service import UploadService

__all__ = [
    "AuthService",
    "UserService",
    "PostService",
    "LikeService",
    "FollowerService",
    "FeedService",
    "MessageService",
    "NotificationService",
    "UploadService",
]
