"""
Chirp SQLAlchemy Models

This package contains all database models for the Chirp application.

Model Hierarchy:
================
    User
       ├── posts (Post[])
       │      └── likes (Like[])        ← cascade delete with the post
       └── notifications (Notification[])

    Follower      (follower_id → users, following_id → users)
    Message       (sender_id → users, receiver_id → users)

Models Overview:
================
- Base: Base class and mixins (timestamps, logical delete)
- User: Registered application user
- Post: User-authored post
- Like: One user's like of one post
- Follower: Directed follow relationship
- Message: Direct message with per-participant hiding
- Notification: Event addressed to a user

Usage:
======
    from chirp.shared.models import User, Post, Like
"""

from chirp.shared.models.base import Base, TimestampMixin, SoftDeleteMixin, utcnow
from chirp.shared.models.enums import NotificationType
from chirp.shared.models.user import User
from chirp.shared.models.post import Post
from chirp.shared.models.like import Like
from chirp.shared.models.follower import Follower
from chirp.shared.models.message import Message
from chirp.shared.models.notification import Notification

__all__ = [
    # Base classes and mixins
    "Base",
    "TimestampMixin",
    "SoftDeleteMixin",
    "utcnow",
    # Enums
    "NotificationType",
    # Models
    "User",
    "Post",
    "Like",
    "Follower",
    "Message",
    "Notification",
]
