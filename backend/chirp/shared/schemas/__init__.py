"""
Pydantic Schemas

Request and response models for the API.

Schema Categories:
==================
- common: Base schemas, pagination, error responses
- user: User and authentication schemas
- post: Post and like schemas
- follow: Follow relationship schemas
- message: Direct message schemas
- notification: Notification schemas

Usage:
======
    from chirp.shared.schemas.user import UserCreate, UserResponse, TokenResponse
    from chirp.shared.schemas.common import PaginatedResponse, ErrorResponse
"""

from chirp.shared.schemas.common import (
    BaseSchema,
    PaginationParams,
    PaginationMeta,
    PaginatedResponse,
    MessageResponse,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
    ReadinessResponse,
)
from chirp.shared.schemas.user import (
    UserBase,
    UserCreate,
    UserLogin,
    UserRestore,
    UserUpdate,
    UserResponse,
    UserSummary,
    TokenResponse,
)
from chirp.shared.schemas.post import (
    PostCreate,
    PostUpdate,
    PostResponse,
    LikeResponse,
    PostLikesResponse,
)
from chirp.shared.schemas.follow import FollowResponse
from chirp.shared.schemas.message import MessageCreate, DirectMessageResponse
from chirp.shared.schemas.notification import NotificationResponse, MarkAllReadResponse

__all__ = [
    # Common
    "BaseSchema",
    "PaginationParams",
    "PaginationMeta",
    "PaginatedResponse",
    "MessageResponse",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    "ReadinessResponse",
    # User
    "UserBase",
    "UserCreate",
    "UserLogin",
    "UserRestore",
    "UserUpdate",
    "UserResponse",
    "UserSummary",
    "TokenResponse",
    # Post
    "PostCreate",
    "PostUpdate",
    "PostResponse",
    "LikeResponse",
    "PostLikesResponse",
    # Follow
    "FollowResponse",
    # Message
    "MessageCreate",
    "DirectMessageResponse",
    # Notification
    "NotificationResponse",
    "MarkAllReadResponse",
]
