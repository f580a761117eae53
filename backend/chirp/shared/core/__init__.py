"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from chirp.shared.core.logging import logger, get_logger
    from chirp.shared.core.exceptions import ChirpException, NotFoundError

    logger.info("Starting operation", user_id=user_id)
"""

from chirp.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from chirp.shared.core.exceptions import (
    ChirpException,
    BadRequestError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    UserNotFoundError,
    PostNotFoundError,
    LikeNotFoundError,
    FollowNotFoundError,
    MessageNotFoundError,
    NotificationNotFoundError,
    ConflictError,
    DuplicateResourceError,
    InternalServerError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "ChirpException",
    "BadRequestError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "UserNotFoundError",
    "PostNotFoundError",
    "LikeNotFoundError",
    "FollowNotFoundError",
    "MessageNotFoundError",
    "NotificationNotFoundError",
    "ConflictError",
    "DuplicateResourceError",
    "InternalServerError",
]
