"""
API Handlers

Route handlers for the Chirp API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

All business logic is delegated to the service layer.
"""

from chirp.api.handlers import (
    auth_handler,
    feed_handler,
    follow_handler,
    health_handler,
    message_handler,
    notification_handler,
    post_handler,
    websocket_handler,
)

__all__ = [
    "auth_handler",
    "feed_handler",
    "follow_handler",
    "health_handler",
    "message_handler",
    "notification_handler",
    "post_handler",
    "websocket_handler",
]
