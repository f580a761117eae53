"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready, /live   → Health check endpoints
    /api/auth                → Registration, login, restore, profile
    /api/posts               → Posts and likes
    /api/follow              → Follow graph
    /api/feed                → Personal feed
    /api/messages            → Direct messages
    /api/notifications       → Notifications
    /ws                      → WebSocket notification push

Every /api router documents the shared error envelope for the status
codes its handlers can produce.
"""

from typing import Any

from fastapi import APIRouter, FastAPI

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
from chirp.shared.schemas.common import ErrorResponse

API_PREFIX = "/api"


def _errors(*codes: int) -> dict[int | str, dict[str, Any]]:
    return {code: {"model": ErrorResponse} for code in codes}


# (router, path under /api, OpenAPI tag, documented error codes)
API_ROUTERS: list[tuple[APIRouter, str, str, tuple[int, ...]]] = [
    (auth_handler.router, "/auth", "Authentication", (400, 401, 404, 409)),
    (post_handler.router, "/posts", "Posts", (400, 401, 403, 404, 409)),
    (follow_handler.router, "/follow", "Followers", (400, 401, 404, 409)),
    (feed_handler.router, "/feed", "Feed", (400, 401)),
    (message_handler.router, "/messages", "Messages", (400, 401, 403, 404)),
    (notification_handler.router, "/notifications", "Notifications", (400, 401, 403, 404)),
]


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    # Probes live at the root so load balancers need no prefix
    app.include_router(health_handler.router, tags=["Health"])

    for router, path, tag, error_codes in API_ROUTERS:
        app.include_router(
            router,
            prefix=f"{API_PREFIX}{path}",
            tags=[tag],
            responses=_errors(*error_codes),
        )

    # WebSocket push (token in query string)
    app.include_router(websocket_handler.router)
