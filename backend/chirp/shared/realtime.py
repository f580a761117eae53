"""
Real-time Notification Push

Registry of open WebSocket connections, keyed by user id.

Data Structure:
===============
    connections = {
        "550e8400-...": [WebSocket_1, WebSocket_2],   # two tabs
        "7c9e6679-...": [WebSocket_3],
    }

Delivery Guarantees:
====================
None beyond best effort. There is no queue and no replay: a user with no
open socket simply misses the push (the notification is still stored and
listed by GET /api/notifications). A socket that fails on send is removed
from the registry.

Usage:
======
    from chirp.shared.realtime import registry

    await registry.connect(user_id, websocket)
    await registry.send_to_user(user_id, {"type": "newLike", ...})
    registry.disconnect(user_id, websocket)
    await registry.close_user(user_id)
"""

from typing import Any

from fastapi import WebSocket, status

from chirp.shared.core.logging import get_logger

logger = get_logger(__name__)


class ConnectionRegistry:
    """
    Process-wide map of user id → open WebSocket connections.

    One user may hold several connections at once (multiple devices or
    tabs); a push goes to all of them.
    """

    def __init__(self) -> None:
        self._connections: dict[str, list[WebSocket]] = {}

    async def connect(self, user_id: str, websocket: WebSocket) -> None:
        """Register an already-accepted socket for a user."""
        self._connections.setdefault(str(user_id), []).append(websocket)
        logger.info("WebSocket connected", user_id=str(user_id))

    def disconnect(self, user_id: str, websocket: WebSocket) -> None:
        """Forget a socket. Safe to call more than once."""
        key = str(user_id)
        sockets = self._connections.get(key)
        if not sockets:
            return
        if websocket in sockets:
            sockets.remove(websocket)
            logger.info("WebSocket disconnected", user_id=key)
        if not sockets:
            self._connections.pop(key, None)

    def is_connected(self, user_id: str) -> bool:
        return bool(self._connections.get(str(user_id)))

    def connection_count(self, user_id: str) -> int:
        return len(self._connections.get(str(user_id), []))

    async def send_to_user(self, user_id: str, payload: dict[str, Any]) -> int:
        """
        Push a JSON payload to every socket of a user.

        Returns:
            Number of sockets the payload was delivered to
        """
        key = str(user_id)
        delivered = 0
        for websocket in list(self._connections.get(key, [])):
            try:
                await websocket.send_json(payload)
                delivered += 1
            except Exception as e:
                logger.warning("Dropping WebSocket after failed send", user_id=key, error=str(e))
                self.disconnect(key, websocket)
        return delivered

    async def close_user(self, user_id: str, code: int = status.WS_1008_POLICY_VIOLATION) -> int:
        """
        Close and forget every socket of a user (account deleted).

        Returns:
            Number of sockets that were registered
        """
        key = str(user_id)
        sockets = self._connections.pop(key, [])
        for websocket in sockets:
            try:
                await websocket.close(code=code)
            except Exception as e:
                logger.warning("WebSocket close failed", user_id=key, error=str(e))
        if sockets:
            logger.info("WebSocket connections closed", user_id=key, count=len(sockets))
        return len(sockets)

    def clear(self) -> None:
        self._connections.clear()


# Global registry instance shared by services and the WebSocket endpoint
registry = ConnectionRegistry()
