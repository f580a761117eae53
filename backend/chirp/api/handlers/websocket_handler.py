"""
WebSocket Handler

Real-time notification push.

    WS /ws?token=<jwt>

The token is checked before the handshake is accepted; an invalid or
missing token closes the socket with 1008 (policy violation). Once
connected the socket is registered in the ConnectionRegistry under the
user's id. The server only pushes; frames sent by the client are read
and discarded.

Client example:
===============
    const ws = new WebSocket(`ws://localhost:4000/ws?token=${token}`);
    ws.onmessage = (event) => {
        const { type, content } = JSON.parse(event.data);
    };
"""

from typing import Optional

from fastapi import APIRouter, Query, WebSocket, status

from chirp.shared.core.exceptions import AuthenticationError
from chirp.shared.core.logging import get_logger
from chirp.shared.db import AsyncSessionLocal
from chirp.shared.models.user import User
from chirp.shared.realtime import registry
from chirp.shared.services.auth_service import AuthService

logger = get_logger(__name__)

router = APIRouter()


async def authenticate_socket(token: Optional[str]) -> Optional[User]:
    """
    Resolve the user behind a WebSocket token.

    WebSockets have no request-scoped session, so a short-lived one is
    opened just for the lookup.
    """
    if not token:
        return None
    async with AsyncSessionLocal() as session:
        try:
            return await AuthService(session).resolve_token_user(token)
        except AuthenticationError as e:
            logger.info("WebSocket authentication failed", reason=e.message)
            return None


@router.websocket("/ws")
async def notifications_socket(
    websocket: WebSocket,
    token: Optional[str] = Query(None),
):
    user = await authenticate_socket(token)
    if user is None:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    user_id = str(user.id)
    await websocket.accept()
    await registry.connect(user_id, websocket)
    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break
    finally:
        registry.disconnect(user_id, websocket)
