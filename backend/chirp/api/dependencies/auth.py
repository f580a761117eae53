"""
Authentication Dependencies

FastAPI dependencies for user authentication.

Dependency Hierarchy:
=====================
    security (HTTPBearer)     ← Extract "Authorization: Bearer <jwt>"
           │
           ▼
    get_current_user_token()  ← Require the header, return the raw token
           │
           ▼
    get_current_user()        ← Decode, then load the active User row

Every failure along the chain is a 401 AuthenticationError: missing
header, wrong scheme, bad signature, expired token, or a token naming a
user that no longer exists or was logically deleted.

Type Aliases:
=============
    CurrentUser - Authenticated, active User model

Usage:
======
    from chirp.api.dependencies.auth import CurrentUser

    @router.get("/me")
    async def get_me(current_user: CurrentUser):
        return current_user
"""

from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from chirp.api.dependencies.services import get_auth_service
from chirp.shared.core.exceptions import AuthenticationError
from chirp.shared.models.user import User
from chirp.shared.services.auth_service import AuthService


# auto_error=False so a missing header reaches our handler as a 401
security = HTTPBearer(auto_error=False)


async def get_current_user_token(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)] = None,
) -> str:
    """
    Extract the bearer token from the Authorization header.

    Raises:
        AuthenticationError: If the header is missing or not a bearer token
    """
    if not credentials or not credentials.credentials:
        raise AuthenticationError("Authorization header required")
    return credentials.credentials


async def get_current_user(
    token: Annotated[str, Depends(get_current_user_token)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> User:
    """
    Resolve the acting user from the bearer token.

    Raises:
        AuthenticationError: Token invalid, expired, or user inactive
    """
    return await auth_service.resolve_token_user(token)


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

# Authenticated user (most common dependency)
CurrentUser = Annotated[User, Depends(get_current_user)]
