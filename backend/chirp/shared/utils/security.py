"""
Security Utilities

Password hashing (passlib bcrypt) and access tokens (PyJWT, HS256 by default).

Token claims:
=============
    {"user_id": "550e8400-...", "iat": 1736937000, "exp": 1744713000}

A token without exp is rejected at decode time. The user_id claim is
checked by AuthService.resolve_token_user.

Usage:
======
    from chirp.shared.utils.security import SecurityUtils

    hashed = SecurityUtils.hash_password("password123")
    SecurityUtils.verify_password("password123", hashed)  # True

    token = SecurityUtils.create_access_token({"user_id": str(user.id)}, settings.SECRET_KEY)
    SecurityUtils.decode_access_token(token, settings.SECRET_KEY)["user_id"]
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import jwt
from passlib.context import CryptContext

from chirp.config.settings import settings

DEFAULT_TOKEN_LIFETIME = timedelta(days=90)
REQUIRED_CLAIMS = ["exp"]

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


class SecurityUtils:
    """Stateless helpers; all methods are static."""

    # ═══════════════════════════════════════════════════════════════════════════
    # PASSWORDS
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def hash_password(password: str) -> str:
        """Salted bcrypt hash, work factor from BCRYPT_ROUNDS."""
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        # Unrecognised hash formats raise ValueError; treat as mismatch
        try:
            return pwd_context.verify(plain_password, hashed_password)
        except ValueError:
            return False

    # ═══════════════════════════════════════════════════════════════════════════
    # ACCESS TOKENS
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def create_access_token(
        data: dict[str, Any],
        secret_key: str,
        expires_delta: Optional[timedelta] = None,
        algorithm: str = "HS256",
    ) -> str:
        """
        Sign a token carrying ``data`` plus iat/exp.

        Args:
            data: Application claims, for Chirp {"user_id": "<uuid>"}
            secret_key: HMAC signing key
            expires_delta: Lifetime, 90 days when omitted
            algorithm: JWT algorithm
        """
        issued_at = datetime.now(timezone.utc)
        claims = {
            **data,
            "iat": issued_at,
            "exp": issued_at + (expires_delta or DEFAULT_TOKEN_LIFETIME),
        }
        return jwt.encode(claims, secret_key, algorithm=algorithm)

    @staticmethod
    def decode_access_token(
        token: str,
        secret_key: str,
        algorithm: str = "HS256",
    ) -> dict[str, Any]:
        """
        Verify signature, algorithm and expiry, and return the claims.

        Raises:
            ValueError: "Token has expired" or "Invalid token: <reason>"
        """
        try:
            return jwt.decode(
                token,
                secret_key,
                algorithms=[algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError:
            raise ValueError("Token has expired")
        except jwt.InvalidTokenError as e:
            raise ValueError(f"Invalid token: {e}")
