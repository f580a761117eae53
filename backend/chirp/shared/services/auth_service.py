"""
Authentication Service

Business logic for user registration, login and token resolution.

Service Pattern:
================
Services encapsulate business logic and coordinate between:
- Repositories (data access)
- Security utilities (hashing, JWT)
- Domain logic

Usage:
======
    from chirp.shared.services.auth_service import AuthService

    service = AuthService(db)
    user = await service.register_user(data)
    user, token, expires = await service.login_user(email, password)
"""

from datetime import timedelta
from typing import Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from chirp.config.settings import settings
from chirp.shared.core.exceptions import AuthenticationError, DuplicateResourceError
from chirp.shared.core.logging import get_logger
from chirp.shared.models.user import User
from chirp.shared.repositories.user_repository import UserRepository
from chirp.shared.schemas.user import UserCreate
from chirp.shared.utils.security import SecurityUtils

logger = get_logger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


class AuthService:
    """
    Service for authentication-related business logic.

    Handles:
    - User registration
    - User authentication (login)
    - JWT token generation and resolution

    Attributes:
        session: Database session
        repo: UserRepository instance
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = UserRepository(session)

    async def register_user(self, data: UserCreate) -> User:
        """
        Register a new user.

        Args:
            data: Validated registration payload

        Returns:
            The created user

        Raises:
            DuplicateResourceError: If email or username is already taken
        """
        if await self.repo.email_exists(data.email):
            raise DuplicateResourceError("Email already registered")
        if await self.repo.username_exists(data.username):
            raise DuplicateResourceError("Username already taken")

        user = await self.repo.create(
            username=data.username,
            fullname=data.fullname,
            email=data.email,
            password_hash=SecurityUtils.hash_password(data.password),
            description=data.description,
        )
        logger.info("User registered", user_id=str(user.id), username=user.username)
        return user

    async def login_user(
        self,
        email: str,
        password: str,
    ) -> Tuple[User, str, int]:
        """
        Authenticate user and generate token.

        Unknown emails, deleted accounts and wrong passwords all fail with
        the same message.

        Returns:
            Tuple of (user, access_token, expires_in_seconds)

        Raises:
            AuthenticationError: If credentials are invalid
        """
        user = await self.repo.get_by_email(email)
        if not user or not SecurityUtils.verify_password(password, user.password_hash):
            raise AuthenticationError(INVALID_CREDENTIALS)

        access_token, expires_in = self.issue_token(user)
        logger.info("User logged in", user_id=str(user.id))
        return user, access_token, expires_in

    @staticmethod
    def issue_token(user: User) -> Tuple[str, int]:
        """
        Create an access token for a user.

        Returns:
            Tuple of (access_token, expires_in_seconds)
        """
        access_token = SecurityUtils.create_access_token(
            data={"user_id": str(user.id)},
            secret_key=settings.SECRET_KEY,
            expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
            algorithm=settings.JWT_ALGORITHM,
        )
        return access_token, settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60

    async def resolve_token_user(self, token: str) -> User:
        """
        Decode a bearer token and load the active user it names.

        Raises:
            AuthenticationError: Malformed, expired or orphaned token
        """
        try:
            payload = SecurityUtils.decode_access_token(
                token,
                settings.SECRET_KEY,
                algorithm=settings.JWT_ALGORITHM,
            )
        except ValueError as e:
            raise AuthenticationError(str(e))

        raw_user_id = payload.get("user_id")
        try:
            user_id = UUID(str(raw_user_id))
        except ValueError:
            raise AuthenticationError("Invalid token payload")

        user = await self.repo.get_active(user_id)
        if not user:
            raise AuthenticationError("User not found or inactive")
        return user
