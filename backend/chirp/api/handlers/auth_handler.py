"""
Authentication & User Handler

Handles registration, login, account restore and self-service profile
endpoints. Mounted under /api/auth.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model
          ↘ Utils  ↗

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

Business logic belongs in the SERVICE layer, not here. Errors raised by
services are ChirpException subclasses and are rendered by the global
exception handlers.
"""

from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, File, UploadFile, status

from chirp.api.dependencies import CurrentUser, Pagination
from chirp.api.dependencies.services import (
    get_auth_service,
    get_upload_service,
    get_user_service,
)
from chirp.shared.schemas.common import MessageResponse, PaginatedResponse, PaginationMeta
from chirp.shared.schemas.user import (
    TokenResponse,
    UserCreate,
    UserLogin,
    UserResponse,
    UserRestore,
    UserUpdate,
)
from chirp.shared.services.auth_service import AuthService
from chirp.shared.services.upload_service import UploadService
from chirp.shared.services.user_service import UserService


router = APIRouter()


# ═══════════════════════════════════════════════════════════════════════════════
# PUBLIC
# ═══════════════════════════════════════════════════════════════════════════════


@router.post(
    "/create-account",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_account(
    user_data: UserCreate,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new user.

    Raises:
        409: If email or username already taken
    """
    user = await auth_service.register_user(user_data)
    return UserResponse.model_validate(user)


@router.post("/login", response_model=TokenResponse)
async def login(
    credentials: UserLogin,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate user and return JWT token.

    Raises:
        401: If credentials are invalid or the account is deleted
    """
    user, access_token, expires_in = await auth_service.login_user(
        email=credentials.email,
        password=credentials.password,
    )
    return TokenResponse(
        user=UserResponse.model_validate(user),
        access_token=access_token,
        expires_in=expires_in,
    )


@router.post("/restore", response_model=TokenResponse)
async def restore_account(
    credentials: UserRestore,
    user_service: UserService = Depends(get_user_service),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Restore a logically deleted account and log it in.

    Raises:
        401: No deleted account matches the credentials
        409: The original email or username has been taken since
    """
    user = await user_service.restore_user(credentials.email, credentials.password)
    access_token, expires_in = auth_service.issue_token(user)
    return TokenResponse(
        user=UserResponse.model_validate(user),
        access_token=access_token,
        expires_in=expires_in,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# AUTHENTICATED
# ═══════════════════════════════════════════════════════════════════════════════


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: CurrentUser):
    """Return the authenticated user."""
    return UserResponse.model_validate(current_user)


@router.get("/users", response_model=PaginatedResponse[UserResponse])
async def list_users(
    current_user: CurrentUser,
    pagination: Pagination,
    user_service: UserService = Depends(get_user_service),
):
    """List active users, newest first."""
    users, total = await user_service.list_users(
        offset=pagination.offset,
        limit=pagination.limit,
    )
    return PaginatedResponse[UserResponse](
        data=[UserResponse.model_validate(user) for user in users],
        pagination=PaginationMeta.create(
            page=pagination.page,
            per_page=pagination.per_page,
            total=total,
        ),
    )


@router.get("/users/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: UUID,
    current_user: CurrentUser,
    user_service: UserService = Depends(get_user_service),
):
    """
    Raises:
        404: Unknown or deleted user
    """
    user = await user_service.get_user(user_id)
    return UserResponse.model_validate(user)


@router.put("/users", response_model=UserResponse)
async def update_me(
    user_data: UserUpdate,
    current_user: CurrentUser,
    user_service: UserService = Depends(get_user_service),
):
    """
    Update the authenticated user's profile.

    Raises:
        409: New email or username already taken
    """
    user = await user_service.update_user(current_user, user_data)
    return UserResponse.model_validate(user)


@router.post("/users/profile-picture", response_model=UserResponse)
async def upload_profile_picture(
    current_user: CurrentUser,
    profile_picture: Annotated[Optional[UploadFile], File(alias="profilePicture")] = None,
    upload_service: UploadService = Depends(get_upload_service),
    user_service: UserService = Depends(get_user_service),
):
    """
    Upload a JPEG or PNG profile picture (multipart field "profilePicture").

    Raises:
        400: Missing file, unsupported type, or larger than the size cap
    """
    path = await upload_service.save_profile_picture(profile_picture)
    user = await user_service.set_profile_picture(current_user, path)
    return UserResponse.model_validate(user)


@router.delete("/users", response_model=MessageResponse)
async def delete_me(
    current_user: CurrentUser,
    user_service: UserService = Depends(get_user_service),
):
    """
    Logically delete the authenticated account.

    The account can be brought back through POST /api/auth/restore.
    """
    await user_service.delete_user(current_user)
    return MessageResponse(message="Account deleted")
