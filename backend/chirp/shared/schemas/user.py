"""
User Schemas

Request/response models for user and authentication endpoints.

Field visibility:
=================
UserResponse is the only shape a user is ever rendered in. It never
exposes password_hash, deleted_at or the parked original_* fields.
"""

from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, field_validator, model_validator

from chirp.shared.schemas.common import BaseSchema


def _strip_required(value: Any) -> Any:
    # Runs before the length constraints, which then see the stripped value
    if isinstance(value, str):
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
    return value


class UserBase(BaseModel):
    """Base user schema."""

    email: EmailStr

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.strip().lower()


class UserCreate(UserBase):
    """Schema for user registration."""

    username: str = Field(min_length=4, max_length=255, description="Public handle (min 4 characters)")
    fullname: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=6, description="Password (minimum 6 characters)")
    description: Optional[str] = Field(default=None, max_length=200)

    @field_validator("username", "fullname", mode="before")
    @classmethod
    def strip_text(cls, value: Any) -> Any:
        return _strip_required(value)


class UserLogin(UserBase):
    """Schema for user login."""

    password: str = Field(min_length=6)


class UserRestore(UserLogin):
    """Credentials of a logically deleted account."""


class UserUpdate(BaseModel):
    """
    Schema for updating the current user.

    All fields optional, at least one required. Changing email or username
    is re-checked for uniqueness by the service.
    """

    username: Optional[str] = Field(default=None, min_length=4, max_length=255)
    fullname: Optional[str] = Field(default=None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(default=None, min_length=6)
    description: Optional[str] = Field(default=None, max_length=200)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: Optional[str]) -> Optional[str]:
        return value.strip().lower() if value is not None else None

    @field_validator("username", "fullname", mode="before")
    @classmethod
    def strip_text(cls, value: Any) -> Any:
        return _strip_required(value)

    @model_validator(mode="after")
    def require_change(self) -> "UserUpdate":
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided")
        return self


class UserResponse(BaseSchema):
    """Schema for user response."""

    id: UUID
    username: str
    fullname: str
    email: str
    description: Optional[str] = None
    profile_picture: Optional[str] = None
    created_at: datetime


class UserSummary(BaseSchema):
    """Compact author/follower representation embedded in other resources."""

    id: UUID
    username: str
    fullname: str
    profile_picture: Optional[str] = None


class TokenResponse(BaseModel):
    """Schema for login response."""

    user: UserResponse
    access_token: str
    token_type: str = "bearer"
    expires_in: int  # seconds
