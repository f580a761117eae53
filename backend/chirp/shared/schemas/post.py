"""
Post and Like Schemas

Create requests are validated here. Update requests are deliberately
loose: the partial-update rules (header >= 3, content >= 10, http(s)
image) are enforced by PostService so they apply to every caller.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from chirp.shared.schemas.common import BaseSchema
from chirp.shared.schemas.user import UserSummary


class PostCreate(BaseModel):
    """Schema for creating a post."""

    header: str = Field(min_length=4, max_length=255)
    content: str = Field(min_length=1)
    image: Optional[str] = Field(default=None, max_length=2048)

    @field_validator("header", "content")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value.strip()


class PostUpdate(BaseModel):
    """Schema for a partial post update."""

    header: Optional[str] = None
    content: Optional[str] = None
    image: Optional[str] = None


class PostResponse(BaseSchema):
    """Schema for post response."""

    id: UUID
    header: str
    content: str
    image: Optional[str] = None
    user_id: UUID
    author: UserSummary
    created_at: datetime
    updated_at: datetime


class LikeResponse(BaseSchema):
    """Schema for like response."""

    id: UUID
    post_id: UUID
    user_id: UUID
    user: UserSummary
    created_at: datetime


class PostLikesResponse(BaseModel):
    """Likes of one post with their total."""

    post_id: UUID
    count: int
    likes: list[LikeResponse]
