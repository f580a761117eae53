"""
Message Schemas
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from chirp.shared.schemas.common import BaseSchema


class MessageCreate(BaseModel):
    """Schema for sending a direct message."""

    receiver_id: UUID
    content: str = Field(min_length=1, max_length=2000)

    @field_validator("content")
    @classmethod
    def strip_content(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Message content must not be blank")
        return value


class DirectMessageResponse(BaseSchema):
    """
    Schema for message response.

    Named DirectMessageResponse to stay distinct from MessageResponse,
    the generic confirmation body.
    """

    id: UUID
    sender_id: UUID
    receiver_id: UUID
    content: str
    is_read: bool
    created_at: datetime
