"""
Notification Schemas
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from chirp.shared.models.enums import NotificationType
from chirp.shared.schemas.common import BaseSchema


class NotificationResponse(BaseSchema):
    """Schema for notification response."""

    id: UUID
    type: NotificationType
    content: str
    is_read: bool
    created_at: datetime


class MarkAllReadResponse(BaseModel):
    """Result of marking every notification as read."""

    updated: int
