"""
Follow Schemas
"""

from datetime import datetime
from uuid import UUID

from chirp.shared.schemas.common import BaseSchema
from chirp.shared.schemas.user import UserSummary


class FollowResponse(BaseSchema):
    """A follow relationship with both ends expanded."""

    id: UUID
    follower_id: UUID
    following_id: UUID
    follower: UserSummary
    following: UserSummary
    created_at: datetime
