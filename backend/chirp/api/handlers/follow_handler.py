"""
Follow Handler

Follow graph endpoints. Mounted under /api/follow.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from chirp.api.dependencies import CurrentUser
from chirp.api.dependencies.services import get_follower_service
from chirp.shared.schemas.common import MessageResponse
from chirp.shared.schemas.follow import FollowResponse
from chirp.shared.services.follower_service import FollowerService


router = APIRouter()


@router.post(
    "/{user_id}",
    response_model=FollowResponse,
    status_code=status.HTTP_201_CREATED,
)
async def follow_user(
    user_id: UUID,
    current_user: CurrentUser,
    follower_service: FollowerService = Depends(get_follower_service),
):
    """
    Follow another user.

    Raises:
        400: Following yourself
        404: Unknown or deleted user
        409: Already following
    """
    relationship = await follower_service.follow(current_user, user_id)
    return FollowResponse.model_validate(relationship)


@router.delete("/{user_id}", response_model=MessageResponse)
async def unfollow_user(
    user_id: UUID,
    current_user: CurrentUser,
    follower_service: FollowerService = Depends(get_follower_service),
):
    """
    Raises:
        404: Not following this user
    """
    await follower_service.unfollow(current_user, user_id)
    return MessageResponse(message="Unfollowed")


@router.get("/{user_id}/followers", response_model=list[FollowResponse])
async def list_followers(
    user_id: UUID,
    current_user: CurrentUser,
    follower_service: FollowerService = Depends(get_follower_service),
):
    """Who follows the given user."""
    relationships = await follower_service.list_followers(user_id)
    return [FollowResponse.model_validate(r) for r in relationships]


@router.get("/{user_id}/following", response_model=list[FollowResponse])
async def list_following(
    user_id: UUID,
    current_user: CurrentUser,
    follower_service: FollowerService = Depends(get_follower_service),
):
    """Whom the given user follows."""
    relationships = await follower_service.list_following(user_id)
    return [FollowResponse.model_validate(r) for r in relationships]
