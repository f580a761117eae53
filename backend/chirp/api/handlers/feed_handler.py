"""
Feed Handler

GET /api/feed: posts by the users the caller follows, newest first.
"""

from fastapi import APIRouter, Depends

from chirp.api.dependencies import CurrentUser, Pagination
from chirp.api.dependencies.services import get_feed_service
from chirp.shared.schemas.common import PaginatedResponse, PaginationMeta
from chirp.shared.schemas.post import PostResponse
from chirp.shared.services.feed_service import FeedService


router = APIRouter()


@router.get("", response_model=PaginatedResponse[PostResponse])
async def get_feed(
    current_user: CurrentUser,
    pagination: Pagination,
    feed_service: FeedService = Depends(get_feed_service),
):
    posts, total = await feed_service.get_feed(
        current_user,
        offset=pagination.offset,
        limit=pagination.limit,
    )
    return PaginatedResponse[PostResponse](
        data=[PostResponse.model_validate(post) for post in posts],
        pagination=PaginationMeta.create(
            page=pagination.page,
            per_page=pagination.per_page,
            total=total,
        ),
    )
