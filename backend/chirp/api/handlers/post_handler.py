"""
Post Handler

Post CRUD and likes. Mounted under /api/posts.

Access rules:
=============
    GET     /                 any authenticated user
    POST    /                 any authenticated user (author = caller)
    GET     /{post_id}        any authenticated user, 404 if missing
    PUT     /{post_id}        author only (403)
    DELETE  /{post_id}        author only (403), likes deleted with it
    POST    /{post_id}/likes  409 on second like
    DELETE  /{post_id}/likes  404 if not liked
    GET     /{post_id}/likes  likes with count
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from chirp.api.dependencies import CurrentUser, OwnedPost, Pagination, PostFromPath
from chirp.api.dependencies.services import get_like_service, get_post_service
from chirp.shared.schemas.common import MessageResponse, PaginatedResponse, PaginationMeta
from chirp.shared.schemas.post import (
    LikeResponse,
    PostCreate,
    PostLikesResponse,
    PostResponse,
    PostUpdate,
)
from chirp.shared.services.like_service import LikeService
from chirp.shared.services.post_service import PostService


router = APIRouter()


# ═══════════════════════════════════════════════════════════════════════════════
# POSTS
# ═══════════════════════════════════════════════════════════════════════════════


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    post_data: PostCreate,
    current_user: CurrentUser,
    post_service: PostService = Depends(get_post_service),
):
    """Publish a post as the authenticated user."""
    post = await post_service.create_post(current_user, post_data)
    return PostResponse.model_validate(post)


@router.get("", response_model=PaginatedResponse[PostResponse])
async def list_posts(
    current_user: CurrentUser,
    pagination: Pagination,
    post_service: PostService = Depends(get_post_service),
):
    """All posts, newest first."""
    posts, total = await post_service.list_posts(
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


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(current_user: CurrentUser, post: PostFromPath):
    return PostResponse.model_validate(post)


@router.put("/{post_id}", response_model=PostResponse)
async def update_post(
    post_data: PostUpdate,
    current_user: CurrentUser,
    post: OwnedPost,
    post_service: PostService = Depends(get_post_service),
):
    """
    Partially update a post.

    Raises:
        400: No fields given, header < 3, content < 10, or non-http(s) image
        403: Caller is not the author
    """
    post = await post_service.update_post(post, current_user, post_data)
    return PostResponse.model_validate(post)


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    current_user: CurrentUser,
    post: OwnedPost,
    post_service: PostService = Depends(get_post_service),
):
    """
    Delete a post together with its likes.

    Raises:
        403: Caller is not the author
    """
    await post_service.delete_post(post, current_user)
    return MessageResponse(message="Post deleted")


# ═══════════════════════════════════════════════════════════════════════════════
# LIKES
# ═══════════════════════════════════════════════════════════════════════════════


@router.post(
    "/{post_id}/likes",
    response_model=LikeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def like_post(
    post_id: UUID,
    current_user: CurrentUser,
    like_service: LikeService = Depends(get_like_service),
):
    """
    Raises:
        404: Unknown post
        409: Already liked
    """
    like = await like_service.like_post(current_user, post_id)
    return LikeResponse.model_validate(like)


@router.delete("/{post_id}/likes", response_model=MessageResponse)
async def unlike_post(
    post_id: UUID,
    current_user: CurrentUser,
    like_service: LikeService = Depends(get_like_service),
):
    await like_service.unlike_post(current_user, post_id)
    return MessageResponse(message="Like removed")


@router.get("/{post_id}/likes", response_model=PostLikesResponse)
async def list_likes(
    post_id: UUID,
    current_user: CurrentUser,
    like_service: LikeService = Depends(get_like_service),
):
    likes, count = await like_service.list_likes(post_id)
    return PostLikesResponse(
        post_id=post_id,
        count=count,
        likes=[LikeResponse.model_validate(like) for like in likes],
    )
