"""
Resource Dependencies

Load a resource named in the path and, where needed, check that the
acting user owns it. Handlers receive a ready-to-use model instead of
an id.

    PostFromPath  → Post for {post_id}, 404 if missing
    OwnedPost     → same, plus 403 unless the current user wrote it

Path ids are typed as UUID, so a malformed id fails validation (400)
before any lookup.
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends

from chirp.api.dependencies.auth import CurrentUser
from chirp.api.dependencies.services import get_post_service
from chirp.shared.models.post import Post
from chirp.shared.services.post_service import PostService


async def get_post_or_404(
    post_id: UUID,
    post_service: Annotated[PostService, Depends(get_post_service)],
) -> Post:
    return await post_service.get_post(post_id)


async def require_post_owner(
    current_user: CurrentUser,
    post: Annotated[Post, Depends(get_post_or_404)],
) -> Post:
    """
    Raises:
        AuthorizationError: current user is not the post's author
    """
    PostService.ensure_owner(post, current_user)
    return post


PostFromPath = Annotated[Post, Depends(get_post_or_404)]
OwnedPost = Annotated[Post, Depends(require_post_owner)]
