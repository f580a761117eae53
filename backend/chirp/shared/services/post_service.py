"""
Post Service

Business logic for posts.

Update rules:
=============
    At least one of header, content, image must be present.
    header   → at least 3 characters after trimming
    content  → at least 10 characters after trimming
    image    → an http:// or https:// URL (null clears it)

Ownership:
==========
    Only the author may update or delete a post; anyone else gets 403.
"""

from typing import Any, Tuple
from urllib.parse import urlparse
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from chirp.shared.core.exceptions import AuthorizationError, BadRequestError, PostNotFoundError
from chirp.shared.core.logging import get_logger
from chirp.shared.models.post import Post
from chirp.shared.models.user import User
from chirp.shared.repositories.post_repository import PostRepository
from chirp.shared.schemas.post import PostCreate, PostUpdate

logger = get_logger(__name__)

MIN_HEADER_LENGTH = 3
MIN_CONTENT_LENGTH = 10


def _is_http_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


class PostService:
    """
    Service for post-related business logic.

    Handles:
    - Creating and listing posts
    - Validated partial updates
    - Deletion (likes go with the post)
    - Ownership checks
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = PostRepository(session)

    async def create_post(self, author: User, data: PostCreate) -> Post:
        """Create a post authored by the given user."""
        if data.image is not None and not _is_http_url(data.image):
            raise BadRequestError("Image must be a valid http(s) URL")

        post = await self.repo.create(
            header=data.header,
            content=data.content,
            image=data.image,
            user_id=author.id,
        )
        logger.info("Post created", post_id=str(post.id), user_id=str(author.id))
        return await self.repo.get_with_author(post.id)

    async def list_posts(self, *, offset: int = 0, limit: int = 20) -> Tuple[list[Post], int]:
        posts = await self.repo.list_with_authors(offset=offset, limit=limit)
        total = await self.repo.count_all()
        return posts, total

    async def get_post(self, post_id: UUID) -> Post:
        """
        Raises:
            PostNotFoundError: Unknown post id
        """
        post = await self.repo.get_with_author(post_id)
        if not post:
            raise PostNotFoundError(post_id)
        return post

    @staticmethod
    def ensure_owner(post: Post, user: User) -> None:
        """
        Raises:
            AuthorizationError: The user did not write the post
        """
        if post.user_id != user.id:
            raise AuthorizationError("You do not have permission to modify this post")

    @staticmethod
    def validate_update(data: PostUpdate) -> dict[str, Any]:
        """
        Check a partial update and return the fields to write.

        Raises:
            BadRequestError: No fields, or a field breaks its rule
        """
        fields = data.model_dump(exclude_unset=True)
        if not fields:
            raise BadRequestError("At least one of header, content or image must be provided")

        if "header" in fields:
            header = (fields["header"] or "").strip()
            if len(header) < MIN_HEADER_LENGTH:
                raise BadRequestError(
                    f"Header must be at least {MIN_HEADER_LENGTH} characters",
                    details={"field": "header"},
                )
            fields["header"] = header

        if "content" in fields:
            content = (fields["content"] or "").strip()
            if len(content) < MIN_CONTENT_LENGTH:
                raise BadRequestError(
                    f"Content must be at least {MIN_CONTENT_LENGTH} characters",
                    details={"field": "content"},
                )
            fields["content"] = content

        if fields.get("image") is not None and not _is_http_url(fields["image"]):
            raise BadRequestError("Image must be a valid http(s) URL", details={"field": "image"})

        return fields

    async def update_post(self, post: Post, user: User, data: PostUpdate) -> Post:
        """Owner-only validated partial update."""
        self.ensure_owner(post, user)
        fields = self.validate_update(data)
        post = await self.repo.update_fields(post, fields)
        logger.info("Post updated", post_id=str(post.id), fields=sorted(fields))
        return await self.repo.get_with_author(post.id)

    async def delete_post(self, post: Post, user: User) -> None:
        """Owner-only delete. The post's likes are removed with it."""
        self.ensure_owner(post, user)
        await self.repo.delete_post(post)
        logger.info("Post deleted", post_id=str(post.id), user_id=str(user.id))
