"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_db(), DbSession
- Authentication: get_current_user(), CurrentUser
- Pagination: get_pagination(), Pagination
- Resources: get_post_or_404(), PostFromPath, require_post_owner(), OwnedPost
- Services: get_*_service() functions

Type Aliases:
=============
Type aliases provide cleaner route signatures:

    # Instead of this:
    async def handler(
        db: AsyncSession = Depends(get_db),
        user: User = Depends(get_current_user)
    ):

    # Write this:
    async def handler(db: DbSession, user: CurrentUser):
"""

from chirp.api.dependencies.database import (
    get_db,
    DbSession,
)
from chirp.api.dependencies.auth import (
    get_current_user,
    get_current_user_token,
    CurrentUser,
)
from chirp.api.dependencies.pagination import (
    get_pagination,
    Pagination,
)
from chirp.api.dependencies.resources import (
    get_post_or_404,
    require_post_owner,
    PostFromPath,
    OwnedPost,
)

__all__ = [
    # Database
    "get_db",
    "DbSession",
    # Authentication
    "get_current_user",
    "get_current_user_token",
    "CurrentUser",
    # Pagination
    "get_pagination",
    "Pagination",
    # Resources
    "get_post_or_404",
    "require_post_owner",
    "PostFromPath",
    "OwnedPost",
]
