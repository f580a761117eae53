"""
Database Module

Database connectivity and session management for Chirp.

Architecture Overview:
======================
    FastAPI Route
        │  Dependency Injection: get_db()
        ▼
    AsyncSession (one per request, commit on success, rollback on error)
        │  Passed to services, then repositories
        ▼
    UserRepository, PostRepository, LikeRepository, FollowerRepository,
    MessageRepository, NotificationRepository
        │  SQL
        ▼
    PostgreSQL (asyncpg) or SQLite (aiosqlite)

Usage in FastAPI:
=================
    from chirp.api.dependencies import DbSession

    @router.get("/users/{user_id}")
    async def get_user(user_id: UUID, db: DbSession):
        ...
"""

from chirp.shared.db.session import (
    get_db,
    init_db,
    close_db,
    ping_db,
    AsyncSessionLocal,
    engine,
)

__all__ = [
    "get_db",
    "init_db",
    "close_db",
    "ping_db",
    "AsyncSessionLocal",
    "engine",
]
