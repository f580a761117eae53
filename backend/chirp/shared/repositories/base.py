"""
Base Repository

Generic data access shared by every Chirp repository.

What This Provides:
===================
- get(id)          → one row by primary key, or None
- exists(id)       → primary key lookup without loading the row
- create(**cols)   → INSERT, returning the refreshed instance
- save(instance)   → flush pending attribute changes and refresh
- delete(id)       → hard DELETE by primary key
- remove(instance) → hard DELETE of an already loaded row

Anything with a WHERE clause beyond the primary key lives in the
entity repository (PostRepository.list_by_authors, ...).

Transactions:
=============
Repositories only flush. get_db() commits once the handler returns, or
rolls back when it raises, so one request is one transaction.

    class LikeRepository(BaseRepository[Like]):
        def __init__(self, session):
            super().__init__(Like, session)
"""

from typing import Any, Generic, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.functions import count as sql_count

from chirp.shared.models.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic repository over one mapped class.

    Attributes:
        model: The SQLAlchemy model class
        session: The request's AsyncSession
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        self.model = model
        self.session = session

    # ═══════════════════════════════════════════════════════════════════════════
    # READ
    # ═══════════════════════════════════════════════════════════════════════════

    async def get(self, record_id: UUID) -> Optional[ModelType]:
        """
        SQL Generated:
            SELECT * FROM likes WHERE id = '550e8400-...'
        """
        result = await self.session.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def exists(self, record_id: UUID) -> bool:
        result = await self.session.execute(
            select(sql_count()).select_from(self.model).where(self.model.id == record_id)
        )
        return (result.scalar() or 0) > 0

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITE
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Insert a row.

        The refresh also runs the model's selectin loaders, so relationships
        such as Like.user are usable without another query.

        Raises:
            IntegrityError: A unique or check constraint rejected the row
        """
        instance = self.model(**kwargs)
        self.session.add(instance)
        return await self.save(instance)

    async def save(self, instance: ModelType) -> ModelType:
        """Flush changes made to a loaded instance and reload it."""
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def delete(self, record_id: UUID) -> bool:
        """
        Hard delete by id.

        Returns:
            False when no row has that id
        """
        instance = await self.get(record_id)
        if not instance:
            return False
        await self.remove(instance)
        return True

    async def remove(self, instance: ModelType) -> None:
        """
        Hard delete a loaded row. Child rows go through ON DELETE CASCADE.

        SQL Generated:
            DELETE FROM posts WHERE id = '...'
        """
        await self.session.delete(instance)
        await self.session.flush()
