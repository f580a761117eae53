"""
Database Dependency

One AsyncSession per request, committed when the handler returns and
rolled back when it raises. FastAPI caches dependencies within a request,
so get_current_user and every service built for that request see the
same session and the same transaction.
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from chirp.shared.db import get_db as _get_db


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async for session in _get_db():
        yield session


DbSession = Annotated[AsyncSession, Depends(get_db)]
