"""
Base Model Classes

This module provides the foundational classes for all SQLAlchemy models in Chirp.
It includes the declarative base and common mixins for timestamps and soft deletion.

Model Hierarchy:
================
    Base                    ← SQLAlchemy declarative base
       │
       ├── TimestampMixin   ← Automatic created_at/updated_at
       │
       └── SoftDeleteMixin  ← Logical delete with deleted_at

Usage:
======
    from chirp.shared.models.base import Base, TimestampMixin, SoftDeleteMixin

    class Post(Base, TimestampMixin):
        __tablename__ = "posts"
        id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    class User(Base, TimestampMixin, SoftDeleteMixin):
        __tablename__ = "users"
        # Logically deleted with user.deleted_at = utcnow()
"""

from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy import JSON, DateTime, text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    """Timezone-aware current time used for column defaults."""
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Primary keys use the generic ``sqlalchemy.Uuid`` type, which maps to the
    native UUID column on PostgreSQL and to CHAR(32) on SQLite.
    """

    type_annotation_map = {
        dict[str, Any]: JSON,
    }


class TimestampMixin:
    """
    Mixin that adds automatic timestamp tracking to models.

    - created_at: Set when the record is first inserted
    - updated_at: Updated whenever the record is modified

    Database Behavior:
    ==================
    Both columns are filled by SQLAlchemy with microsecond precision so that
    "newest first" listings stay stable when rows are written in quick
    succession. The server default covers rows inserted outside the ORM.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        onupdate=utcnow,
        nullable=False,
    )


class SoftDeleteMixin:
    """
    Mixin that adds logical delete capability to models.

    Instead of permanently deleting records, a logical delete marks them
    with a timestamp. Queries for live records filter on:
        query.where(Model.deleted_at.is_(None))
    """

    deleted_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )

    @property
    def is_deleted(self) -> bool:
        """True once the record has been logically deleted."""
        return self.deleted_at is not None
