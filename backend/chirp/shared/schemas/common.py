"""
Common Schemas

Envelopes shared by every Chirp resource.

Response shapes:
================
    Listing         {"data": [...], "pagination": {"page", "per_page", "total", "total_pages", "has_next"}}
    Confirmation    {"message": "Post deleted", "success": true}
    Error           {"error": {"code": "NOT_FOUND", "message": "...", "details": {}}}

Usage:
======
    from chirp.shared.schemas.common import PaginatedResponse, PaginationMeta

    posts, total = await post_service.list_posts(offset=p.offset, limit=p.limit)
    return PaginatedResponse[PostResponse](
        data=[PostResponse.model_validate(post) for post in posts],
        pagination=PaginationMeta.create(page=p.page, per_page=p.per_page, total=total),
    )
"""

from datetime import datetime, timezone
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

DataT = TypeVar("DataT")


class BaseSchema(BaseModel):
    """Response schemas built straight from ORM rows."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# PAGINATION
# ═══════════════════════════════════════════════════════════════════════════════


class PaginationParams(BaseModel):
    """
    Page/per_page pair parsed from the query string by get_pagination.

    per_page is capped at 100 so a single request cannot pull a whole table.
    """

    page: int = Field(default=1, ge=1, description="Page number (1-indexed)")
    per_page: int = Field(default=20, ge=1, le=100, description="Items per page")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page

    @property
    def limit(self) -> int:
        return self.per_page


class PaginationMeta(BaseModel):
    page: int
    per_page: int
    total: int = Field(description="Items across all pages")
    total_pages: int
    has_next: bool = False

    @classmethod
    def create(cls, page: int, per_page: int, total: int) -> "PaginationMeta":
        total_pages = -(-total // per_page) if per_page else 0
        return cls(
            page=page,
            per_page=per_page,
            total=total,
            total_pages=total_pages,
            has_next=page < total_pages,
        )


class PaginatedResponse(BaseModel, Generic[DataT]):
    """One page of a listing (users, posts, feed)."""

    data: list[DataT]
    pagination: PaginationMeta


# ═══════════════════════════════════════════════════════════════════════════════
# CONFIRMATIONS & ERRORS
# ═══════════════════════════════════════════════════════════════════════════════


class MessageResponse(BaseModel):
    """Body of DELETE/unfollow/unlike style endpoints."""

    message: str
    success: bool = True


class ErrorDetail(BaseModel):
    code: str = Field(description="Machine-readable error code, e.g. CONFLICT")
    message: str
    details: Optional[dict[str, Any]] = None


class ErrorResponse(BaseModel):
    """
    Error envelope produced by the exception handlers.

    Only used to document error responses in OpenAPI; the handlers build
    the JSON from ChirpException.to_dict() directly.
    """

    error: ErrorDetail


# ═══════════════════════════════════════════════════════════════════════════════
# PROBES
# ═══════════════════════════════════════════════════════════════════════════════


class HealthResponse(BaseModel):
    status: str = "healthy"
    service: str = "chirp"
    version: str = "1.0.0"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ReadinessResponse(HealthResponse):
    """Health payload plus per-dependency results ("ok" / "error")."""

    checks: dict[str, str] = Field(default_factory=dict)
