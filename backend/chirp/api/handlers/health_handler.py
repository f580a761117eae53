"""
Health Check Handler

Provides health check endpoints for monitoring and load balancers.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from chirp.config.settings import settings
from chirp.shared.db import ping_db
from chirp.shared.schemas.common import HealthResponse, ReadinessResponse


router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Basic health check endpoint.

    Returns:
        HealthResponse with service status
    """
    return HealthResponse(
        status="healthy",
        service=settings.APP_NAME.lower(),
        version=settings.APP_VERSION,
    )


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check():
    """
    Readiness check for load balancers.

    Returns 503 while the database is unreachable.
    """
    database_ok = await ping_db()
    body = ReadinessResponse(
        status="ready" if database_ok else "unavailable",
        service=settings.APP_NAME.lower(),
        version=settings.APP_VERSION,
        checks={"database": "ok" if database_ok else "error"},
    )
    if not database_ok:
        return JSONResponse(status_code=503, content=body.model_dump(mode="json"))
    return body


@router.get("/live")
async def liveness_check():
    """
    Liveness check.

    Returns:
        Simple alive status
    """
    return {"status": "alive"}
