"""
Chirp API Application Entry Point

FastAPI application setup with all routers, middleware, and lifecycle management.

Application Architecture:
=========================
┌─────────────────────────────────────────────────────────────────────────────┐
│                           CHIRP API                                         │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   Middleware Stack                                                          │
│     CORS Middleware                                                         │
│     Request Logging (request_id, method, path)                              │
│     Exception Handlers                                                      │
│                              │                                              │
│                              ▼                                              │
│   Routers                                                                   │
│     Health │ Auth │ Posts │ Follow │ Feed │ Messages │ Notifications │ WS   │
│                              │                                              │
│                              ▼                                              │
│   Dependencies (Injected)                                                   │
│     Database │ CurrentUser │ Pagination │ Resources │ Services              │
│                                                                             │
│   Static: /uploads → UPLOAD_DIR                                             │
│   Docs:   /api/docs, /api/openapi.json                                      │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Lifecycle:
==========
1. Application starts → lifespan startup
2. Database connection verified (tables created when DATABASE_AUTO_CREATE)
3. Application serves requests
4. Application stops → lifespan shutdown
5. Database connection closed

Usage:
======
    # Run with uvicorn
    uvicorn chirp.api.main:app --host 0.0.0.0 --port 4000 --reload

    # Or via the console script
    chirp-api

    # Or programmatically
    from chirp.api.main import create_application
    app = create_application()
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from chirp.config.settings import settings
from chirp.shared.db import init_db, close_db
from chirp.shared.core.logging import logger
from chirp.shared.realtime import registry
from chirp.api.middleware import RequestLoggingMiddleware, setup_exception_handlers
from chirp.api.routes import register_routes


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup:
    - Verify database connectivity (and create tables if configured)

    Shutdown:
    - Close database connections
    """
    # ═══════════════════════════════════════════════════════════════════════════
    # STARTUP
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info(
        "Starting Chirp API",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
        port=settings.PORT,
    )

    await init_db()

    logger.info("Chirp API started successfully")

    yield

    # ═══════════════════════════════════════════════════════════════════════════
    # SHUTDOWN
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info("Shutting down Chirp API")

    # Drop references to sockets the server is closing
    registry.clear()
    await close_db()

    logger.info("Chirp API shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance

    This factory function:
    1. Creates the FastAPI app with settings
    2. Adds middleware (CORS, request logging)
    3. Sets up exception handlers
    4. Registers all routes and the uploads mount
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="Social network API: users, posts, likes, followers, messages and notifications",
        version=settings.APP_VERSION,
        docs_url="/api/docs",
        redoc_url=None,
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # MIDDLEWARE
    # ═══════════════════════════════════════════════════════════════════════════

    app.add_middleware(RequestLoggingMiddleware)

    # CORS is added last so it wraps everything else
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # EXCEPTION HANDLERS
    # ═══════════════════════════════════════════════════════════════════════════

    setup_exception_handlers(app)

    # ═══════════════════════════════════════════════════════════════════════════
    # ROUTES
    # ═══════════════════════════════════════════════════════════════════════════

    register_routes(app)

    upload_dir = Path(settings.UPLOAD_DIR)
    upload_dir.mkdir(parents=True, exist_ok=True)
    app.mount("/uploads", StaticFiles(directory=upload_dir), name="uploads")

    return app


# Create the application instance
app = create_application()
