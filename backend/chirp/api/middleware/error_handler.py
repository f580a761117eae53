"""
Error Handler Middleware

Global exception handling for the API.

Provides consistent error responses across all endpoints by catching
exceptions and converting them to standardized JSON responses.

Error Response Format:
======================
    {
        "error": {
            "code": "NOT_FOUND",
            "message": "Post with id 'abc-123' not found",
            "details": {}
        }
    }

Exception Handling:
===================
1. ChirpException subclasses → Use their status_code and to_dict()
2. RequestValidationError / pydantic ValidationError → 400 with field errors
3. Other exceptions → 500 with generic message, Slack alert when configured

Usage:
======
    from chirp.api.middleware.error_handler import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from typing import Any, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from chirp.shared.adapters import slack_adapter
from chirp.shared.core.exceptions import ChirpException, InternalServerError
from chirp.shared.core.logging import logger


def _format_errors(errors: Sequence[Any]) -> list[dict[str, Any]]:
    """Reduce pydantic error dicts to JSON-safe field/message pairs."""
    return [
        {
            "field": ".".join(str(part) for part in error.get("loc", ())),
            "message": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in errors
    ]


def _validation_response(errors: Sequence[Any]) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Request validation failed",
                "details": {"errors": _format_errors(errors)},
            }
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Set up global exception handlers.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(ChirpException)
    async def chirp_exception_handler(
        request: Request,
        exc: ChirpException,
    ) -> JSONResponse:
        """
        Handle Chirp-specific exceptions.

        All custom exceptions inherit from ChirpException and include:
        - status_code: HTTP status code
        - error_code: Machine-readable error code
        - message: Human-readable message
        - details: Additional context
        """
        logger.warning(
            "Application error",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Body, query or path parameters did not match the declared types."""
        errors = exc.errors()
        logger.warning("Validation error", errors=_format_errors(errors), path=request.url.path)
        return _validation_response(errors)

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: ValidationError,
    ) -> JSONResponse:
        """Pydantic models built inside handlers or services."""
        errors = exc.errors()
        logger.warning("Validation error", errors=_format_errors(errors), path=request.url.path)
        return _validation_response(errors)

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Handle unexpected exceptions.

        Full error details are logged and sent to Slack, never to the client.
        """
        logger.error(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            method=request.method,
            path=request.url.path,
            exc_info=exc,
        )
        await slack_adapter.slack_notifier.send(
            f":rotating_light: {type(exc).__name__} on {request.method} {request.url.path}: {exc}"
        )
        return JSONResponse(
            status_code=500,
            content=InternalServerError().to_dict(),
        )
