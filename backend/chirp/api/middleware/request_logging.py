"""
Request Logging Middleware

Binds request-scoped context to every log line and logs one summary line
per request.

Bound context:
==============
    request_id  - X-Request-ID from the client, or a fresh UUID4
    method      - HTTP method
    path        - URL path

The request id is echoed back in the X-Request-ID response header.
"""

import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from chirp.shared.core.logging import clear_log_context, log_context, logger

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Structured per-request logging."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        clear_log_context()
        log_context(request_id=request_id, method=request.method, path=request.url.path)

        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = round((time.perf_counter() - started) * 1000, 2)

        logger.info(
            "Request completed",
            status_code=response.status_code,
            duration_ms=duration_ms,
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        clear_log_context()
        return response
