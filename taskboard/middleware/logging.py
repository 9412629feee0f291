"""
Taskboard Backend — Request Logging Middleware
================================================

What:  One access log line per request: method, path, status, duration,
       request ID and client IP.
When:  Runs inside RequestIDMiddleware (so the ID is set) and outside
       ErrorHandlerMiddleware (so 500s are logged with their final status).

Log level by status:
    5xx → ERROR, 4xx → WARNING, everything else → INFO

What we DON'T log: request bodies. Registration and login bodies carry
plaintext passwords.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from taskboard.middleware.request_id import request_id_var

logger = logging.getLogger("taskboard.access")

# Probed every few seconds by orchestrators; logging them drowns real traffic
SKIPPED_PATHS = frozenset({"/health"})


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Times each request and writes its access line once the status is known."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in SKIPPED_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)

        rid = request_id_var.get("")
        client_ip = request.client.host if request.client else "unknown"
        logger.log(
            level_for_status(response.status_code),
            "[%s] %s %s -> %d (%.1fms) from %s",
            rid,
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": request.url.path,
                "status": response.status_code,
                "duration_ms": elapsed_ms,
                "client_ip": client_ip,
            },
        )
        return response
