"""
Taskboard Backend — Error Propagation
=======================================

What:  The single place where failure responses are written.
Why:   Workflows raise; they never build error responses themselves. Every
       failure ends up here and leaves as the same JSON shape.

Request states:
    normal ──(any exception leaves the route)──▶ error ──▶ response sent
    normal ──(no route matches)────────────────▶ error ──▶ 404 sent

    In the error state the status code is the one the exception carries
    (`status_code` on TaskboardError / HTTPException), else 500. Nothing is
    re-raised once a response has been produced.

Pieces:
    register_exception_handlers(app):
        TaskboardError         → exc.status_code (400/401/404)
        HTTPException          → exc.status_code; 404 → "Resource not found"
        RequestValidationError → 400 with field-level details
    ErrorHandlerMiddleware:
        Everything else → 500. Implemented as middleware rather than an
        `Exception` handler because Starlette re-raises after running an
        `Exception` handler; this middleware answers and stops there.

Body:
    {"success": false, "error": "<code>", "message": "...", "request_id": "..."}

Security: stack traces and exception context are logged, never returned.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from taskboard.exceptions import TaskboardError
from taskboard.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Resource not found"
UNEXPECTED_MESSAGE = "An unexpected error occurred. Please try again or contact support."


def error_response(
    status_code: int,
    error: str,
    message: str,
    details: Optional[list] = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    """Build the JSON error body shared by every failure path."""
    content: Dict[str, Any] = {
        "success": False,
        "error": error,
        "message": message,
        "request_id": request_id_var.get(""),
    }
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """Map the exception types the app knows about to JSON responses."""

    @app.exception_handler(TaskboardError)
    async def handle_taskboard_error(request: Request, exc: TaskboardError):
        """Workflow-owned failures: validation, conflict, auth, not found."""
        rid = request_id_var.get("")
        if exc.status_code >= 500:
            logger.error("[%s] %s: %s | Context: %s", rid, exc.error_code, exc.message, exc.context)
        else:
            logger.warning("[%s] %s: %s", rid, exc.error_code, exc.message)
        return error_response(exc.status_code, exc.error_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        """Routing failures (unmatched path → 404, wrong method → 405)."""
        if exc.status_code == 404:
            return error_response(404, "not_found", NOT_FOUND_MESSAGE)
        message = exc.detail if isinstance(exc.detail, str) else "Request failed"
        return error_response(
            exc.status_code,
            "http_error",
            message,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        """
        Body or path parameters did not match the endpoint's schema
        (unknown field, wrong type, unparseable endDate, non-integer id).
        """
        rid = request_id_var.get("")
        details = [
            {
                "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"),
                "message": err.get("msg", ""),
            }
            for err in exc.errors()
        ]
        logger.warning("[%s] Request validation failed: %s", rid, details)
        return error_response(
            400,
            "validation_error",
            "Invalid request",
            details=jsonable_encoder(details),
        )


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Catch-all for anything the exception handlers did not claim.

    Typical sources: database connectivity errors, hasher errors, bugs.
    The full traceback is logged with the request ID; the client only gets
    the generic message and the ID to quote in a support request.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            rid = request_id_var.get("")
            status_code = getattr(exc, "status_code", None)
            if not isinstance(status_code, int) or not 400 <= status_code <= 599:
                status_code = 500
            logger.error(
                "[%s] Unexpected error on %s %s: %s",
                rid,
                request.method,
                request.url.path,
                str(exc),
                exc_info=True,
            )
            return error_response(status_code, "unexpected_error", UNEXPECTED_MESSAGE)
