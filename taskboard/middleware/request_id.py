"""
Taskboard Backend — Request ID Middleware
===========================================

What:  Assigns every request a short correlation ID and echoes it back in the
       X-Request-ID response header.
Why:   Error bodies and log lines carry the same ID, so a client reporting a
       failed registration can be matched to the server-side traceback.
How:   Reuses the client's X-Request-ID when it is a plausible ID, otherwise
       generates one; stores it in a ContextVar read by the loggers and error
       handlers.

Accepted client IDs:
    1-64 characters from [A-Za-z0-9._-]. Anything else (empty, too long,
    spaces, newlines) is replaced, since the value is written verbatim into
    log lines and JSON error bodies.
"""

import re
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

_VALID_REQUEST_ID = re.compile(r"[A-Za-z0-9._-]{1,64}")

# Coroutine-local: concurrent requests on the same loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    return uuid.uuid4().hex[:8]


def resolve_request_id(incoming: str | None) -> str:
    """The client's ID if it is safe to log, else a fresh one."""
    if incoming and _VALID_REQUEST_ID.fullmatch(incoming):
        return incoming
    return new_request_id()


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Outermost middleware; everything downstream can read request_id_var."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        token = request_id_var.set(rid)
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
