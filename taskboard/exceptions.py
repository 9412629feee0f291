"""
Taskboard Backend — Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the failures workflows own.
Why:   Each exception carries the HTTP status it maps to, so the error
       middleware can render any of them without knowing the concrete type.
How:   Every class sets `status_code` and `error_code`; the message is the
       user-facing text returned in the JSON body.
Who:   Raised by services and stores; rendered by taskboard.middleware.errors.

Exception Hierarchy:
    TaskboardError (base)        → 500 (only if raised directly)
    ├── ValidationError          → 400 Bad Request (missing/invalid input)
    ├── ConflictError            → 400 Bad Request (duplicate username/email)
    ├── AuthenticationError      → 401 Unauthorized (bad login credentials)
    └── NotFoundError            → 404 Not Found

    Anything that is not a TaskboardError (driver errors, hasher errors,
    programming errors) is treated as unexpected and rendered as 500.

Note on ConflictError → 400:
    Existing clients of this API expect duplicate registrations to come back
    as 400 rather than 409, so the status code is kept.
"""

from typing import Any, Dict, Optional


class TaskboardError(Exception):
    """
    Base exception for all Taskboard application errors.

    Attributes:
        message:     User-facing error description (returned in the response)
        context:     Additional debug info (logged but NOT returned to client)
        status_code: HTTP status the error middleware responds with
        error_code:  Machine-readable error identifier for the response body
    """

    status_code: int = 500
    error_code: str = "server_error"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(TaskboardError):
    """
    Raised when client input is missing or unusable.

    When:    Registration without all three fields, task without a title.
    HTTP:    400 Bad Request
    """

    status_code = 400
    error_code = "validation_error"

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class ConflictError(TaskboardError):
    """
    Raised when a new record collides with an existing unique identity.

    When:    Registering a username or email that is already in use, either
             caught by the workflow's lookup or by the UNIQUE constraint on
             insert.
    HTTP:    400 Bad Request
    """

    status_code = 400
    error_code = "conflict"

    def __init__(
        self,
        message: str = "Resource already exists",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class AuthenticationError(TaskboardError):
    """Raised when login credentials do not match a user. HTTP 401."""

    status_code = 401
    error_code = "authentication_failed"

    def __init__(
        self,
        message: str = "Invalid credentials",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(TaskboardError):
    """
    Raised when a requested resource does not exist.

    When:    GET /clients/{id} for an unknown id, or any unmatched route.
    HTTP:    404 Not Found

    Why a custom exception:
        SQLAlchemy returns None for missing records (not an exception).
        Services convert None → NotFoundError so the status code is decided
        by the exception, not by the route.
    """

    status_code = 404
    error_code = "not_found"

    def __init__(
        self,
        message: str = "Resource not found",
        resource: Optional[str] = None,
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if resource:
            ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
