"""
Taskboard Backend — Request Dependencies
==========================================

What:  FastAPI dependencies that assemble a workflow for one request, and
       the body readers the write endpoints use.
How:   session (get_db_session) → store → service. The hasher is shared:
       it holds no per-request state.

Request bodies:
    POST /auth/register, /auth/login and /tasks accept a JSON object or
    form fields (urlencoded or multipart). An absent body reads as {} so the
    workflow answers with its own message ("All fields are required",
    "Task title is required") instead of a generic schema error. Unknown
    fields and malformed JSON still become RequestValidationError (→ 400).

Example usage in a route:
    @router.post("/register", openapi_extra=openapi_body(RegisterRequest))
    async def register(payload: RegisterRequest = Depends(validated_body(RegisterRequest)),
                       service: AuthService = Depends(get_auth_service)):
        return await service.register(payload)

Tests replace any of these with app.dependency_overrides.
"""

from typing import Any, Awaitable, Callable, Dict, Type, TypeVar

from fastapi import Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.database import get_db_session
from taskboard.security import PasswordHasher, password_hasher
from taskboard.services.auth_service import AuthService
from taskboard.services.client_service import ClientService
from taskboard.services.task_service import TaskService
from taskboard.stores.task_store import TaskStore
from taskboard.stores.user_store import UserStore

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

ModelT = TypeVar("ModelT", bound=BaseModel)


async def read_payload(request: Request) -> Dict[str, Any]:
    """The request body as a dict of fields; {} when there is no body."""
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if content_type in FORM_CONTENT_TYPES:
        form = await request.form()
        return dict(form.items())

    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        return await request.json()
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        raise RequestValidationError(
            [{"type": "json_invalid", "loc": ("body",), "msg": "JSON decode error", "input": {}}]
        ) from e


def validated_body(model: Type[ModelT]) -> Callable[..., Awaitable[ModelT]]:
    """Dependency factory: read the body and validate it against `model`."""

    async def dependency(payload: Dict[str, Any] = Depends(read_payload)) -> ModelT:
        try:
            return model.model_validate(payload)
        except PydanticValidationError as e:
            raise RequestValidationError(e.errors(include_url=False), body=payload) from e

    return dependency


def openapi_body(model: Type[BaseModel]) -> Dict[str, Any]:
    """`openapi_extra` documenting a body read through validated_body()."""
    schema = model.model_json_schema()
    return {
        "requestBody": {
            "required": False,
            "content": {
                "application/json": {"schema": schema},
                "application/x-www-form-urlencoded": {"schema": schema},
            },
        }
    }


def get_user_store(session: AsyncSession = Depends(get_db_session)) -> UserStore:
    return UserStore(session)


def get_task_store(session: AsyncSession = Depends(get_db_session)) -> TaskStore:
    return TaskStore(session)


def get_password_hasher() -> PasswordHasher:
    return password_hasher


def get_auth_service(
    users: UserStore = Depends(get_user_store),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> AuthService:
    return AuthService(users=users, hasher=hasher)


def get_client_service(users: UserStore = Depends(get_user_store)) -> ClientService:
    return ClientService(users=users)


def get_task_service(tasks: TaskStore = Depends(get_task_store)) -> TaskService:
    return TaskService(tasks=tasks)
