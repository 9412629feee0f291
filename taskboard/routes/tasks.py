"""
Taskboard Backend — Task Route Handlers
=========================================

What:  GET /tasks/{user_id} (list a user's tasks) and POST /tasks (create).
"""

from fastapi import APIRouter, Depends

from taskboard.dependencies import get_task_service, openapi_body, validated_body
from taskboard.schemas.common import ErrorResponse
from taskboard.schemas.task import (
    TaskCreateRequest,
    TaskCreatedResponse,
    TaskListResponse,
)
from taskboard.services.task_service import TaskService

router = APIRouter(prefix="/tasks", tags=["Tasks"])


@router.get(
    "/{user_id}",
    response_model=TaskListResponse,
    responses={
        400: {"description": "user_id is not an integer", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List a user's tasks, newest first",
)
async def list_tasks(
    user_id: int,
    service: TaskService = Depends(get_task_service),
) -> TaskListResponse:
    return await service.list_tasks(user_id)


@router.post(
    "",
    status_code=201,
    response_model=TaskCreatedResponse,
    responses={
        201: {"description": "Task created", "model": TaskCreatedResponse},
        400: {"description": "Missing title or owner", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a task",
    openapi_extra=openapi_body(TaskCreateRequest),
)
async def create_task(
    payload: TaskCreateRequest = Depends(validated_body(TaskCreateRequest)),
    service: TaskService = Depends(get_task_service),
) -> TaskCreatedResponse:
    """
    Create a task for the user given in `UserId`.

    New tasks always start as "Not Started"; priority defaults to "Medium".
    """
    return await service.create_task(payload)
