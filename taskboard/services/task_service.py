"""
Taskboard Backend — Task Service
==================================

What:  Create and list tasks on behalf of a user.
Who:   Called by the /tasks route handlers.

Create defaults:
    status   → always "Not Started"
    priority → "Medium" when absent or empty
    category → null when absent or empty
    endDate  → parsed by the request schema, null when absent or empty
"""

import logging

from taskboard.exceptions import ValidationError
from taskboard.models.task import DEFAULT_PRIORITY, DEFAULT_STATUS
from taskboard.schemas.task import (
    TaskCreateRequest,
    TaskCreatedResponse,
    TaskListResponse,
    TaskRecord,
)
from taskboard.stores.task_store import TaskStore

logger = logging.getLogger(__name__)


class TaskService:
    """Task workflows; store failures propagate to the error middleware."""

    def __init__(self, tasks: TaskStore):
        self.tasks = tasks

    async def list_tasks(self, user_id: int) -> TaskListResponse:
        """All tasks owned by `user_id`, newest first."""
        tasks = await self.tasks.list_for_user(user_id)
        return TaskListResponse(
            tasks=[TaskRecord.model_validate(task) for task in tasks],
        )

    async def create_task(self, payload: TaskCreateRequest) -> TaskCreatedResponse:
        """
        Create a task.

        Raises:
            ValidationError: title missing/empty, or no owner id (→ 400).
                             Nothing is written in either case.
        """
        if not payload.title:
            raise ValidationError(message="Task title is required", field="title")
        if payload.user_id is None:
            raise ValidationError(message="Task owner is required", field="UserId")

        task = await self.tasks.create(
            user_id=payload.user_id,
            title=payload.title,
            status=DEFAULT_STATUS,
            priority=payload.priority or DEFAULT_PRIORITY,
            category=payload.category or None,
            end_date=payload.end_date,
        )
        logger.info("Task %s created for user %s", task.id, task.user_id)

        return TaskCreatedResponse(task=TaskRecord.model_validate(task))
