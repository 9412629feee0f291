"""
Taskboard Backend — Task Service Unit Tests
=============================================

What:  TaskService against an AsyncMock TaskStore.

What we test:
    ✅ Defaults: status "Not Started", priority "Medium", null category
    ✅ Missing title or owner → ValidationError, nothing written
    ✅ Listing passes the owner through and keeps store order
    ✅ Store failures propagate unmodified
"""

from datetime import datetime

import pytest
from pydantic import ValidationError as PydanticValidationError

from conftest import make_task
from taskboard.exceptions import ValidationError
from taskboard.schemas.task import TaskCreateRequest, TaskRecord
from taskboard.services.task_service import TaskService


class TestCreateTask:

    @pytest.mark.asyncio
    async def test_applies_defaults(self, task_store):
        task_store.create.return_value = make_task(id=3, user_id=5, title="Ship it")
        service = TaskService(tasks=task_store)

        result = await service.create_task(TaskCreateRequest(title="Ship it", UserId=5))

        task_store.create.assert_awaited_once_with(
            user_id=5,
            title="Ship it",
            status="Not Started",
            priority="Medium",
            category=None,
            end_date=None,
        )
        assert result.success is True
        assert result.message == "Task added successfully"
        assert result.task.id == 3

    @pytest.mark.asyncio
    async def test_keeps_supplied_fields(self, task_store):
        due = datetime(2025, 3, 1)
        task_store.create.return_value = make_task(
            priority="High", category="Work", end_date=due
        )
        service = TaskService(tasks=task_store)

        await service.create_task(
            TaskCreateRequest(
                title="Report",
                UserId=1,
                priority="High",
                category="Work",
                endDate="2025-03-01",
            )
        )

        kwargs = task_store.create.await_args.kwargs
        assert kwargs["priority"] == "High"
        assert kwargs["category"] == "Work"
        assert kwargs["end_date"] == due
        assert kwargs["status"] == "Not Started"

    @pytest.mark.asyncio
    async def test_empty_strings_fall_back_to_defaults(self, task_store):
        task_store.create.return_value = make_task()
        service = TaskService(tasks=task_store)

        await service.create_task(
            TaskCreateRequest(title="T", UserId=1, priority="", category="", endDate="")
        )

        kwargs = task_store.create.await_args.kwargs
        assert kwargs["priority"] == "Medium"
        assert kwargs["category"] is None
        assert kwargs["end_date"] is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("title", [None, ""])
    async def test_missing_title_rejected(self, task_store, title):
        service = TaskService(tasks=task_store)

        with pytest.raises(ValidationError) as excinfo:
            await service.create_task(TaskCreateRequest(title=title, UserId=1))

        assert excinfo.value.message == "Task title is required"
        task_store.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_owner_rejected(self, task_store):
        service = TaskService(tasks=task_store)

        with pytest.raises(ValidationError, match="Task owner is required"):
            await service.create_task(TaskCreateRequest(title="Orphan"))

        task_store.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_store_failure_propagates(self, task_store):
        error = RuntimeError("insert failed")
        task_store.create.side_effect = error
        service = TaskService(tasks=task_store)

        with pytest.raises(RuntimeError) as excinfo:
            await service.create_task(TaskCreateRequest(title="T", UserId=1))

        assert excinfo.value is error


class TestListTasks:

    @pytest.mark.asyncio
    async def test_returns_store_order(self, task_store):
        task_store.list_for_user.return_value = [
            make_task(id=2, title="newer"),
            make_task(id=1, title="older"),
        ]
        service = TaskService(tasks=task_store)

        result = await service.list_tasks(1)

        task_store.list_for_user.assert_awaited_once_with(1)
        assert [t.title for t in result.tasks] == ["newer", "older"]

    @pytest.mark.asyncio
    async def test_empty_list(self, task_store):
        service = TaskService(tasks=task_store)

        result = await service.list_tasks(42)

        assert result.success is True
        assert result.tasks == []

    def test_record_serializes_wire_names(self):
        record = TaskRecord.model_validate(make_task(id=9, user_id=4))
        dumped = record.model_dump(by_alias=True)

        assert dumped["UserId"] == 4
        assert "endDate" in dumped
        assert "createdAt" in dumped
        assert "user_id" not in dumped


class TestTaskCreateRequest:

    def test_invalid_end_date_rejected(self):
        with pytest.raises(PydanticValidationError):
            TaskCreateRequest(title="T", UserId=1, endDate="next tuesday")

    def test_unknown_field_rejected(self):
        with pytest.raises(PydanticValidationError):
            TaskCreateRequest(title="T", UserId=1, owner="bob")
