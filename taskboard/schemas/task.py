"""
Taskboard Backend — Task Request/Response Schemas
===================================================

What:  Pydantic models for POST /tasks and GET /tasks/{user_id}.

Wire names:
    The JSON contract uses `UserId`, `endDate` and `createdAt`. Fields are
    declared with snake_case names and the wire name as alias;
    populate_by_name lets the services build them from ORM objects.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class TaskCreateRequest(BaseModel):
    """
    Body of POST /tasks.

    `title` and `UserId` are optional at the schema level so that the
    workflow can answer a missing title with its own message.
    """

    title: Optional[str] = Field(default=None, description="Task title (required)")
    end_date: Optional[datetime] = Field(
        default=None,
        alias="endDate",
        description="Due date, ISO 8601 date or datetime",
    )
    category: Optional[str] = Field(default=None, description="Free-form category")
    priority: Optional[str] = Field(default=None, description="Defaults to 'Medium'")
    user_id: Optional[int] = Field(default=None, alias="UserId", description="Owner id")

    model_config = {"extra": "forbid", "populate_by_name": True}

    @field_validator("end_date", mode="before")
    @classmethod
    def parse_end_date(cls, v):
        """Empty values mean "no end date"; strings are parsed as ISO 8601."""
        if v is None or v == "":
            return None
        if isinstance(v, str):
            try:
                return datetime.fromisoformat(v)
            except ValueError:
                raise ValueError(f"Invalid endDate '{v}'. Expected an ISO 8601 date")
        return v


class TaskRecord(BaseModel):
    """A stored task as returned to clients."""

    id: int
    user_id: int = Field(alias="UserId")
    title: str
    end_date: Optional[datetime] = Field(default=None, alias="endDate")
    status: str
    category: Optional[str] = None
    priority: str
    created_at: datetime = Field(alias="createdAt")

    model_config = {"from_attributes": True, "populate_by_name": True}


class TaskListResponse(BaseModel):
    """HTTP 200 body of GET /tasks/{user_id}."""
    success: bool = True
    tasks: List[TaskRecord]


class TaskCreatedResponse(BaseModel):
    """HTTP 201 body of POST /tasks."""
    success: bool = True
    message: str = "Task added successfully"
    task: TaskRecord
