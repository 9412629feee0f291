"""
Taskboard Backend — Task Store
================================

What:  Persistence operations for tasks, always scoped to one owner.
Who:   TaskService.
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.models.task import Task


class TaskStore:
    """Async task persistence on top of one AsyncSession."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_for_user(self, user_id: int) -> List[Task]:
        """
        Tasks owned by `user_id`, newest first.

        Query plan:
            SELECT * FROM tasks WHERE user_id = :id
            ORDER BY created_at DESC, id DESC
            → idx_tasks_user_created; id breaks ties between rows created in
              the same clock tick
        """
        result = await self.session.execute(
            select(Task)
            .where(Task.user_id == user_id)
            .order_by(desc(Task.created_at), desc(Task.id))
        )
        return list(result.scalars().all())

    async def create(
        self,
        user_id: int,
        title: str,
        status: str,
        priority: str,
        category: Optional[str] = None,
        end_date: Optional[datetime] = None,
    ) -> Task:
        """Insert and commit a task; id and created_at are populated afterwards."""
        task = Task(
            user_id=user_id,
            title=title,
            status=status,
            priority=priority,
            category=category,
            end_date=end_date,
        )
        self.session.add(task)
        await self.session.commit()
        return task
