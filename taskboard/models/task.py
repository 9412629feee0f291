"""
Taskboard Backend — Task SQLAlchemy Model
===========================================

What:  ORM model for the `tasks` table.
Who:   Written and read by TaskStore on behalf of TaskService.

Query Patterns:
    - List a user's tasks: WHERE user_id = :id ORDER BY created_at DESC
      → served by idx_tasks_user_created (user_id, created_at DESC)
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

from taskboard.database import Base

DEFAULT_STATUS = "Not Started"
DEFAULT_PRIORITY = "Medium"


class Task(Base):
    """
    A task owned by one user.

    Defaults:
        status   → "Not Started" (new tasks always start here)
        priority → "Medium"
        category, end_date → NULL
    """

    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)

    end_date: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )

    status: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default=DEFAULT_STATUS,
        server_default=text(f"'{DEFAULT_STATUS}'"),
    )

    category: Mapped[Optional[str]] = mapped_column(String(100), nullable=True, default=None)

    priority: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default=DEFAULT_PRIORITY,
        server_default=text(f"'{DEFAULT_PRIORITY}'"),
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        Index("idx_tasks_user_created", user_id, created_at.desc()),
    )

    def __repr__(self) -> str:
        return (
            f"<Task(id={self.id}, user_id={self.user_id}, "
            f"status='{self.status}')>"
        )
