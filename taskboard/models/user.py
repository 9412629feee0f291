"""
Taskboard Backend — User SQLAlchemy Model
===========================================

What:  ORM model for the `users` table.
Who:   Written by the Registration Workflow, read by login and the clients
       endpoints through UserStore.

Table Design:
    - id: generated integer primary key (clients address users by number)
    - username / email: each UNIQUE; the constraints are the final guard
      against two concurrent registrations of the same identity
    - password: bcrypt hash, never the plaintext
    - created_at: UTC, set on insert
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column

from taskboard.database import Base


class User(Base):
    """
    A registered user ("client" in the listing endpoints).

    Lifecycle:
        Created by AuthService.register; never updated or deleted.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    username: Mapped[str] = mapped_column(String(255), nullable=False)

    email: Mapped[str] = mapped_column(String(255), nullable=False)

    # bcrypt output is 60 chars; 255 leaves room for a future scheme change
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        UniqueConstraint("username", name="uq_users_username"),
        UniqueConstraint("email", name="uq_users_email"),
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}')>"
