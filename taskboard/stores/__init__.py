# Stores package init
"""
Taskboard Backend — Stores (Persistence Boundary)
===================================================

What:  One store per entity, each wrapping the request's AsyncSession.
Why:   Workflows depend on a handful of named operations instead of raw
       queries, so they can be unit-tested with AsyncMock doubles.

Store Inventory:
    - UserStore: find_by_username_or_email, get, list_all, create
    - TaskStore: list_for_user, create
"""

from taskboard.stores.task_store import TaskStore
from taskboard.stores.user_store import UserStore

__all__ = ["TaskStore", "UserStore"]
