"""
Taskboard Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session:  AsyncMock session (store unit tests, no DB)
    ├── user_store / task_store / hasher: AsyncMock doubles for services
    ├── database:         Database handle on a temporary SQLite file, schema created
    ├── db_session:       Real AsyncSession from that handle
    ├── app:              create_app() wired to that handle
    └── test_client:      HTTPX AsyncClient talking to the app in-process
"""

import os
from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

# Override settings BEFORE any taskboard imports: taskboard.main builds a
# module-level app (and engine) from the environment at import time
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from taskboard.config import Settings
from taskboard.database import Database
from taskboard.main import create_app
from taskboard.security import PasswordHasher
from taskboard.stores.task_store import TaskStore
from taskboard.stores.user_store import UserStore


# ══════════════════════════════════════════════════════════════════════════
# Doubles (no database)
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    A mock async database session.

    Usage:
        mock_db_session.execute.return_value.scalar_one_or_none.return_value = user
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def user_store():
    """UserStore double: nothing found, create echoes back a stored row."""
    store = AsyncMock(spec=UserStore)
    store.find_by_username_or_email.return_value = None
    store.get.return_value = None
    store.list_all.return_value = []

    async def create(username, email, password_hash):
        return make_user(id=1, username=username, email=email, password=password_hash)

    store.create.side_effect = create
    return store


@pytest.fixture
def task_store():
    store = AsyncMock(spec=TaskStore)
    store.list_for_user.return_value = []
    return store


@pytest.fixture
def hasher():
    double = AsyncMock(spec=PasswordHasher)
    double.hash.return_value = "$2b$10$hashedpassword"
    double.verify.return_value = True
    return double


def make_user(**overrides):
    """A user row as the stores return it."""
    data = {
        "id": 1,
        "username": "existinguser",
        "email": "existing@example.com",
        "password": "$2b$10$hashedpassword",
        "created_at": datetime.now(timezone.utc),
    }
    data.update(overrides)
    return SimpleNamespace(**data)


def make_task(**overrides):
    """A task row as the stores return it."""
    data = {
        "id": 1,
        "user_id": 1,
        "title": "Write report",
        "end_date": None,
        "status": "Not Started",
        "category": None,
        "priority": "Medium",
        "created_at": datetime.now(timezone.utc),
    }
    data.update(overrides)
    return SimpleNamespace(**data)


# ══════════════════════════════════════════════════════════════════════════
# Real database (temporary SQLite file)
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def test_settings(tmp_path):
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'taskboard.db'}",
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def database(test_settings):
    db = Database(test_settings)
    await db.create_schema()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def db_session(database):
    async with database.session_factory() as session:
        yield session


@pytest.fixture
def app(test_settings, database):
    return create_app(settings=test_settings, database=database)


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient routed straight into the app via ASGITransport.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
