"""
Taskboard Backend — Configuration Tests
=========================================

What:  Settings validation and the backend-specific engine options.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from taskboard.config import Settings
from taskboard.database import Database


def test_log_level_normalized():
    assert Settings(log_level="debug").log_level == "DEBUG"


def test_invalid_log_level_rejected():
    with pytest.raises(PydanticValidationError):
        Settings(log_level="LOUD")


def test_port_range_enforced():
    with pytest.raises(PydanticValidationError):
        Settings(backend_port=80)


def test_pool_options_only_for_server_backends():
    sqlite = Database._engine_options(Settings(database_url="sqlite+aiosqlite:///x.db"))
    postgres = Database._engine_options(
        Settings(database_url="postgresql+asyncpg://u:p@db:5432/taskboard", db_pool_size=7)
    )

    assert "pool_size" not in sqlite
    assert postgres["pool_size"] == 7
    assert postgres["max_overflow"] == 10
