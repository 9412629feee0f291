"""
Alembic Migration Environment
===============================

What:  Runs migrations through the same `Database` handle the app uses.
How:   The URL comes from taskboard.config settings unless overridden with
       `alembic -x database_url=...`. Online migrations open a pool-less
       Database, apply the revisions inside one transaction via run_sync(),
       and dispose it.
Who:   Called by `alembic` CLI commands (upgrade, downgrade, revision).

SQLite:
    ALTER TABLE support is limited, so autogenerated revisions are rendered
    in batch mode (copy-and-move) when the target URL is SQLite.
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import create_async_engine
from alembic import context

from taskboard.config import settings
from taskboard.database import Base, Database

# Alembic only sees models that are imported and registered with Base
from taskboard.models.task import Task  # noqa: F401
from taskboard.models.user import User  # noqa: F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

database_url = context.get_x_argument(as_dictionary=True).get(
    "database_url", settings.database_url
)
config.set_main_option("sqlalchemy.url", database_url)

MIGRATION_OPTIONS = {
    "target_metadata": target_metadata,
    "compare_type": True,
    "render_as_batch": make_url(database_url).get_backend_name() == "sqlite",
}


def run_migrations_offline() -> None:
    """Emit SQL to stdout without connecting to the database."""
    context.configure(
        url=database_url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **MIGRATION_OPTIONS,
    )

    with context.begin_transaction():
        context.run_migrations()


def apply_revisions(connection) -> None:
    context.configure(connection=connection, **MIGRATION_OPTIONS)

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    # One short-lived connection; the app's pool sizing does not apply here
    database = Database(
        settings,
        engine=create_async_engine(database_url, poolclass=pool.NullPool),
    )
    try:
        async with database.engine.connect() as connection:
            await connection.run_sync(apply_revisions)
            await connection.commit()
    finally:
        await database.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_async_migrations())
