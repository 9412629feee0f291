"""
Taskboard Backend — Database Handle & Session Management
==========================================================

What:  The `Database` handle (async engine + session factory), the ORM base
       class, and the per-request session dependency.
Why:   One explicit object owns the connection pool. The app factory creates
       it, stores it on `app.state.database`, and the lifespan handler closes
       it; nothing in the package opens connections through module state.
How:   Route dependencies pull the handle off the running app, open a session
       per request and roll back on any error. Write operations commit in
       the stores.

Connection Pooling Strategy (PostgreSQL):
    pool_size=20, max_overflow=10, pool_pre_ping, pool_recycle=3600.
    SQLite (tests, local experiments) uses SQLAlchemy's default pool, which
    rejects the sizing arguments, so they are only applied to other backends.
"""

from typing import Any, AsyncGenerator, Dict, Optional

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from taskboard.config import Settings


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    All models inherit from this class to register with a single metadata
    object (used by Alembic and by Database.create_schema).
    """
    pass


class Database:
    """
    Explicitly constructed store handle.

    Lifecycle:
        database = Database(settings)       # process start (create_app)
        ... sessions per request ...
        await database.dispose()            # shutdown (lifespan)
    """

    def __init__(self, settings: Settings, engine: Optional[AsyncEngine] = None):
        self.engine = engine or create_async_engine(
            settings.database_url, **self._engine_options(settings)
        )
        # expire_on_commit=False: response shaping reads attributes after the
        # store has committed
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @staticmethod
    def _engine_options(settings: Settings) -> Dict[str, Any]:
        options: Dict[str, Any] = {
            "pool_pre_ping": settings.db_pool_pre_ping,
            # SQL echo is only useful while debugging locally
            "echo": settings.log_level == "DEBUG",
        }
        if make_url(settings.database_url).get_backend_name() != "sqlite":
            options.update(
                pool_size=settings.db_pool_size,
                max_overflow=settings.db_max_overflow,
                pool_recycle=3600,
            )
        return options

    async def create_schema(self) -> None:
        """Create all tables known to Base.metadata (tests and local setups)."""
        # Importing the models registers them with Base.metadata
        from taskboard.models import task, user  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def ping(self) -> bool:
        """Run SELECT 1; used by the health check."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True

    async def dispose(self) -> None:
        """Close every pooled connection. Called from the lifespan handler."""
        await self.engine.dispose()


def get_database(request: Request) -> Database:
    """FastAPI dependency returning the handle created by create_app()."""
    return request.app.state.database
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Opens a session from the app's Database handle
        2. Yields it to the route's stores
        3. On error: rolls back, then re-raises so the error middleware
           renders the failure
        4. Always: closes the session (returns connection to pool)

    Commits are NOT issued here. Code after the yield runs once the response
    has been sent, so a commit failing at that point could no longer change
    the status the client saw. Stores commit inside their write operations
    instead, before the workflow shapes its response.
    """
    database = get_database(request)
    async with database.session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
