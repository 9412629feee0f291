"""
Taskboard Backend — FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() builds the Database handle, registers middleware,
       exception handlers and routers, and returns the app.
Who:   uvicorn (`uvicorn taskboard.main:app`), the `taskboard` console
       script, and the test suite (which passes its own settings/database).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │  Middleware: RequestID → Logging → ErrorHandler     │
    │  Routes:     /auth  /clients  /tasks  /health       │
    │  Handlers:   TaskboardError │ HTTPException │ 422→400│
    │  State:      app.state.database (engine + sessions) │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, log the listening address
    Shutdown: dispose the Database handle (close pooled connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI

from taskboard import __version__
from taskboard.config import Settings, settings as default_settings
from taskboard.database import Database
from taskboard.middleware.errors import ErrorHandlerMiddleware, register_exception_handlers
from taskboard.middleware.logging import RequestLoggingMiddleware
from taskboard.middleware.request_id import RequestIDMiddleware
from taskboard.routes import auth, clients, health, tasks

logger = logging.getLogger(__name__)


def setup_logging(settings: Settings) -> None:
    """
    Configure logging for the whole process.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s on stdout
    (containers collect stdout).
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("passlib").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: logging. Shutdown: close the Database handle."""
    settings: Settings = app.state.settings
    setup_logging(settings)
    logger.info("Taskboard Backend %s starting up...", __version__)
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    logger.info("Taskboard Backend shutting down...")
    await app.state.database.dispose()
    logger.info("Shutdown complete.")


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration; defaults to the environment-loaded settings.
        database: Store handle; defaults to one built from `settings`.
                  The app owns it from here on and disposes it at shutdown.
    """
    settings = settings or default_settings

    app = FastAPI(
        title="Taskboard API",
        description="User registration, client listing and task management.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.database = database or Database(settings)

    # ── Middleware ────────────────────────────────────────────────────────
    # Executes in REVERSE order of addition: RequestID → Logging → ErrorHandler
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    # ── Routes ────────────────────────────────────────────────────────────
    app.include_router(auth.router)
    app.include_router(clients.router)
    app.include_router(tasks.router)
    app.include_router(health.router)

    return app


app = create_app()


def run() -> None:
    """Entry point for the `taskboard` console script."""
    uvicorn.run(
        "taskboard.main:app",
        host=default_settings.backend_host,
        port=default_settings.backend_port,
        log_config=None,
    )
