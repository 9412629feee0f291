"""
Taskboard Backend — Application Package Initializer
=====================================================

What: Marks the `taskboard` directory as a Python package.
Why:  Enables module imports like `from taskboard.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend follows a layered architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │    Services (Workflows)             │  ← register, login, tasks, clients
    ├─────────────────────────────────────┤
    │    Stores (Persistence Boundary)    │  ← one store per entity
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Engine/Sessions)   │  ← explicit handle on app.state
    └─────────────────────────────────────┘

    Failures raised anywhere below the routes travel up unchanged and are
    turned into JSON responses in one place (taskboard.middleware.errors).
"""

__version__ = "1.0.0"
