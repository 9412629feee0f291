"""
Taskboard Backend — Health Check Route
========================================

What:  Health check endpoint for monitoring and container probes.
How:   Runs SELECT 1 against the app's Database handle and reports uptime.

Status levels:
    - healthy:   database reachable
    - unhealthy: database unreachable (still HTTP 200; the body says why)
"""

import logging
import time

from fastapi import APIRouter, Depends

from taskboard import __version__
from taskboard.database import Database, get_database
from taskboard.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(database: Database = Depends(get_database)) -> HealthResponse:
    db_status = "connected"
    overall = "healthy"

    try:
        await database.ping()
    except Exception as e:
        # A failed probe is the answer here, not an error to propagate
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
