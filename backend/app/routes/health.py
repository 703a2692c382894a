"""
Folio Backend - Health Check Route
===================================

What:  Liveness endpoint for hosting probes and the keep-alive self-ping.
How:   Answers without touching the database, so a slow pool never makes the
       process look dead to the platform.
"""

import time
from datetime import datetime, timezone

from fastapi import APIRouter

from app.schemas.common import HealthResponse

router = APIRouter(prefix="/api", tags=["Health"])

# Monotonic reference for uptime; set once when the module loads
_start_time = time.monotonic()


def _utc_timestamp() -> str:
    """Current UTC time as ISO 8601 with millisecond precision, e.g. 2024-05-01T12:00:00.123Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="OK",
        message="Server is running",
        timestamp=_utc_timestamp(),
        uptime=round(time.monotonic() - _start_time, 3),
    )
