"""
Folio Backend - Access Log Middleware
======================================

What:  One log line per request: method, path, status, duration, request ID.
How:   Level follows the status class (5xx ERROR, 4xx WARNING, else INFO).
       Health probes and keep-alive pings are not logged.

Example line:
    2024-05-01T12:00:00 [INFO] folio.access: POST /api/blog 201 84.2ms [1f3a9c0e] from 10.0.0.7

Request bodies are never logged: contact messages carry names and email addresses.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.middleware.request_id import request_id_var

logger = logging.getLogger("folio.access")

# Paths polled by the platform and by the keep-alive task
QUIET_PATHS = frozenset({"/api/health"})


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access log keyed by the ID assigned in RequestIDMiddleware."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in QUIET_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        client_ip = request.client.host if request.client else "unknown"
        rid = request_id_var.get("")
        status = response.status_code
        logger.log(
            level_for_status(status),
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
        return response
