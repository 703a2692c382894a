"""
Folio Backend - Request ID Middleware
======================================

What:  Tags every request with a short correlation ID and echoes it back in
       the `X-Request-ID` response header.
How:   Reuses the caller's `X-Request-ID` when present, otherwise mints one.
       The ID lives in a ContextVar so loggers and exception handlers can read
       it without the request object.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# Coroutine-local: concurrent requests on one event loop each see their own value
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    """8 hex characters; enough to correlate log lines for a single request."""
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assigns the request ID before any other middleware or handler runs."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or new_request_id()
        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response
