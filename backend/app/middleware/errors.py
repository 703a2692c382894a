"""
Folio Backend - Unhandled Error Middleware
===========================================

What:  Turns exceptions no handler claimed into the generic 500 body.
How:   Registered innermost, so the response still passes through CORS,
       the access log and the request ID middleware. FastAPI's own
       `Exception` handler runs outside every user middleware and would
       return a 500 without those headers.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from app.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An error occurred"


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            logger.error(
                "[%s] Unexpected error: %s",
                request_id_var.get(""),
                str(e),
                exc_info=True,
            )
            return JSONResponse(status_code=500, content={"message": GENERIC_ERROR_MESSAGE})
