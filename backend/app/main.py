"""
Folio Backend - FastAPI Application Factory
============================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() wires middleware, exception handlers and routers;
       the lifespan owns startup checks and the keep-alive task.
Who:   uvicorn (uvicorn app.main:app).

Application Architecture:
    ┌──────────────────────────────────────────────────────────────┐
    │                         FastAPI App                          │
    │                                                              │
    │  Middleware:  Request ID → Access Log → GZip → CORS → Errors │
    │                                                              │
    │  Routes:  /api/contact   /api/blog   /api/jobs   /api/chat   │
    │           /api/products  /api/admin  /api/health             │
    │                                                              │
    │  Exception Handlers:                                         │
    │    ValidationError → 400 │ NotFoundError → 404 │ else → 500  │
    └──────────────────────────────────────────────────────────────┘

Lifecycle:
    Startup:   logging, configuration check, keep-alive task
    Shutdown:  stop keep-alive, dispose database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import settings
from app.database import dispose_engine
from app.exceptions import FolioError, NotFoundError, ValidationError
from app.middleware.errors import GENERIC_ERROR_MESSAGE, UnhandledErrorMiddleware
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.request_id import REQUEST_ID_HEADER, RequestIDMiddleware, request_id_var
from app.routes import admin, blog, chat, contact, health, jobs, products
from app.schemas.common import describe_errors
from app.services.keep_alive import keep_alive_service

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure the root logger once for the whole process.

    Format: 2024-05-01T12:00:00 [INFO] app.services.blog_service: Blog post created: ...
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("aiosmtplib").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("Folio Backend %s starting up...", __version__)

    for problem in settings.missing_credentials():
        logger.warning("Configuration: %s", problem)

    keep_alive_service.start()

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Folio Backend shutting down...")
    await keep_alive_service.stop()
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP responses. Every body is {"message": ...}.

    Handler hierarchy:
        ValidationError         → 400 (the message names the offending fields)
        RequestValidationError  → 400 (FastAPI body/path parsing, same shape)
        NotFoundError           → 404
        FolioError (base)       → 500 with a generic message
        Exception (fallback)    → 500 with a generic message; normally caught
                                  first by UnhandledErrorMiddleware so the
                                  response keeps its CORS and request ID headers

    Details of 5xx failures (context, stack traces) are logged, never returned.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return _error_response(400, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        message = describe_errors(exc.errors())
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), message)
        return _error_response(400, message)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(404, exc.message)

    @app.exception_handler(FolioError)
    async def handle_folio_error(request: Request, exc: FolioError):
        logger.error(
            "[%s] %s: %s | Context: %s",
            request_id_var.get(""),
            type(exc).__name__,
            exc.message,
            exc.context,
        )
        return _error_response(500, GENERIC_ERROR_MESSAGE)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return _error_response(500, GENERIC_ERROR_MESSAGE)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Folio API",
        description=(
            "Content API for a company website: contact form, blog, job board, "
            "product catalog and chat log."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → GZip → CORS → UnhandledError
    app.add_middleware(UnhandledErrorMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(contact.router)
    app.include_router(blog.router)
    app.include_router(jobs.router)
    app.include_router(chat.router)
    app.include_router(products.router)
    app.include_router(admin.router)
    app.include_router(health.router)

    return app


# uvicorn entry point: app.main:app
app = create_app()
