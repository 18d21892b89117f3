"""
Notes API — FastAPI Application Factory
========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       that owns its own NoteStore.
Who:   Called by uvicorn (`notes_api.main:app`), by run(), and by tests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌──────────┐ ┌──────┐ ┌────────────┐  │
    │  │  Req ID  │→│ Logging  │→│ CORS │→│ Static dir │  │
    │  └──────────┘ └──────────┘ └──────┘ └────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────┐ ┌──────────────────────────────────┐  │
    │  │  GET /   │ │ GET/POST /api/notes              │  │
    │  └──────────┘ │ GET/DELETE /api/notes/{id}       │  │
    │               └──────────────────────────────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌───────────────────────────────────────────────┐  │
    │  │ Validation→400 │ NotFound→404 │ Unknown→404   │  │
    │  └───────────────────────────────────────────────┘  │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from notes_api import __version__
from notes_api.config import Settings, settings
from notes_api.exceptions import (
    NotFoundError,
    UnknownRouteError,
    ValidationError,
)
from notes_api.middleware.logging import RequestLoggingMiddleware
from notes_api.middleware.request_id import RequestIDMiddleware, request_id_var
from notes_api.middleware.static_files import StaticFilesMiddleware
from notes_api.routes import notes, root
from notes_api.services.note_store import NoteStore, seed_notes

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output goes to stdout; uvicorn's own access log is muted because
    RequestLoggingMiddleware already logs every request.
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Configures logging on startup and reports where the server listens."""
    app_settings: Settings = app.state.settings
    setup_logging(app_settings.log_level)

    logger.info("Server running on port %d", app_settings.port)
    logger.info("Serving %d notes, static assets from %s",
                app.state.note_store.count, app_settings.static_dir)

    yield

    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def validation_error_from(exc: RequestValidationError) -> ValidationError:
    """
    Translates FastAPI's request validation failure into a ValidationError.

    Mapping (first match wins):
        body is not valid JSON               → "malformatted json"
        content missing/empty, no body,
        or body is not a JSON object         → "content missing"
        content of the wrong type            → "content must be a string"
        important of the wrong type          → "important must be a boolean"
        unknown field                        → "unexpected field '<name>'"
    """
    errors = exc.errors()

    for err in errors:
        if err.get("type") == "json_invalid":
            return ValidationError(message="malformatted json", context={"errors": errors})

    for err in errors:
        loc = tuple(err.get("loc", ()))
        if loc == ("body",) or loc[:2] == ("body", "content"):
            if loc == ("body",) or err.get("type") in ("missing", "string_too_short"):
                return ValidationError(message="content missing", field="content")
            return ValidationError(message="content must be a string", field="content")

    for err in errors:
        loc = tuple(err.get("loc", ()))
        field = str(loc[1]) if len(loc) > 1 else ""
        if err.get("type") == "extra_forbidden":
            return ValidationError(message=f"unexpected field '{field}'", field=field)
        if field == "important":
            return ValidationError(message="important must be a boolean", field=field)

    return ValidationError(message="invalid request body", context={"errors": errors})


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers.

    Handler hierarchy:
        ValidationError             → 400 {"error": message}
        RequestValidationError      → translated to ValidationError
        NotFoundError               → 404, empty body
        UnknownRouteError           → 404 {"error": "unknown endpoint"}
        Starlette 404/405           → treated as UnknownRouteError
        Exception (fallback)        → 500 {"error": "internal server error"}
    """

    def validation_response(exc: ValidationError) -> JSONResponse:
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return JSONResponse(status_code=400, content={"error": exc.message})

    def unknown_route_response(exc: UnknownRouteError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"error": exc.message})

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        return validation_response(exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        return validation_response(validation_error_from(exc))

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        logger.info("[%s] %s", request_id_var.get(""), exc.message)
        return Response(status_code=404)

    @app.exception_handler(UnknownRouteError)
    async def handle_unknown_route(request: Request, exc: UnknownRouteError):
        return unknown_route_response(exc)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        # Router misses surface as 404 (no path) or 405 (path, wrong method)
        if exc.status_code in (404, 405):
            return unknown_route_response(
                UnknownRouteError(method=request.method, path=request.url.path)
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return JSONResponse(status_code=500, content={"error": "internal server error"})


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Configuration to build with; the module-level
                      `settings` singleton when omitted.

    Returns:
        FastAPI instance with its own NoteStore (seeded unless SEED_NOTES=false).
    """
    app_settings = app_settings or settings
    docs = app_settings.docs_enabled

    app = FastAPI(
        title="Notes API",
        description="In-memory notes collection exposed over a small REST API.",
        version=__version__,
        docs_url="/docs" if docs else None,
        redoc_url="/redoc" if docs else None,
        openapi_url="/openapi.json" if docs else None,
        lifespan=lifespan,
    )

    # ── Application State ─────────────────────────────────────────────────
    app.state.settings = app_settings
    app.state.note_store = NoteStore(seed_notes() if app_settings.seed_notes else None)

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → CORS → StaticFiles → routes
    app.add_middleware(StaticFilesMiddleware, directory=app_settings.static_dir)

    if app_settings.cors_origins_list:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=app_settings.cors_origins_list,
            allow_methods=["*"],
            allow_headers=["*"],
            expose_headers=["X-Request-ID"],
        )

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(root.router)
    app.include_router(notes.router)

    return app


# uvicorn expects `notes_api.main:app` to be importable
app = create_app()


def run() -> None:
    """Console entry point: serve the Note Service with uvicorn."""
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
