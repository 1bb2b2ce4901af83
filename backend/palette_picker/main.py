"""
Palette Picker Backend — FastAPI Application Factory
======================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() assembles middleware, exception handlers and routers;
       run() serves the module-level app with uvicorn on the configured port.
Who:   `palette-picker` console script, or `uvicorn palette_picker.main:app`.

Application Architecture:
    ┌─────────────────────────────────────────────────────────────┐
    │                       FastAPI App                           │
    │                                                             │
    │  Middleware:  Request ID → Logging → CORS                   │
    │                                                             │
    │  Routes:      /api/v1/projects[/{id}[/palettes]]            │
    │               /api/v1/palettes[/{id}]                       │
    │               /health                                       │
    │                                                             │
    │  Exception Handlers:                                        │
    │    ValidationError / RequestValidationError → 422           │
    │    NotFoundError → 404     DatabaseError / Exception → 500  │
    └─────────────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, check configuration, log the listen port
    Shutdown: dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from palette_picker import __version__
from palette_picker.config import settings
from palette_picker.database import dispose_engine
from palette_picker.exceptions import DatabaseError, NotFoundError, ValidationError
from palette_picker.middleware.logging import RequestLoggingMiddleware
from palette_picker.middleware.request_id import RequestIDMiddleware, request_id_var
from palette_picker.routes import health, palettes, projects

logger = logging.getLogger(__name__)

APP_TITLE = "Palette Picker"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure the root logger once for the whole process.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Per-request noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Keep serving: /health reports whether the database is reachable.
        logger.error("Configuration error: %s", str(e))

    logger.info("Environment: %s", settings.environment)
    logger.info("%s running on PORT %d.", APP_TITLE, settings.port)

    yield

    logger.info("%s shutting down...", APP_TITLE)
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def describe_request_error(exc: RequestValidationError) -> str:
    """One-line message for the first error FastAPI found in the request."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ())]
    where = loc[0] if loc else "request"
    name = ".".join(loc[1:])
    msg = first.get("msg", "invalid value")
    if name:
        return f'Invalid {where} parameter "{name}": {msg}.'
    return f"Invalid {where}: {msg}."


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to HTTP status codes and `{"error": ...}` bodies.

    Handler table:
        ValidationError         → 422  {"error": "<message>"}
        RequestValidationError  → 422  {"error": "<message>"}
        NotFoundError           → 404  {"error": "<message>"}
        DatabaseError           → 500  {"error": {"name": ..., "message": ...}}
        Exception (fallback)    → 500  {"error": {"name": ..., "message": ...}}
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return JSONResponse(status_code=422, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        message = describe_request_error(exc)
        logger.warning("[%s] Request validation error: %s", rid, message)
        return JSONResponse(status_code=422, content={"error": message})

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"error": exc.message})

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(status_code=500, content={"error": exc.to_payload()})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "name": "InternalServerError",
                    "message": "An unexpected error occurred",
                }
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=APP_TITLE,
        description="Save colour palettes and group them into projects.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Middleware executes in reverse order of addition:
    # RequestID → Logging → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(projects.router)
    app.include_router(palettes.router)
    app.include_router(health.router)

    return app


app = create_app()


def run() -> None:
    """Serve the application on the configured host and port."""
    uvicorn.run(
        "palette_picker.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
