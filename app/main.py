# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the web-tour demo server.
# It configures the FastAPI application with middleware, routers, static
# files and error handlers.
#
# Usage:
#   web-tour                         # uses API_HOST / API_PORT / PREFORK
#   uvicorn app.main:app --reload
# =============================================================================

import logging
import multiprocessing
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles

from app.config import Settings, settings
from app.exceptions import (
    WebTourException,
    unhandled_exception_handler,
    validation_exception_handler,
    web_tour_exception_handler,
)
from app.middleware import prefix_logging_middleware
from app.routers import basics, bodies, files, groups, views

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def is_child_process(current: Settings | None = None) -> bool:
    """
    True inside a worker process spawned by a prefork parent.

    uvicorn starts workers with multiprocessing, so a worker has a parent
    process handle. The reloader also runs the server in a multiprocessing
    child, so without prefork the process never counts as a child.
    """
    current = current or settings
    return current.worker_count > 1 and multiprocessing.parent_process() is not None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs on startup and shutdown:
    - Startup: Report process role, make sure the upload directory exists
    - Shutdown: Log

    With prefork the parent only supervises and never runs this; run() logs
    its role instead.
    """
    # Startup
    if is_child_process():
        logger.info(f"I'm child process (pid {os.getpid()})")
    elif settings.worker_count == 1:
        logger.info(f"I'm parent process (pid {os.getpid()})")

    logger.info(f"Starting web-tour in {settings.ENVIRONMENT} mode")
    settings.UPLOAD_DIR.mkdir(parents=True, exist_ok=True)

    yield

    # Shutdown
    logger.info("Shutting down web-tour")


# Create FastAPI application
app = FastAPI(
    title="web-tour",
    description="""
## Web Framework Feature Tour

Example routes exercising routing, middleware, request parsing,
file upload/download, templating and error handling.

### Quick Start

```bash
curl "http://localhost:8080/hello?name=Brian"
curl -X POST http://localhost:8080/register \\
  -H "Content-Type: application/json" \\
  -d '{"username": "Brian", "password": "12345"}'
curl -F "file=@source/file.txt" http://localhost:8080/upload
```
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Basics",
            "description": "Routing, query, header, cookie and path parameters",
        },
        {
            "name": "Bodies",
            "description": "Request body decoding and JSON responses",
        },
        {
            "name": "Files",
            "description": "Multipart upload and attachment download",
        },
        {
            "name": "Groups",
            "description": "Routes grouped under /api and /web",
        },
        {
            "name": "Views",
            "description": "Server-side template rendering",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# Logs before and after every request under /api
app.middleware("http")(prefix_logging_middleware("/api"))


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(WebTourException)
async def handle_web_tour_exception(request: Request, exc: WebTourException):
    """Handle custom web-tour exceptions."""
    return await web_tour_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Handle request validation errors (missing fields, bad types)."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions as a plain-text 500."""
    return await unhandled_exception_handler(request, exc)


# =============================================================================
# Routers
# =============================================================================

app.include_router(basics.router, tags=["Basics"])

app.include_router(bodies.router, tags=["Bodies"])

app.include_router(files.router, tags=["Files"])

# Route groups
app.include_router(groups.api, prefix="/api", tags=["Groups"])
app.include_router(groups.web, prefix="/web", tags=["Groups"])

app.include_router(views.router, tags=["Views"])


# =============================================================================
# Static Files
# =============================================================================

# Directory is fixed at import time; dependency_overrides[get_settings] does not reach it
app.mount("/public", StaticFiles(directory=settings.STATIC_DIR), name="public")


# =============================================================================
# Server
# =============================================================================

def run() -> None:
    """
    Start uvicorn with the configured host, port, workers and idle timeout.
    """
    logger.info(
        f"Listening on {settings.API_HOST}:{settings.API_PORT} "
        f"with {settings.worker_count} worker(s)"
    )
    if settings.worker_count > 1:
        logger.info(f"I'm parent process (pid {os.getpid()})")

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        workers=settings.worker_count,
        timeout_keep_alive=settings.IDLE_TIMEOUT_SECONDS,
        reload=settings.DEBUG and settings.worker_count == 1,
        log_level="debug" if settings.DEBUG else "info",
    )


if __name__ == "__main__":
    run()
