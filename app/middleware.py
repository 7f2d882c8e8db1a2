# =============================================================================
# app/middleware.py - Request Middleware
# =============================================================================
# Logs around every request under a path prefix (by default /api), once
# before the handler runs and once after it returns.
# =============================================================================

import logging
from typing import Awaitable, Callable

from fastapi import Request, Response

logger = logging.getLogger(__name__)

CallNext = Callable[[Request], Awaitable[Response]]


def path_has_prefix(path: str, prefix: str) -> bool:
    """True for the prefix itself and anything below it ("/api", "/api/x", not "/apix")."""
    prefix = prefix.rstrip("/")
    return path == prefix or path.startswith(prefix + "/")


def prefix_logging_middleware(prefix: str = "/api"):
    """
    Build an HTTP middleware that only wraps requests under `prefix`.

    Usage:
        app.middleware("http")(prefix_logging_middleware("/api"))
    """

    async def middleware(request: Request, call_next: CallNext) -> Response:
        if not path_has_prefix(request.url.path, prefix):
            return await call_next(request)

        logger.info("I'm a middleware before process")
        try:
            return await call_next(request)
        finally:
            logger.info("I'm a middleware after process")

    return middleware
