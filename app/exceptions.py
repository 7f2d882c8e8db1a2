# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Handled errors carry a code and a suggestion telling the caller how to fix
# the request. Anything else becomes a plain-text 500 "Error: <message>".
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse, PlainTextResponse

logger = logging.getLogger(__name__)


class WebTourException(Exception):
    """
    Base exception for the web-tour API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "WEB_TOUR_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Request Body Exceptions
# =============================================================================

class UnsupportedMediaTypeError(WebTourException):
    """Raised when the body parser has no decoder for the Content-Type."""

    def __init__(self, content_type: str, supported: list[str]):
        super().__init__(
            message=f"Unsupported content type: {content_type or '<missing>'}",
            code="UNSUPPORTED_MEDIA_TYPE",
            status_code=415,
            suggestion=f"Send the body as one of: {', '.join(supported)}",
            details={"content_type": content_type, "supported": supported}
        )


class BodyParseError(WebTourException):
    """Raised when a request body cannot be decoded into the expected record."""

    def __init__(self, media_type: str, error: str):
        super().__init__(
            message=f"Failed to parse {media_type or 'request'} body: {error}",
            code="BODY_PARSE_ERROR",
            status_code=400,
            suggestion="Check that the body is well formed and includes username and password",
            details={"media_type": media_type, "error": error}
        )


# =============================================================================
# Upload Exceptions
# =============================================================================

class FileTooLargeError(WebTourException):
    """Raised when uploaded file exceeds size limit."""

    def __init__(self, size_mb: float, max_mb: int):
        super().__init__(
            message=f"File too large: {size_mb:.1f}MB (max: {max_mb}MB)",
            code="FILE_TOO_LARGE",
            status_code=413,
            suggestion=f"Upload a file smaller than {max_mb}MB",
            details={"size_mb": size_mb, "max_mb": max_mb}
        )


class InvalidFilenameError(WebTourException):
    """Raised when an uploaded file has no usable name."""

    def __init__(self, filename: str | None):
        super().__init__(
            message=f"Invalid upload filename: {filename!r}",
            code="INVALID_FILENAME",
            status_code=400,
            suggestion="Give the multipart part a filename such as file.txt",
            details={"filename": filename}
        )


# =============================================================================
# HTTP Client Exceptions
# =============================================================================

class UpstreamRequestError(WebTourException):
    """Raised when an outgoing HTTP request fails before a response arrives."""

    def __init__(self, url: str, error: str):
        super().__init__(
            message=f"Request to {url} failed: {error}",
            code="UPSTREAM_REQUEST_ERROR",
            status_code=502,
            suggestion="Check the URL and network connectivity, then try again",
            details={"url": url, "error": error}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def web_tour_exception_handler(
    request: Request,
    exc: WebTourException
) -> JSONResponse:
    """
    Convert WebTourException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code} {exc.code}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle FastAPI request validation errors.

    Converts validation errors to user-friendly messages.
    """
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": str(exc)
        }
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> PlainTextResponse:
    """Map any unexpected error to a 500 whose body is the error message."""
    logger.exception(f"Unexpected error: {exc}")
    return PlainTextResponse(f"Error: {exc}", status_code=500)
