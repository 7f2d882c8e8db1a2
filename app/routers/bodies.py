# =============================================================================
# app/routers/bodies.py - Request/Response Body Endpoints
# =============================================================================
# Shows two ways of reading a body (manual JSON decoding and the
# content-type aware parser) and one JSON response.
# =============================================================================

import logging

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from app.exceptions import BodyParseError
from core.models import LoginRequest, RegisterRequest, UserResponse
from lib.body_parser import media_type_of, parse_body

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Endpoints
# =============================================================================

@router.post("/login", response_class=PlainTextResponse)
async def login(request: Request):
    """
    Decode the raw body as JSON, ignoring the Content-Type header.
    """
    body = await request.body()

    try:
        credentials = LoginRequest.model_validate_json(body)
    except ValidationError as e:
        raise BodyParseError(media_type_of(request.headers.get("content-type")), str(e)) from e

    logger.debug(f"Login body decoded for {credentials.username}")
    return f"Hello {credentials.username}"


@router.post("/register", response_class=PlainTextResponse)
async def register(request: Request):
    """
    Decode JSON, form or XML bodies into a RegisterRequest.

    The decoder is chosen from the Content-Type header.
    """
    credentials = await parse_body(request, RegisterRequest)
    return f"Hello {credentials.username}"


@router.get("/user", response_model=UserResponse)
async def user():
    """Return a canned user record as compact JSON."""
    return UserResponse(password="12345", username="Brian")
