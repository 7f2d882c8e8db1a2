# =============================================================================
# app/routers/basics.py - Routing and Request Context Endpoints
# =============================================================================
# Plain routes that echo pieces of the request back as text:
# query string, form field, header, cookie and path parameters.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Cookie, Header, Path, Query, Request
from fastapi.responses import PlainTextResponse

from lib.body_parser import form_value

logger = logging.getLogger(__name__)

router = APIRouter(default_response_class=PlainTextResponse)


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/")
async def hello_world():
    """Return a fixed greeting."""
    return "Hello World"


@router.api_route("/hello", methods=["GET", "POST"])
async def hello(
    request: Request,
    name: Annotated[str | None, Query(description="Name to greet")] = None,
):
    """
    Greet by name.

    The name comes from the `name` query parameter, else from a `name` form
    field in the body, else defaults to "Guest".
    """
    if name is None:
        name = await form_value(request, "name")

    return f"Hello {name or 'Guest'}"


@router.get("/request")
async def request_context(
    firstname: Annotated[str, Header(description="First name header")] = "",
    lastname: Annotated[str, Cookie(description="Last name cookie")] = "",
):
    """Greet using the `firstname` header and the `lastname` cookie."""
    return f"Hello {firstname} {lastname}"


@router.get("/users/{user_id}/orders/{order_id}")
async def user_order(
    user_id: Annotated[str, Path(description="User identifier")],
    order_id: Annotated[str, Path(description="Order identifier")],
):
    """Echo both path parameters."""
    return f"User: {user_id} with order: {order_id}"


@router.get("/error")
async def error():
    """Fail on purpose; the unhandled error handler turns this into a 500."""
    raise RuntimeError("ups")
