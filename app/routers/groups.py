# =============================================================================
# app/routers/groups.py - Route Groups
# =============================================================================
# Two routers sharing one handler. main.py mounts them under /api and /web;
# only /api sits behind the logging middleware.
# =============================================================================

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse


async def hello_world():
    """Shared handler for every grouped route."""
    return "Hello World"


def build_group() -> APIRouter:
    """Create a router exposing GET /hello and GET /world."""
    group = APIRouter(default_response_class=PlainTextResponse)
    group.add_api_route("/hello", hello_world, methods=["GET"])
    group.add_api_route("/world", hello_world, methods=["GET"])
    return group


api = build_group()
web = build_group()
