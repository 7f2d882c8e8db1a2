# =============================================================================
# lib/http_client.py - Outgoing HTTP Client Helper
# =============================================================================
# Thin wrapper over httpx so every outgoing request shares the same timeout,
# User-Agent and redirect policy.
#
# Usage:
#   from lib.http_client import fetch_text
#
#   status, body = fetch_text("https://example.com")
# =============================================================================

from __future__ import annotations

import logging

import httpx

from app.config import Settings, get_settings
from app.exceptions import UpstreamRequestError

logger = logging.getLogger(__name__)


def build_client(
    settings: Settings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """
    Create an `httpx.Client` with the configured defaults.

    Args:
        settings: Settings to read timeout and User-Agent from
        transport: Optional transport (tests pass an httpx.MockTransport)

    Returns:
        A client; the caller is responsible for closing it
    """
    settings = settings or get_settings()
    return httpx.Client(
        timeout=httpx.Timeout(settings.HTTP_CLIENT_TIMEOUT_SECONDS),
        follow_redirects=True,
        headers={"User-Agent": settings.HTTP_CLIENT_USER_AGENT},
        transport=transport,
    )


def fetch_text(url: str, *, client: httpx.Client | None = None) -> tuple[int, str]:
    """
    GET a URL and return its status code and decoded body.

    Non-2xx responses are returned as-is; only transport failures raise.

    Raises:
        UpstreamRequestError: Connection, timeout or protocol failure
    """
    owns_client = client is None
    client = client or build_client()

    try:
        response = client.get(url)
        logger.debug(f"GET {url} -> {response.status_code}")
        return response.status_code, response.text
    except httpx.HTTPError as e:
        logger.warning(f"GET {url} failed: {e}")
        raise UpstreamRequestError(url, str(e)) from e
    finally:
        if owns_client:
            client.close()
