# =============================================================================
# lib/ - Framework Helpers
# =============================================================================
# Helpers the route handlers lean on:
# - body_parser.py: Content-Type aware request body decoding
# - http_client.py: httpx client with shared defaults
# =============================================================================

from lib.body_parser import form_value, parse_body
from lib.http_client import build_client, fetch_text

__all__ = [
    "build_client",
    "fetch_text",
    "form_value",
    "parse_body",
]
