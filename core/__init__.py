# =============================================================================
# core/ - Shared Domain Shapes
# =============================================================================
# This package contains the Pydantic records decoded from and encoded into
# request/response bodies. The app/ layer imports them; nothing here knows
# about HTTP.
# =============================================================================
