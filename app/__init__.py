# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App entry point, middleware setup, error handlers, static mount
# - config.py: Environment variable loading and settings
# - middleware.py: /api request logging
# - routers/: Example endpoints organized by feature
#
# The app layer is thin - it handles HTTP concerns and delegates decoding,
# storage and outgoing requests to lib/ and core/.
# =============================================================================
