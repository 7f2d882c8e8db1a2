# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the web-tour server:
# - test_routing.py: Plain routes, query/form/header/cookie, path params
# - test_bodies.py: JSON decoding, body parser, JSON response
# - test_files.py: Upload, download and static files
# - test_groups.py: Route groups and the /api middleware
# - test_errors.py: Error handlers
# - test_views.py: Template rendering
# - test_body_parser.py / test_storage.py / test_http_client.py: helpers
# - test_config.py: Settings
#
# Run tests with: pytest
# =============================================================================
