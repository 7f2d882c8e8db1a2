# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - basics.py: Hello world, query/form/header/cookie echo, path params, error
# - bodies.py: JSON decoding, content-type body parser, JSON response
# - files.py: Multipart upload and attachment download
# - groups.py: The /api and /web route groups
# - views.py: Jinja2 template rendering
#
# Each router is mounted in main.py.
# =============================================================================

from . import basics
from . import bodies
from . import files
from . import groups
from . import views

__all__ = [
    "basics",
    "bodies",
    "files",
    "groups",
    "views",
]
