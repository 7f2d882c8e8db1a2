# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# Tests swap settings via app.dependency_overrides[get_settings].
# =============================================================================

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from fastapi.templating import Jinja2Templates

from app.config import Settings, get_settings


@lru_cache
def _templates_for(directory: str) -> Jinja2Templates:
    return Jinja2Templates(directory=directory)


def get_templates(settings: Annotated[Settings, Depends(get_settings)]) -> Jinja2Templates:
    """
    Get the Jinja2 template renderer for the configured template directory.

    One renderer is built per directory and reused.
    """
    return _templates_for(str(settings.TEMPLATE_DIR))


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_settings)]
TemplatesDep = Annotated[Jinja2Templates, Depends(get_templates)]
