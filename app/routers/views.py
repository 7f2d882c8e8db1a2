# =============================================================================
# app/routers/views.py - Template Rendering
# =============================================================================
# Renders template/index.html with literal values.
# =============================================================================

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from app.dependencies import TemplatesDep

router = APIRouter()


@router.get("/view", response_class=HTMLResponse)
async def view(request: Request, templates: TemplatesDep):
    """Render the index page."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "title": "Hello Title",
            "header": "Hello Header",
            "content": "Hello Content",
        },
    )
