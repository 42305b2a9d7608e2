"""Web interface routes implementation."""

import os
from typing import Optional

from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

router = APIRouter()

# Setup Jinja2 templates
template_dir = os.path.join(os.path.dirname(__file__), "..", "..", "ux", "web")
templates = Jinja2Templates(directory=template_dir)


SAFE_LINK_SCHEMES = ("http://", "https://")


@router.get("/admin", response_class=HTMLResponse, include_in_schema=False)
async def admin_page(
    request: Request,
    created: Optional[str] = None,
    short: Optional[str] = None,
    target: Optional[str] = None,
):
    """Serve the link creation form, with a banner after a form submission."""
    created = created or ""
    # Query values are attacker-controlled; only http(s) URLs become links
    created_is_link = created.lower().startswith(SAFE_LINK_SCHEMES)
    return templates.TemplateResponse(
        request,
        "admin.html",
        {
            "created": created,
            "created_is_link": created_is_link,
            "short": short or "",
            "target": target or "",
        },
    )


@router.get("/{code}", response_class=HTMLResponse, include_in_schema=False)
async def interstitial_page(request: Request, code: str):
    """Show the countdown page that releases the visitor to the link target."""
    service = request.app.state.service
    config = request.app.state.config

    target = await service.get_target(code)

    if target is None:
        return templates.TemplateResponse(
            request,
            "not_found.html",
            {"code": code},
            status_code=status.HTTP_404_NOT_FOUND,
        )

    return templates.TemplateResponse(
        request,
        "interstitial.html",
        {
            "code": code,
            "target": target,
            "wait_seconds": config.wait_seconds,
        },
    )
