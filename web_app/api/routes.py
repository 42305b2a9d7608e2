"""API routes implementation."""

import json
from typing import Any, Dict

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse, RedirectResponse

from .schemas import CreateRequest, CreateResponse, ErrorResponse, HealthResponse
from linklocker.errors import DuplicateCodeError, LinkLockerError
from linklocker.common.headers import build_base_url
from linklocker.common.url_builder import build_short_url, build_admin_redirect
from linklocker.common.logging_config import get_logger

router = APIRouter()
logger = get_logger("api")

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def _is_form_submission(request: Request) -> bool:
    """True when the body was posted by an HTML form."""
    return FORM_CONTENT_TYPE in request.headers.get("content-type", "").lower()


async def _read_body(request: Request) -> Dict[str, Any]:
    """Parse a JSON or form body into a dict; unreadable bodies become empty."""
    content_type = request.headers.get("content-type", "").lower()

    if FORM_CONTENT_TYPE in content_type or "multipart/form-data" in content_type:
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}

    raw = await request.body()
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.debug("Request body is not valid JSON")
        return {}
    return data if isinstance(data, dict) else {}


@router.post(
    "/create",
    response_model=CreateResponse,
    responses={
        302: {"description": "Form submission: redirect to the admin page"},
        400: {"model": ErrorResponse, "description": "Missing target or invalid code"},
        409: {"model": ErrorResponse, "description": "Short code already exists"},
    },
    openapi_extra={
        "requestBody": {
            "content": {
                "application/json": {"schema": CreateRequest.model_json_schema()},
                FORM_CONTENT_TYPE: {"schema": CreateRequest.model_json_schema()},
            },
            "required": True,
        }
    },
    summary="Create short link",
    description="Create a short link from a JSON or form body. Optionally provide a custom code.",
)
async def create_link(request: Request):
    """Create a short link."""
    service = request.app.state.service
    config = request.app.state.config
    from_form = _is_form_submission(request)

    body = await _read_body(request)

    try:
        link = await service.create_link(
            target=body.get("target"),
            code=body.get("code"),
        )
    except LinkLockerError as e:
        # Errors are JSON for every caller; only a successful form post redirects
        code = status.HTTP_409_CONFLICT if isinstance(e, DuplicateCodeError) else status.HTTP_400_BAD_REQUEST
        return JSONResponse(status_code=code, content={"error": str(e)})

    base_url = build_base_url(request, fallback_base_url=config.base_url)
    full_url = build_short_url(short_code=link.code, base_url=base_url)

    if from_form:
        return RedirectResponse(
            url=build_admin_redirect(created=full_url, short_code=link.code, target=link.target),
            status_code=status.HTTP_302_FOUND,
        )

    return CreateResponse(short=link.code, target=link.target, url=full_url)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Liveness check.",
)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(ok=True)
