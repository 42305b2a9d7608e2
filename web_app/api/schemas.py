"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field
from typing import Optional


class CreateRequest(BaseModel):
    """Request to create a link (documentation only; bodies are parsed by hand)."""

    target: str = Field(..., description="Destination URL", min_length=1)
    code: Optional[str] = Field(None, description="Optional custom short code")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"target": "https://example.com/very/long/path/to/resource"},
                {"target": "https://github.com/user/repo", "code": "myrepo"},
            ]
        }
    }


class CreateResponse(BaseModel):
    """Response after creating a link."""

    short: str = Field(..., description="The short code")
    target: str = Field(..., description="The destination URL")
    url: str = Field(..., description="The complete short URL")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "short": "V1StGXR",
                    "target": "https://example.com/very/long/path",
                    "url": "https://short.link/V1StGXR",
                }
            ]
        }
    }


class HealthResponse(BaseModel):
    """Health check response."""

    ok: bool = Field(True, description="Always true while the process serves requests")


class ErrorResponse(BaseModel):
    """Error response."""

    error: str = Field(..., description="Error message")
