"""Forwarded headers middleware."""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable

from linklocker.common.headers import extract_forwarded_headers


class ForwardedHeadersMiddleware(BaseHTTPMiddleware):
    """Record X-Forwarded-* headers on request.state for the route handlers."""

    async def dispatch(self, request: Request, call_next: Callable):
        forwarded = extract_forwarded_headers(dict(request.headers))
        request.state.forwarded_proto = forwarded["forwarded_proto"]
        request.state.forwarded_host = forwarded["forwarded_host"]
        request.state.forwarded_for = forwarded["forwarded_for"]

        return await call_next(request)
