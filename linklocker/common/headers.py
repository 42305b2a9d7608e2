"""Proxy header handling for building externally visible link URLs."""

from typing import Dict, Mapping, Optional


def _first_hop(value: Optional[str]) -> Optional[str]:
    """Client-facing entry of a comma-separated proxy chain."""
    if not value:
        return None
    return value.split(",")[0].strip() or None


def extract_forwarded_headers(headers: Mapping[str, str]) -> Dict[str, Optional[str]]:
    """Pull the X-Forwarded-* values a reverse proxy may have added.

    Header names are matched case-insensitively; chained values are
    reduced to their first hop.
    """
    lowered = {k.lower(): v for k, v in headers.items()}
    return {
        "forwarded_proto": _first_hop(lowered.get("x-forwarded-proto")),
        "forwarded_host": _first_hop(lowered.get("x-forwarded-host")),
        "forwarded_for": _first_hop(lowered.get("x-forwarded-for")),
    }


def build_base_url(request, fallback_base_url: str) -> str:
    """Scheme and host the visitor used to reach us.

    Reads the values ForwardedHeadersMiddleware stored on ``request.state``
    first, then the request's own scheme and Host header, then the
    configured base URL.
    """
    state = request.state
    proto = getattr(state, "forwarded_proto", None)
    host = getattr(state, "forwarded_host", None)
    if proto and host:
        return f"{proto}://{host}"

    request_host = request.headers.get("host")
    if request_host:
        return f"{request.url.scheme}://{request_host}"

    return fallback_base_url.rstrip("/")
