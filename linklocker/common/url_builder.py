"""URL building utilities for link locker."""

from urllib.parse import quote, urlencode


def build_short_url(short_code: str, base_url: str) -> str:
    """Build complete short URL.

    Args:
        short_code: The short code
        base_url: Base URL (e.g., https://example.com)

    Returns:
        Complete short URL
    """
    return f"{base_url.rstrip('/')}/{quote(short_code, safe='')}"


def build_admin_redirect(created: str, short_code: str, target: str) -> str:
    """Build the admin page location used after a successful form submission.

    Args:
        created: Full short URL of the new link
        short_code: The new link's code
        target: The new link's target

    Returns:
        Relative URL such as ``/admin?created=...&short=...&target=...``
    """
    params = {"created": created, "short": short_code, "target": target}
    return "/admin?" + urlencode(params, quote_via=quote)
