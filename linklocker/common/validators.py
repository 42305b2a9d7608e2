"""Validation utilities for link locker."""

from typing import Any, Tuple

# Single path segments that never reach the /{code} route: /admin has its own
# handler, /public is the static mount, and clients collapse "." and ".."
UNSERVABLE_CODES = {"admin", "public", ".", ".."}


def is_valid_target(target: Any) -> Tuple[bool, str]:
    """Validate a link target.

    Targets are only required to be non-empty strings; they are not parsed
    as URLs.

    Args:
        target: The submitted target

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not target or not isinstance(target, str):
        return False, "target required"

    return True, ""


def is_valid_short_code(short_code: Any) -> Tuple[bool, str]:
    """Check that a caller-supplied code can be served as ``/<code>``.

    Codes are stored verbatim, so any string that forms one path segment is
    accepted, including dots, spaces and non-ASCII text.

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not short_code or not isinstance(short_code, str):
        return False, "Short code must be a non-empty string"

    if "/" in short_code:
        return False, "Short code cannot contain '/'"

    if short_code in UNSERVABLE_CODES:
        return False, f"'{short_code}' is a reserved path and cannot be used"

    return True, ""
