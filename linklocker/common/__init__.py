"""Common utilities for link locker."""

from .validators import is_valid_target, is_valid_short_code
from .headers import extract_forwarded_headers, build_base_url
from .url_builder import build_short_url, build_admin_redirect
from .logging_config import setup_logging, get_logger

__all__ = [
    "is_valid_target",
    "is_valid_short_code",
    "extract_forwarded_headers",
    "build_base_url",
    "build_short_url",
    "build_admin_redirect",
    "setup_logging",
    "get_logger",
]
