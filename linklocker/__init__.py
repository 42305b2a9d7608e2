"""Core business logic for link locker."""

from .models import LinkMapping
from .store import LinkStore
from .shortcode import ShortCodeGenerator
from .service import LinkService
from .errors import (
    LinkLockerError,
    InvalidTargetError,
    InvalidCodeError,
    DuplicateCodeError,
)

__all__ = [
    "LinkMapping",
    "LinkStore",
    "ShortCodeGenerator",
    "LinkService",
    "LinkLockerError",
    "InvalidTargetError",
    "InvalidCodeError",
    "DuplicateCodeError",
]
