"""Web application for link locker."""

from .app_factory import create_app

__all__ = ["create_app"]
