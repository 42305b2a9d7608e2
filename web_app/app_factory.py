"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.middleware.cors import CORSMiddleware
import os

from .api import api_router
from .web import web_router
from .middleware.headers import ForwardedHeadersMiddleware
from .middleware.logging import LoggingMiddleware

PUBLIC_DIR = os.path.join(os.path.dirname(__file__), "..", "public")


def create_app(
    store_instance,
    service_instance,
    config,
    public_dir: str = PUBLIC_DIR,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        store_instance: Link store instance
        service_instance: Link service instance
        config: Configuration instance
        public_dir: Directory served under /public

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="Link Locker",
        description="Short links released after a timed interstitial page",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url=None,
    )

    # Store instances in app state for access in routes
    app.state.store = store_instance
    app.state.service = service_instance
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Last added runs first: forwarded headers are recorded before logging
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(ForwardedHeadersMiddleware)

    # Mounted before the web router so /public/* never reaches the /{code} route
    if os.path.isdir(public_dir):
        app.mount("/public", StaticFiles(directory=public_dir), name="public")

    app.include_router(api_router, prefix="/api", tags=["API"])
    app.include_router(web_router, tags=["Web"])

    return app
