#!/usr/bin/env python3
"""
Main entry point for the link locker service.

The store is re-read from disk on every request; creates within this
process are serialized by the service. Run a single worker: separate
processes writing the same links file can still overwrite each other.

Usage:
    python app.py

Environment variables:
    PORT - Port to listen on (default 3000)
    HOST - Interface to bind
    BASE_URL - Base URL for short links when the request has no Host
    LINKS_FILE - Path of the JSON links document
    SHORT_CODE_LENGTH - Length of generated codes
    WAIT_SECONDS - Interstitial countdown length
    LOG_LEVEL - Logging level
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import Config, load_config
from linklocker.store import LinkStore
from linklocker.service import LinkService
from linklocker.shortcode import ShortCodeGenerator
from linklocker.common.logging_config import setup_logging
from web_app import create_app


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    config = app.state.config
    logger = app.state.logger

    logger.info(f"Serving links from {config.links_file}")
    logger.info(f"Interstitial wait: {config.wait_seconds}s")

    yield

    logger.info("Link locker stopped")


def build_app(config: Config, logger) -> FastAPI:
    """Wire store, generator and service into a FastAPI app."""
    store = LinkStore(path=config.links_file, logger=logger.getChild("store"))
    generator = ShortCodeGenerator(default_length=config.short_code_length)
    service = LinkService(
        store=store,
        short_code_generator=generator,
        logger=logger.getChild("service"),
    )

    app = create_app(
        store_instance=store,
        service_instance=service,
        config=config,
    )
    app.state.logger = logger
    app.router.lifespan_context = lifespan
    return app


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("Link Locker Service")
    logger.info(f"Configuration: {config.model_dump()}")

    app = build_app(config, logger)

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        access_log=True,
    )

    server = uvicorn.Server(uvicorn_config)

    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Link locker listening on http://localhost:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
