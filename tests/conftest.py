"""Pytest configuration and fixtures."""

import json

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from config import Config
from linklocker.store import LinkStore
from linklocker.service import LinkService
from linklocker.shortcode import ShortCodeGenerator
from linklocker.common.logging_config import setup_logging
from web_app import create_app


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def links_file(tmp_path):
    """Path of a links document that does not exist yet."""
    return tmp_path / "links.json"


@pytest.fixture
def store(links_file, logger) -> LinkStore:
    """Create a store backed by a temporary file."""
    return LinkStore(path=str(links_file), logger=logger)


@pytest.fixture
def short_code_generator():
    """Create short code generator."""
    return ShortCodeGenerator(default_length=7)


@pytest.fixture
def service(store, short_code_generator, logger) -> LinkService:
    """Create service instance."""
    return LinkService(
        store=store,
        short_code_generator=short_code_generator,
        logger=logger,
    )


@pytest.fixture
def config(links_file) -> Config:
    """Configuration pointing at the temporary links file."""
    return Config(
        links_file=str(links_file),
        base_url="http://testserver",
    )


@pytest.fixture
def app(store, service, config):
    """Create test FastAPI app."""
    return create_app(
        store_instance=store,
        service_instance=service,
        config=config,
    )


@pytest_asyncio.fixture
async def client(app):
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def seed_links(links_file):
    """Write a links document directly, bypassing the store."""
    def _seed(mapping):
        links_file.write_text(json.dumps(mapping), encoding="utf-8")
    return _seed


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]
