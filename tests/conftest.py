"""Pytest configuration and fixtures."""

import pytest
from typing import AsyncGenerator

from httpx import AsyncClient, ASGITransport

from config import Config
from shortlinks.database.memory import InMemoryShortLinkDB
from shortlinks.service import ShortLinkService
from shortlinks.shortcode import ShortCodeGenerator
from shortlinks.common.logging_config import setup_logging
from web_app import create_app


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
async def test_db(logger) -> AsyncGenerator[InMemoryShortLinkDB, None]:
    """Create test store instance."""
    db = InMemoryShortLinkDB(logger=logger)

    yield db

    await db.close()


@pytest.fixture
def short_code_generator():
    """Create short code generator."""
    return ShortCodeGenerator(default_length=7)


@pytest.fixture
def service(test_db, short_code_generator, logger) -> ShortLinkService:
    """Create service instance."""
    return ShortLinkService(
        db=test_db,
        cache=None,  # No cache for tests
        short_code_generator=short_code_generator,
        logger=logger,
    )


@pytest.fixture
def config():
    """Configuration pointing at the test server."""
    return Config(database_url=None, redis_url=None, base_url="http://testserver")


@pytest.fixture
def app(test_db, service, config):
    """Create test FastAPI app."""
    return create_app(
        db_instance=test_db,
        cache_instance=None,
        service_instance=service,
        config=config,
    )


@pytest.fixture
async def client(app):
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/very/long/path",
        "https://github.com/user/repo",
        "http://stackoverflow.com/questions/123456?tab=votes",
    ]


class UnavailableDB(InMemoryShortLinkDB):
    """Store whose every query fails, as when the database is down."""

    async def insert_link(self, link):
        raise ConnectionError("database unavailable")

    async def get_link_by_code(self, short_code):
        raise ConnectionError("database unavailable")

    async def get_links_by_codes(self, short_codes):
        raise ConnectionError("database unavailable")

    async def list_recent_links(self, limit=100):
        raise ConnectionError("database unavailable")

    async def health_check(self):
        return False


@pytest.fixture
async def down_client(logger, config):
    """Client for an app whose store is unreachable."""
    db = UnavailableDB(logger=logger)
    service = ShortLinkService(db=db, logger=logger)
    app = create_app(db_instance=db, cache_instance=None, service_instance=service, config=config)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac
