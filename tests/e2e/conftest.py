"""Fixtures for API tests against in-memory persistence."""

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from portal.interface.api.app import create_app
from tests.di import build_test_container


@pytest_asyncio.fixture
async def container():
    """Test container shared by the app and the test for seeding."""
    test_container = build_test_container()
    yield test_container
    await test_container.close()


@pytest_asyncio.fixture
async def client(container):
    """HTTP client for an app wired to the test container."""
    app_instance = create_app(container)
    transport = ASGITransport(app=app_instance, client=("198.51.100.7", 50000))
    async with AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c
