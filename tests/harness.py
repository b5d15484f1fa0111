"""Fixtures shared by unit and integration tests."""

import pytest_asyncio

from portal.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Make a fixture that yields a request-scoped container.

    Each test gets a fresh container, so in-memory repositories start empty.

    Args:
        unmock: Components that keep their production provider

    Usage:
        unit_env = create_env_fixture()
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_tree(unit_env):
            service = await unit_env.get(CommentService)
    """

    @pytest_asyncio.fixture
    async def _env():
        container = build_test_container(unmock=unmock)
        try:
            async with container() as request_container:
                yield request_container
        finally:
            await container.close()

    return _env
