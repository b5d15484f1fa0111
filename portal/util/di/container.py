"""Container assembly."""

from collections.abc import Collection

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from portal.util.di import PROVIDERS, Component, get_provider


def create_container(mocked: Collection[Component] = ()) -> AsyncContainer:
    """Build the container the API runs on.

    Args:
        mocked: Components to serve from their mock provider instead of the
            production one

    Returns:
        Container with the FastAPI request scope wired in
    """
    providers = [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]
    return make_async_container(*providers, FastapiProvider())
