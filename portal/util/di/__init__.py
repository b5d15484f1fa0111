"""Dependency injection wiring.

Every provider base listed in ``PROVIDERS`` is either concrete or a
mockable component: a base with one production and one mock subclass.
"""

from typing import Type

from portal.util.di.application import ProdApplicationProvider
from portal.util.di.base import Component, ProviderBase
from portal.util.di.core import ProdConfigProvider
from portal.util.di.domain import ProdDomainProvider
from portal.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def mockable_components() -> set[Component]:
    """Names of the components that have swappable implementations."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ is not None
    }


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for ``base``.

    Mock subclasses only register once their module is imported, so the
    mock side is available only where the test providers are loaded.

    Raises:
        ValueError: If the wanted variant of a component is not registered
    """
    variants = base.__subclasses__()
    if not variants:
        return base

    for variant in variants:
        if variant.__is_mock__ == use_mock:
            return variant

    kind = "mock" if use_mock else "production"
    raise ValueError(
        f"No {kind} provider registered for {base.__mock_component__ or base.__name__}"
    )


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "mockable_components",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
