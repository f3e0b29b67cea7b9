"""Dependency injection wiring.

Every provider in PROVIDERS is either concrete (no subclasses) or the base of
a swappable component whose subclasses declare ``__is_mock__``.
"""

from typing import Type

from forum.util.di.application import ProdApplicationProvider
from forum.util.di.base import Component, ProviderBase
from forum.util.di.core import ProdConfigProvider
from forum.util.di.domain import ProdDomainProvider
from forum.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for ``base``.

    Args:
        base: Entry of PROVIDERS
        use_mock: Select the in-memory variant of a swappable component

    Returns:
        ``base`` itself when it is concrete, otherwise the matching subclass

    Raises:
        ValueError: If the component has no variant of the requested kind
    """
    variants = {
        getattr(sub, "__is_mock__", False): sub for sub in base.__subclasses__()
    }
    if not variants:
        return base

    try:
        return variants[use_mock]
    except KeyError:
        kind = "mock" if use_mock else "production"
        component = getattr(base, "__mock_component__", None) or base.__name__
        raise ValueError(f"No {kind} implementation for {component}") from None


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
