"""Dependency injection container."""

from collections.abc import Set
from typing import Type

from dishka import AsyncContainer, Provider, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from hub.util.di import PROVIDERS, Component, ProviderBase


def select_provider(base: Type[ProviderBase], use_mock: bool) -> Type[ProviderBase]:
    """Pick the implementation of a provider entry.

    Args:
        base: Entry from ``PROVIDERS``
        use_mock: Whether to take the mock subclass of a swappable component

    Returns:
        Provider class (not instantiated)

    Raises:
        LookupError: If the component has no implementation of that kind.
            Mock subclasses only exist once ``tests.di`` is imported.
    """
    if not base.is_swappable():
        return base

    impl = next(
        (c for c in base.__subclasses__() if c.__is_mock__ == use_mock),
        None,
    )
    if impl is None:
        kind = "mock" if use_mock else "production"
        raise LookupError(f"No {kind} provider for {base.__mock_component__}")
    return impl


def resolve_providers(mocked: Set[Component] = frozenset()) -> list[Provider]:
    """Instantiate every provider, mocking the named components."""
    providers: list[Provider] = [
        select_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]
    providers.append(FastapiProvider())
    return providers


def create_container(mocked: Set[Component] = frozenset()) -> AsyncContainer:
    """Build the DI container.

    Settings are loaded from environment variables when first requested.

    Args:
        mocked: Components to replace with their mock providers; production
            passes none

    Returns:
        Configured async container
    """
    return make_async_container(*resolve_providers(mocked))


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app so DishkaRoute can resolve FromDishka."""
    setup_dishka(container, app)
