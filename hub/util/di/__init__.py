"""Dependency injection module.

``PROVIDERS`` lists one entry per concern. Swappable components appear as
their base class; ``container.resolve_providers`` picks the production or
mock subclass.
"""

from typing import Type

from hub.util.di.application import ProdApplicationProvider
from hub.util.di.base import COMPONENTS, Component, ProviderBase
from hub.util.di.core import ProdConfigProvider
from hub.util.di.domain import ProdDomainProvider
from hub.util.di.infrastructure import EmailProvider, PersistenceProvider

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    EmailProvider,
    PersistenceProvider,
]

__all__ = [
    "COMPONENTS",
    "Component",
    "PROVIDERS",
    "ProviderBase",
]
