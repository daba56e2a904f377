"""Infrastructure providers.

Production subclasses are imported here so ``select_provider`` finds them
through ``__subclasses__``.
"""

from .email import EmailProvider, ProdEmailProvider
from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = [
    "EmailProvider",
    "PersistenceProvider",
    "ProdEmailProvider",
    "ProdPersistenceProvider",
]
