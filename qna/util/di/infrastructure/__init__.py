"""Infrastructure providers.

Implementations are imported here so ``PersistenceProvider.__subclasses__()``
finds them.
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
