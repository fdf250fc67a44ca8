"""Infrastructure DI providers."""

from pagecomments.util.di.infrastructure.persistence import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
