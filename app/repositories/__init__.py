"""
Repository layer for data access operations.
Provides concurrency-safe in-memory stores behind abstract repository interfaces.
"""

from app.repositories.base import InMemoryStore
from app.repositories.entity import EntityRepository, InMemoryEntityRepository
from app.repositories.listing import ListingRepository, InMemoryListingRepository
from app.repositories.exceptions import (
    RepositoryError,
    RecordValidationError,
    RecordConflictError,
    RecordNotFoundError,
)

__all__ = [
    "InMemoryStore",
    "EntityRepository",
    "InMemoryEntityRepository",
    "ListingRepository",
    "InMemoryListingRepository",
    "RepositoryError",
    "RecordValidationError",
    "RecordConflictError",
    "RecordNotFoundError",
]
