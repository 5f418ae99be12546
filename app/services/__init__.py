"""
Service layer for business logic implementation.
Contains services for entity and listing management, and error handling.
"""

from .entity import EntityService
from .listing import ListingService
from .error_handler import ErrorHandlerService

__all__ = [
    "EntityService",
    "ListingService",
    "ErrorHandlerService"
]
