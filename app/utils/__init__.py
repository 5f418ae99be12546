"""
Utility modules for the Listing Store API.
"""

from .concurrency import ReadWriteLock

from .exceptions import (
    APIException,
    ValidationError,
    NotFoundError,
    ConflictError,
    BadRequestError,
    InternalServerError,
    InvalidRangeError
)

# Dependencies are imported directly where needed to avoid circular imports

__all__ = [
    "ReadWriteLock",

    # Exceptions
    "APIException",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "BadRequestError",
    "InternalServerError",
    "InvalidRangeError",
]
