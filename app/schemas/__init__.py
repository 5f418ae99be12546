"""
Pydantic schemas for request/response validation.
"""

# Entity schemas
from .entity import (
    EntityBase,
    EntityCreate,
    EntityUpdate,
    EntityResponse,
    EntityListResponse
)

# Listing schemas
from .listing import (
    AddressSchema,
    PhotoSchema,
    ListingBase,
    ListingCreate,
    ListingUpdate,
    ListingResponse,
    ListingListResponse
)

# Error schemas
from .error import (
    ErrorDetail,
    ErrorResponse,
    APIErrorResponse
)

__all__ = [
    # Entity
    "EntityBase",
    "EntityCreate",
    "EntityUpdate",
    "EntityResponse",
    "EntityListResponse",

    # Listing
    "AddressSchema",
    "PhotoSchema",
    "ListingBase",
    "ListingCreate",
    "ListingUpdate",
    "ListingResponse",
    "ListingListResponse",

    # Error
    "ErrorDetail",
    "ErrorResponse",
    "APIErrorResponse"
]
