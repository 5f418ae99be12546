"""
Record models for the Listing Store API.
Includes Entity and Listing records with their supporting types.
"""

from app.models.base import RecordModel, utc_now
from app.models.entity import Entity
from app.models.listing import Listing, AddressDetails, Photo, PropertyType, Region

# Export all models for easy importing
__all__ = [
    "RecordModel",
    "utc_now",
    "Entity",
    "Listing",
    "AddressDetails",
    "Photo",
    "PropertyType",
    "Region",
]
