"""
Pydantic schemas for listing requests and responses.
Handles listing create/replace payloads, nested address and photo data, and list responses.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List
from datetime import datetime
from app.models.listing import PropertyType, Region


class AddressSchema(BaseModel):
    """Address details of a listing."""

    city: str = Field(..., max_length=255, description="Post town or city", examples=["London"])
    postcode: str = Field("", max_length=16, description="Full postcode", examples=["W14 8AA"])
    shortened_postcode: str = Field(..., max_length=8, description="Outward code", examples=["W14"])
    region: Optional[Region] = Field(None, description="Region", examples=["london"])
    country: str = Field("UK", max_length=64, description="Country")

    @field_validator("city", "postcode", "shortened_postcode", "country")
    @classmethod
    def strip_whitespace(cls, v):
        """Trim surrounding whitespace."""
        return v.strip()


class PhotoSchema(BaseModel):
    """Photo renditions of a listing."""

    original_url: str = Field(..., description="Original upload URL")
    standard_url: str = Field(..., description="Standard-size rendition URL")
    thumbnail_url: str = Field(..., description="Thumbnail rendition URL")
    mime_type: str = Field("image/jpeg", description="MIME type of the original")


class ListingBase(BaseModel):
    """
    Base listing schema with common fields.
    Monetary values are integers in minor currency units (pence).
    """

    development_name: Optional[str] = Field(None, max_length=255, description="Development name")
    address: AddressSchema
    property_type: Optional[PropertyType] = Field(None, description="Property classification", examples=["apartment"])

    bedrooms: int = Field(0, ge=0, le=50, description="Number of bedrooms")
    bathrooms: int = Field(0, ge=0, le=50, description="Number of bathrooms")
    size_sq_ft: int = Field(0, ge=0, description="Floor area in square feet")

    price_in_cents: int = Field(..., description="Asking price in minor units", examples=[12500000])
    minimum_deposit_in_cents: int = Field(0, ge=0, description="Minimum deposit in minor units")
    estimated_deposit_in_cents: int = Field(0, ge=0, description="Estimated deposit in minor units")
    rental_income_in_cents: int = Field(0, ge=0, description="Monthly rental income in minor units")

    is_tenanted: bool = False
    is_cash_only: bool = False
    is_new_build: bool = False
    is_company_owned: bool = False
    is_share_sale: bool = False
    is_featured: bool = False

    description: str = Field("", max_length=5000, description="Free-text description")
    photos: List[PhotoSchema] = Field(default_factory=list, description="Ordered photos")
    made_visible_at: Optional[datetime] = Field(
        None,
        description="Visibility timestamp; defaults to now on create and is kept on update when omitted"
    )


class ListingCreate(ListingBase):
    """Schema for creating a new listing."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "address": {
                    "city": "London",
                    "shortened_postcode": "W14",
                    "region": "london",
                    "country": "UK"
                },
                "property_type": "terraced_house",
                "bedrooms": 3,
                "bathrooms": 3,
                "size_sq_ft": 600,
                "price_in_cents": 100000000,
                "rental_income_in_cents": 850000,
                "is_featured": True,
                "description": "Three bedroom terrace close to the Olympia exhibition centre."
            }
        }
    )


class ListingUpdate(ListingBase):
    """Schema for replacing an existing listing (whole-record update)."""


class ListingResponse(ListingBase):
    """Schema for listing responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Listing identity")
    gross_yield: float = Field(0.0, description="Annual rental income divided by price")


class ListingListResponse(BaseModel):
    """Schema for listing list responses."""

    listings: List[ListingResponse] = Field(..., description="Listings ordered by identity")
    total: int = Field(..., ge=0, description="Number of listings returned")
