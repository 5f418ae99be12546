"""
Listing model for properties offered for sale.
Handles address details, pricing in minor currency units, status flags and photos.
"""

from pydantic import BaseModel, Field, computed_field
from datetime import datetime
from typing import List, Optional
import enum

from app.models.base import RecordModel


class Region(str, enum.Enum):
    """UK region enumeration used to group listings geographically."""
    LONDON = "london"
    SOUTH_EAST = "south_east"
    SOUTH_WEST = "south_west"
    EAST_OF_ENGLAND = "east_of_england"
    MIDLANDS = "midlands"
    NORTH_WEST = "north_west"
    NORTH_EAST = "north_east"
    YORKSHIRE = "yorkshire"
    WALES = "wales"
    SCOTLAND = "scotland"
    NORTHERN_IRELAND = "northern_ireland"


class PropertyType(str, enum.Enum):
    """Property classification enumeration."""
    APARTMENT = "apartment"
    DETACHED = "detached"
    SEMI_DETACHED = "semi_detached"
    TERRACED_HOUSE = "terraced_house"
    BUNGALOW = "bungalow"
    MAISONETTE = "maisonette"


class AddressDetails(BaseModel):
    """Postal address of a listing."""

    city: str = Field("", description="Post town or city")
    postcode: str = Field("", description="Full postcode, if known")
    shortened_postcode: str = Field("", description="Outward code, e.g. 'W1'")
    region: Optional[Region] = Field(None, description="Region the property is in")
    country: str = Field("UK", description="Country")


class Photo(BaseModel):
    """A listing photo with its rendition URLs."""

    original_url: str
    standard_url: str
    thumbnail_url: str
    mime_type: str = "image/jpeg"


class Listing(RecordModel):
    """
    Property listing record.
    Prices and deposits are integers in minor currency units (pence).
    """

    development_name: Optional[str] = Field(
        None,
        description="Name of the development the property belongs to"
    )

    address: AddressDetails = Field(
        default_factory=AddressDetails,
        description="Address details"
    )

    property_type: Optional[PropertyType] = Field(
        None,
        description="Property classification"
    )

    # Physical attributes
    bedrooms: int = Field(0, description="Number of bedrooms")
    bathrooms: int = Field(0, description="Number of bathrooms")
    size_sq_ft: int = Field(0, description="Floor area in square feet")

    # Commercial attributes
    price_in_cents: int = Field(0, description="Asking price in minor units")
    minimum_deposit_in_cents: int = Field(0, description="Minimum deposit in minor units")
    estimated_deposit_in_cents: int = Field(0, description="Estimated deposit in minor units")
    rental_income_in_cents: int = Field(0, description="Monthly rental income in minor units")

    # Status flags
    is_tenanted: bool = False
    is_cash_only: bool = False
    is_new_build: bool = False
    is_company_owned: bool = False
    is_share_sale: bool = False
    is_featured: bool = False

    description: str = Field("", description="Free-text description")

    photos: List[Photo] = Field(
        default_factory=list,
        description="Ordered photo records"
    )

    made_visible_at: Optional[datetime] = Field(
        None,
        description="When the listing became visible; never cleared once set"
    )

    @computed_field
    @property
    def gross_yield(self) -> float:
        """Annual rental income as a fraction of the asking price."""
        if self.price_in_cents <= 0:
            return 0.0
        return self.rental_income_in_cents * 12 / self.price_in_cents

    @property
    def city(self) -> str:
        """Shortcut to the address city."""
        return self.address.city

    @property
    def region(self) -> Optional[Region]:
        """Shortcut to the address region."""
        return self.address.region

    def __repr__(self) -> str:
        """String representation of the listing."""
        return (
            f"<Listing(id={self.id}, city={self.address.city}, "
            f"type={self.property_type}, price_in_cents={self.price_in_cents})>"
        )
