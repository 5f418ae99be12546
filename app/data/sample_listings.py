"""
Built-in sample listings used to seed the listing repository at startup.
Identities are assigned by the repository when the listings are loaded.
"""

from datetime import datetime, timezone
from typing import List

from app.models.listing import AddressDetails, Listing, Photo, PropertyType, Region

PHOTO_BASE_URL = "https://storage.googleapis.com/listing-store-assets/listings"


def _photos(*keys: str, mime_type: str = "image/jpeg") -> List[Photo]:
    return [
        Photo(
            original_url=f"{PHOTO_BASE_URL}/{key}",
            standard_url=f"{PHOTO_BASE_URL}/{key}_standard",
            thumbnail_url=f"{PHOTO_BASE_URL}/{key}_thumbnail",
            mime_type=mime_type,
        )
        for key in keys
    ]


def _visible_at(value: str) -> datetime:
    return datetime.fromisoformat(value).replace(tzinfo=timezone.utc)


def get_sample_listings() -> List[Listing]:
    """Fresh copies of the sample listings, without identities."""
    return [
        Listing(
            address=AddressDetails(city="London", shortened_postcode="N17", region=Region.LONDON),
            property_type=PropertyType.APARTMENT,
            bedrooms=1,
            bathrooms=1,
            size_sq_ft=50,
            price_in_cents=12500000,
            minimum_deposit_in_cents=1000000,
            estimated_deposit_in_cents=3125000,
            rental_income_in_cents=110000,
            is_tenanted=True,
            description="One bedroom flat a short walk from Tottenham Hale station.",
            photos=_photos("1b2b53fd-398b-4129-8f7d-c5932f90b3c3", "7c8d16b4-09d1-453b-8729-e7bfada38b2e",
                           mime_type="image/png"),
        ),
        Listing(
            address=AddressDetails(city="Wallington", shortened_postcode="SM6", region=Region.LONDON),
            property_type=PropertyType.APARTMENT,
            bedrooms=2,
            bathrooms=1,
            size_sq_ft=300,
            price_in_cents=10000000,
            minimum_deposit_in_cents=1000000,
            estimated_deposit_in_cents=2500000,
            rental_income_in_cents=60000,
            is_tenanted=True,
            is_featured=True,
            description="Two bedroom apartment with allocated parking.",
            photos=_photos("dc1c52ca-1061-4673-a3ae-92bd9098189d", "82540ded-ea98-4279-a57d-742c0495ae73"),
            made_visible_at=_visible_at("2023-02-01T16:42:09"),
        ),
        Listing(
            address=AddressDetails(city="Edinburgh", shortened_postcode="EH12", region=Region.SCOTLAND),
            property_type=PropertyType.APARTMENT,
            bedrooms=0,
            bathrooms=1,
            size_sq_ft=40,
            price_in_cents=23456700,
            minimum_deposit_in_cents=3000000,
            estimated_deposit_in_cents=18798136,
            rental_income_in_cents=200000,
            is_tenanted=True,
            is_cash_only=True,
            is_share_sale=True,
            is_featured=True,
            description="Studio sold as a share sale through the owning company.",
            photos=_photos("32cdb9d4-f02e-4d4c-84a0-35318874c9c7"),
            made_visible_at=_visible_at("2023-02-01T16:52:50"),
        ),
        Listing(
            address=AddressDetails(city="Manchester", shortened_postcode="M1", region=Region.NORTH_WEST),
            property_type=PropertyType.SEMI_DETACHED,
            bedrooms=3,
            bathrooms=2,
            size_sq_ft=940,
            price_in_cents=14400000,
            minimum_deposit_in_cents=5200000,
            estimated_deposit_in_cents=3600000,
            rental_income_in_cents=200000,
            is_tenanted=True,
            is_share_sale=True,
            is_company_owned=True,
            is_featured=True,
            description="Semi-detached family home held in a limited company.",
            photos=_photos("44e55a81-c66e-48b6-abef-9b8cb3a5b674", "f8fa432d-0306-4d2c-8d57-f33523372f26"),
            made_visible_at=_visible_at("2023-02-01T17:12:25"),
        ),
        Listing(
            address=AddressDetails(city="London", shortened_postcode="W14", region=Region.LONDON),
            property_type=PropertyType.TERRACED_HOUSE,
            bedrooms=3,
            bathrooms=3,
            size_sq_ft=600,
            price_in_cents=100000000,
            minimum_deposit_in_cents=20000000,
            estimated_deposit_in_cents=40827520,
            rental_income_in_cents=850000,
            description="Three bedroom terrace close to the Olympia exhibition centre.",
            photos=_photos("58e9d12f-95fd-4516-9611-cc6f4c828959", "f8647f62-a6a2-4bb5-a3ac-b22759af1804",
                           "0ccd6f6a-9390-41b8-8102-8a205ffe73cd"),
            made_visible_at=_visible_at("2023-02-02T08:36:00"),
        ),
        Listing(
            address=AddressDetails(city="Sheffield", shortened_postcode="S1", region=Region.YORKSHIRE),
            property_type=PropertyType.APARTMENT,
            bedrooms=1,
            bathrooms=1,
            size_sq_ft=301,
            price_in_cents=13875000,
            minimum_deposit_in_cents=3468700,
            estimated_deposit_in_cents=3468750,
            rental_income_in_cents=95100,
            is_tenanted=True,
            is_cash_only=True,
            is_featured=True,
            description=(
                "Modern studio apartment in Sheffield city centre, already tenanted. "
                "A ten minute walk from the station, with Manchester, Birmingham and Leeds "
                "all about an hour away by train."
            ),
            photos=_photos("48d16039-5857-471e-a8ee-d427441e2604", "bd4a9d7b-9416-4d61-b550-0b01f2e7fa72"),
            made_visible_at=_visible_at("2023-09-27T08:14:37"),
        ),
        Listing(
            address=AddressDetails(city="Preston", shortened_postcode="PR1", region=Region.NORTH_WEST),
            property_type=PropertyType.APARTMENT,
            bedrooms=2,
            bathrooms=1,
            size_sq_ft=686,
            price_in_cents=3995000,
            minimum_deposit_in_cents=3995000,
            estimated_deposit_in_cents=998750,
            rental_income_in_cents=38000,
            is_tenanted=True,
            description="Two bed flat in Preston with a rear terrace and a large garden.",
            photos=_photos("5d4d5076-2cf3-4d09-8818-6a8fe0993530", "cca8f249-5946-44d3-98f6-2b7f1ec0c286"),
        ),
        Listing(
            address=AddressDetails(city="Birmingham", shortened_postcode="B1", region=Region.MIDLANDS),
            property_type=PropertyType.APARTMENT,
            bedrooms=2,
            bathrooms=2,
            size_sq_ft=720,
            price_in_cents=21000000,
            minimum_deposit_in_cents=5250000,
            estimated_deposit_in_cents=5250000,
            rental_income_in_cents=125000,
            is_new_build=True,
            development_name="Snow Hill Wharf",
            description="New build two bedroom apartment beside the canal.",
        ),
    ]
