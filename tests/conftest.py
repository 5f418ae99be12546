"""
Test configuration and fixtures for the listing store API.
Provides repository and service fixtures, test data factories, and common test utilities.
"""

import pytest
import uuid
from typing import Generator, List, Optional
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from app.models.entity import Entity
from app.models.listing import AddressDetails, Listing, Photo, PropertyType, Region
from app.repositories.entity import InMemoryEntityRepository
from app.repositories.listing import InMemoryListingRepository
from app.services.entity import EntityService
from app.services.listing import ListingService


# Settings and application fixtures
@pytest.fixture
def test_settings() -> Settings:
    """Settings for an empty, unseeded application."""
    return Settings(environment="testing", seed_sample_data=False, log_level="WARNING")


@pytest.fixture
def app(test_settings: Settings) -> FastAPI:
    """Fresh application with its own empty repositories."""
    return create_app(test_settings)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Create a test client for an empty application."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def seeded_client() -> Generator[TestClient, None, None]:
    """Create a test client for an application seeded with the sample listings."""
    seeded_app = create_app(Settings(environment="testing", seed_sample_data=True, log_level="WARNING"))
    with TestClient(seeded_app) as client:
        yield client


# Repository fixtures
@pytest.fixture
def entity_repository() -> InMemoryEntityRepository:
    """Create an empty entity repository."""
    return InMemoryEntityRepository()


@pytest.fixture
def listing_repository() -> InMemoryListingRepository:
    """Create an empty listing repository."""
    return InMemoryListingRepository()


# Service fixtures
@pytest.fixture
def entity_service(entity_repository: InMemoryEntityRepository) -> EntityService:
    return EntityService(entity_repository)


@pytest.fixture
def listing_service(listing_repository: InMemoryListingRepository) -> ListingService:
    return ListingService(listing_repository)


# Test data factories
class EntityFactory:
    """Factory for creating test entities."""

    @staticmethod
    def create_entity_data(name: str = "Test Entity", email: Optional[str] = None) -> dict:
        """Create entity data dictionary."""
        return {
            "name": name,
            "email": email or f"test{uuid.uuid4().hex[:8]}@example.com"
        }

    @staticmethod
    def build_entity(name: str = "Test Entity", email: Optional[str] = None) -> Entity:
        """Build an unsaved entity."""
        return Entity(**EntityFactory.create_entity_data(name=name, email=email))

    @staticmethod
    def create_entity(
        entity_repo: InMemoryEntityRepository,
        name: str = "Test Entity",
        email: Optional[str] = None
    ) -> Entity:
        """Create a test entity in the repository."""
        return entity_repo.create(EntityFactory.build_entity(name=name, email=email))


class PhotoFactory:
    """Factory for creating test listing photos."""

    @staticmethod
    def create_photo_data(key: Optional[str] = None, mime_type: str = "image/jpeg") -> dict:
        """Create photo data dictionary."""
        key = key or uuid.uuid4().hex
        return {
            "original_url": f"https://photos.example.com/{key}",
            "standard_url": f"https://photos.example.com/{key}_standard",
            "thumbnail_url": f"https://photos.example.com/{key}_thumbnail",
            "mime_type": mime_type
        }


class ListingFactory:
    """Factory for creating test listings."""

    @staticmethod
    def create_listing_data(
        city: str = "London",
        shortened_postcode: str = "W14",
        region: Optional[Region] = Region.LONDON,
        property_type: Optional[PropertyType] = PropertyType.APARTMENT,
        price_in_cents: int = 25000000,
        bedrooms: int = 2,
        bathrooms: int = 1,
        rental_income_in_cents: int = 150000,
        is_featured: bool = False,
        made_visible_at: Optional[str] = None,
        photos: Optional[List[dict]] = None
    ) -> dict:
        """Create listing data dictionary with JSON-compatible values."""
        data = {
            "address": {
                "city": city,
                "shortened_postcode": shortened_postcode,
                "region": region.value if region else None
            },
            "property_type": property_type.value if property_type else None,
            "bedrooms": bedrooms,
            "bathrooms": bathrooms,
            "size_sq_ft": 650,
            "price_in_cents": price_in_cents,
            "minimum_deposit_in_cents": price_in_cents // 10,
            "estimated_deposit_in_cents": price_in_cents // 4,
            "rental_income_in_cents": rental_income_in_cents,
            "is_featured": is_featured,
            "description": "A test listing",
            "photos": photos if photos is not None else [PhotoFactory.create_photo_data()]
        }
        if made_visible_at is not None:
            data["made_visible_at"] = made_visible_at
        return data

    @staticmethod
    def build_listing(
        city: str = "London",
        shortened_postcode: str = "W14",
        region: Optional[Region] = Region.LONDON,
        property_type: Optional[PropertyType] = PropertyType.APARTMENT,
        price_in_cents: int = 25000000,
        bedrooms: int = 2,
        bathrooms: int = 1,
        rental_income_in_cents: int = 150000,
        is_featured: bool = False
    ) -> Listing:
        """Build an unsaved listing."""
        return Listing(
            address=AddressDetails(city=city, shortened_postcode=shortened_postcode, region=region),
            property_type=property_type,
            bedrooms=bedrooms,
            bathrooms=bathrooms,
            size_sq_ft=650,
            price_in_cents=price_in_cents,
            rental_income_in_cents=rental_income_in_cents,
            is_featured=is_featured,
            description="A test listing",
            photos=[Photo(**PhotoFactory.create_photo_data())]
        )

    @staticmethod
    def create_listing(listing_repo: InMemoryListingRepository, **kwargs) -> Listing:
        """Create a test listing in the repository."""
        return listing_repo.create(ListingFactory.build_listing(**kwargs))


# Common test fixtures
@pytest.fixture
def test_entity(entity_repository: InMemoryEntityRepository) -> Entity:
    """Create a test entity."""
    return EntityFactory.create_entity(entity_repository, name="Jane Doe", email="jane@example.com")


@pytest.fixture
def test_listing(listing_repository: InMemoryListingRepository) -> Listing:
    """Create a test listing."""
    return ListingFactory.create_listing(listing_repository)


@pytest.fixture
def populated_listing_repository(listing_repository: InMemoryListingRepository) -> InMemoryListingRepository:
    """Listing repository with a spread of cities, prices and room counts."""
    ListingFactory.create_listing(
        listing_repository, city="London", region=Region.LONDON,
        property_type=PropertyType.APARTMENT, price_in_cents=12500000,
        bedrooms=1, bathrooms=1, is_featured=True
    )
    ListingFactory.create_listing(
        listing_repository, city="Manchester", shortened_postcode="M1", region=Region.NORTH_WEST,
        property_type=PropertyType.SEMI_DETACHED, price_in_cents=14400000,
        bedrooms=3, bathrooms=2, is_featured=True
    )
    ListingFactory.create_listing(
        listing_repository, city="Edinburgh", shortened_postcode="EH12", region=Region.SCOTLAND,
        property_type=PropertyType.APARTMENT, price_in_cents=23456700,
        bedrooms=0, bathrooms=1
    )
    ListingFactory.create_listing(
        listing_repository, city="New London", shortened_postcode="NL1", region=Region.SOUTH_EAST,
        property_type=PropertyType.DETACHED, price_in_cents=50000000,
        bedrooms=5, bathrooms=3
    )
    return listing_repository


# Utility functions for tests
def assert_entity_equal(entity1: Entity, entity2: Entity):
    """Assert that two entities are equal."""
    assert entity1.id == entity2.id
    assert entity1.name == entity2.name
    assert entity1.email == entity2.email
    assert entity1.created_at == entity2.created_at


def assert_listing_equal(listing1: Listing, listing2: Listing):
    """Assert that two listings are equal."""
    assert listing1.id == listing2.id
    assert listing1.address == listing2.address
    assert listing1.property_type == listing2.property_type
    assert listing1.price_in_cents == listing2.price_in_cents
    assert listing1.bedrooms == listing2.bedrooms
    assert listing1.bathrooms == listing2.bathrooms
    assert listing1.photos == listing2.photos
    assert listing1.made_visible_at == listing2.made_visible_at
