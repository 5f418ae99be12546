"""
Listing repository for property listings with filtered read operations.
Provides a concurrency-safe in-memory store plus region, type, price and room-count queries.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List

from app.models.base import utc_now
from app.models.listing import Listing, PropertyType, Region
from app.repositories.base import InMemoryStore
from app.repositories.exceptions import RecordNotFoundError, RecordValidationError

RESOURCE = "Listing"


class ListingRepository(ABC):
    """Storage and query capability interface for listings."""

    @abstractmethod
    def create(self, listing: Listing) -> Listing:
        """Validate and store a new listing."""

    @abstractmethod
    def get_by_id(self, listing_id: int) -> Listing:
        """Get a listing by identity."""

    @abstractmethod
    def get_all(self) -> List[Listing]:
        """Get every stored listing, in no particular order."""

    @abstractmethod
    def update(self, listing: Listing) -> Listing:
        """Replace the stored listing with the same identity."""

    @abstractmethod
    def delete(self, listing_id: int) -> None:
        """Remove a listing permanently."""

    @abstractmethod
    def get_by_region(self, region: Region) -> List[Listing]:
        """Listings in exactly this region."""

    @abstractmethod
    def get_by_property_type(self, property_type: PropertyType) -> List[Listing]:
        """Listings of exactly this property type."""

    @abstractmethod
    def get_featured(self) -> List[Listing]:
        """Listings flagged as featured."""

    @abstractmethod
    def search_by_city(self, city: str) -> List[Listing]:
        """Listings whose city contains the text, ignoring case."""

    @abstractmethod
    def get_by_price_range(self, min_price: int, max_price: int) -> List[Listing]:
        """Listings priced within inclusive bounds (minor units)."""

    @abstractmethod
    def get_by_bedroom_range(self, min_bedrooms: int, max_bedrooms: int) -> List[Listing]:
        """Listings with a bedroom count within inclusive bounds."""

    @abstractmethod
    def get_by_bathroom_range(self, min_bathrooms: int, max_bathrooms: int) -> List[Listing]:
        """Listings with a bathroom count within inclusive bounds."""

    @abstractmethod
    def count(self) -> int:
        """Number of stored listings."""

    @abstractmethod
    def exists(self, listing_id: int) -> bool:
        """Whether a listing with this identity is stored."""

    def load(self, listings: Iterable[Listing]) -> List[Listing]:
        """
        Bulk-create listings, e.g. to seed sample data.

        Each listing goes through ``create`` and receives a fresh identity.

        Args:
            listings: Listings to store

        Returns:
            Stored listings in input order
        """
        return [self.create(listing) for listing in listings]


class InMemoryListingRepository(ListingRepository):
    """
    In-memory listing repository.

    Filters are full scans of the live record set under the shared side of
    the store lock; there are no secondary indexes.
    """

    def __init__(self):
        self._store: InMemoryStore[Listing] = InMemoryStore()

    @staticmethod
    def _validate(listing: Listing) -> None:
        errors = {}
        if not listing.address.city:
            errors["address.city"] = "city is required"
        if not listing.address.shortened_postcode:
            errors["address.shortened_postcode"] = "shortened postcode is required"
        if not listing.address.region:
            errors["address.region"] = "region is required"
        if not listing.property_type:
            errors["property_type"] = "property type is required"
        if listing.price_in_cents <= 0:
            errors["price_in_cents"] = "price must be greater than 0"
        if errors:
            raise RecordValidationError(RESOURCE, errors)

    def create(self, listing: Listing) -> Listing:
        """
        Create a new listing.

        ``made_visible_at`` defaults to the current time when not supplied.

        Args:
            listing: Listing to store; any identity on it is ignored

        Returns:
            Stored listing with its identity populated

        Raises:
            RecordValidationError: If a required field is missing or price is not positive
        """
        with self._store.write():
            self._validate(listing)
            made_visible_at = listing.made_visible_at or utc_now()
            return self._store.insert(listing, made_visible_at=made_visible_at)

    def get_by_id(self, listing_id: int) -> Listing:
        """
        Get a listing by identity.

        Raises:
            RecordNotFoundError: If no listing has this identity
        """
        with self._store.read():
            listing = self._store.get(listing_id)
        if listing is None:
            raise RecordNotFoundError(RESOURCE, listing_id)
        return listing

    def get_all(self) -> List[Listing]:
        with self._store.read():
            return self._store.values()

    def update(self, listing: Listing) -> Listing:
        """
        Replace an existing listing wholesale.

        A stored ``made_visible_at`` is kept when the update does not supply one.

        Args:
            listing: New version of the listing, identified by ``listing.id``

        Returns:
            Stored listing after the update

        Raises:
            RecordNotFoundError: If ``listing.id`` is not stored
            RecordValidationError: If a required field is missing or price is not positive
        """
        with self._store.write():
            existing = self._store.peek(listing.id) if listing.id is not None else None
            if existing is None:
                raise RecordNotFoundError(RESOURCE, listing.id)
            self._validate(listing)
            made_visible_at = listing.made_visible_at or existing.made_visible_at
            return self._store.replace(listing, made_visible_at=made_visible_at)

    def delete(self, listing_id: int) -> None:
        """
        Delete a listing. Its identity is never reassigned.

        Raises:
            RecordNotFoundError: If no listing has this identity
        """
        with self._store.write():
            if not self._store.contains(listing_id):
                raise RecordNotFoundError(RESOURCE, listing_id)
            self._store.remove(listing_id)

    def get_by_region(self, region: Region) -> List[Listing]:
        with self._store.read():
            return self._store.select(lambda listing: listing.address.region == region)

    def get_by_property_type(self, property_type: PropertyType) -> List[Listing]:
        with self._store.read():
            return self._store.select(lambda listing: listing.property_type == property_type)

    def get_featured(self) -> List[Listing]:
        with self._store.read():
            return self._store.select(lambda listing: listing.is_featured)

    def search_by_city(self, city: str) -> List[Listing]:
        needle = city.lower()
        with self._store.read():
            return self._store.select(lambda listing: needle in listing.address.city.lower())

    def get_by_price_range(self, min_price: int, max_price: int) -> List[Listing]:
        with self._store.read():
            return self._store.select(
                lambda listing: min_price <= listing.price_in_cents <= max_price
            )

    def get_by_bedroom_range(self, min_bedrooms: int, max_bedrooms: int) -> List[Listing]:
        with self._store.read():
            return self._store.select(
                lambda listing: min_bedrooms <= listing.bedrooms <= max_bedrooms
            )

    def get_by_bathroom_range(self, min_bathrooms: int, max_bathrooms: int) -> List[Listing]:
        with self._store.read():
            return self._store.select(
                lambda listing: min_bathrooms <= listing.bathrooms <= max_bathrooms
            )

    def count(self) -> int:
        with self._store.read():
            return len(self._store)

    def exists(self, listing_id: int) -> bool:
        with self._store.read():
            return self._store.contains(listing_id)
