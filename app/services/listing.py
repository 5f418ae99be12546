"""
Listing service for managing property listings and their filtered queries.
Converts request schemas into records and repository errors into API exceptions.
"""

from typing import Iterable, List, Optional
from app.models.listing import Listing, PropertyType, Region
from app.repositories.listing import ListingRepository
from app.repositories.exceptions import RepositoryError
from app.schemas.listing import ListingCreate, ListingUpdate
from app.services.error_handler import ErrorHandlerService
from app.utils.exceptions import InvalidRangeError
import logging

logger = logging.getLogger(__name__)


def _ordered(listings: Iterable[Listing]) -> List[Listing]:
    return sorted(listings, key=lambda listing: listing.id)


def _check_range(field: str, minimum: int, maximum: int) -> None:
    if minimum > maximum:
        raise InvalidRangeError(field, minimum, maximum)


class ListingService:
    """
    Listing service handling CRUD operations and search over a listing repository.
    Results of list and search operations are ordered by listing ID.
    """

    def __init__(self, listing_repo: ListingRepository):
        self.listing_repo = listing_repo

    def create_listing(self, listing_data: ListingCreate) -> Listing:
        """
        Create a new listing.

        Args:
            listing_data: Listing creation data

        Returns:
            Created listing

        Raises:
            ValidationError: If a required field is missing or price is not positive
        """
        try:
            listing = self.listing_repo.create(Listing(**listing_data.model_dump()))
        except RepositoryError as e:
            raise ErrorHandlerService.from_repository_error(e) from e

        logger.info(
            f"Listing created: {listing.address.city} {listing.address.shortened_postcode} (ID: {listing.id})"
        )
        return listing

    def get_listing(self, listing_id: int) -> Listing:
        """
        Get listing by ID.

        Raises:
            NotFoundError: If listing doesn't exist
        """
        try:
            listing = self.listing_repo.get_by_id(listing_id)
        except RepositoryError as e:
            raise ErrorHandlerService.from_repository_error(e) from e

        logger.debug(f"Retrieved listing: {listing_id}")
        return listing

    def list_listings(
        self,
        region: Optional[Region] = None,
        property_type: Optional[PropertyType] = None
    ) -> List[Listing]:
        """
        Get listings, optionally narrowed by region and/or property type.

        Args:
            region: Only listings in this region
            property_type: Only listings of this type

        Returns:
            Matching listings ordered by ID
        """
        if region is not None:
            listings = self.listing_repo.get_by_region(region)
            if property_type is not None:
                listings = [listing for listing in listings if listing.property_type == property_type]
        elif property_type is not None:
            listings = self.listing_repo.get_by_property_type(property_type)
        else:
            listings = self.listing_repo.get_all()

        logger.debug(f"Retrieved {len(listings)} listings (region={region}, property_type={property_type})")
        return _ordered(listings)

    def update_listing(self, listing_id: int, listing_data: ListingUpdate) -> Listing:
        """
        Replace a listing with new data.

        An omitted ``made_visible_at`` keeps the stored visibility timestamp.

        Args:
            listing_id: ID of the listing to update
            listing_data: Complete new listing data

        Returns:
            Updated listing

        Raises:
            NotFoundError: If listing doesn't exist
            ValidationError: If a required field is missing or price is not positive
        """
        try:
            listing = self.listing_repo.update(Listing(id=listing_id, **listing_data.model_dump()))
        except RepositoryError as e:
            raise ErrorHandlerService.from_repository_error(e) from e

        logger.info(f"Listing updated: {listing_id}")
        return listing

    def delete_listing(self, listing_id: int) -> None:
        """
        Delete a listing.

        Raises:
            NotFoundError: If listing doesn't exist
        """
        try:
            self.listing_repo.delete(listing_id)
        except RepositoryError as e:
            raise ErrorHandlerService.from_repository_error(e) from e

        logger.info(f"Listing deleted: {listing_id}")

    def get_featured_listings(self) -> List[Listing]:
        return _ordered(self.listing_repo.get_featured())

    def search_by_city(self, city: str) -> List[Listing]:
        listings = self.listing_repo.search_by_city(city.strip())
        logger.debug(f"City search '{city}' matched {len(listings)} listings")
        return _ordered(listings)

    def get_by_price_range(self, min_price: int, max_price: int) -> List[Listing]:
        """
        Get listings priced within inclusive bounds.

        Raises:
            InvalidRangeError: If min_price is greater than max_price
        """
        _check_range("price", min_price, max_price)
        return _ordered(self.listing_repo.get_by_price_range(min_price, max_price))

    def get_by_bedroom_range(self, min_bedrooms: int, max_bedrooms: int) -> List[Listing]:
        _check_range("bedroom", min_bedrooms, max_bedrooms)
        return _ordered(self.listing_repo.get_by_bedroom_range(min_bedrooms, max_bedrooms))

    def get_by_bathroom_range(self, min_bathrooms: int, max_bathrooms: int) -> List[Listing]:
        _check_range("bathroom", min_bathrooms, max_bathrooms)
        return _ordered(self.listing_repo.get_by_bathroom_range(min_bathrooms, max_bathrooms))
