"""
Listing API endpoints for CRUD operations, search, and filtering.
Fixed paths are registered before ``/{listing_id}`` so they are matched first.
"""

from fastapi import APIRouter, Depends, Path, Query, Response, status
from typing import List, Optional

from app.models.listing import Listing, PropertyType, Region
from app.services.listing import ListingService
from app.schemas.listing import (
    ListingCreate,
    ListingUpdate,
    ListingResponse,
    ListingListResponse
)
from app.utils.dependencies import get_listing_service
from app.schemas.error import get_crud_error_responses, get_error_responses, get_read_error_responses


router = APIRouter(prefix="/listings", tags=["Listings"])


def _to_list_response(listings: List[Listing]) -> ListingListResponse:
    return ListingListResponse(
        listings=[ListingResponse.model_validate(listing.to_dict()) for listing in listings],
        total=len(listings)
    )


@router.post(
    "",
    response_model=ListingResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create new listing",
    description="Create a listing. City, shortened postcode, region, property type and a positive price are required.",
    responses=get_crud_error_responses()
)
def create_listing(
    listing_data: ListingCreate,
    listing_service: ListingService = Depends(get_listing_service)
) -> ListingResponse:
    """
    Create a new listing.

    Args:
        listing_data: Listing creation data
        listing_service: Listing service instance

    Returns:
        Created listing with its assigned ID

    Raises:
        ValidationError: If listing data is invalid
    """
    listing = listing_service.create_listing(listing_data)
    return ListingResponse.model_validate(listing.to_dict())


@router.get(
    "",
    response_model=ListingListResponse,
    status_code=status.HTTP_200_OK,
    summary="List listings",
    description="Get all listings ordered by ID, optionally filtered by region and property type",
    responses=get_error_responses(422)
)
def list_listings(
    region: Optional[Region] = Query(None, description="Region filter"),
    property_type: Optional[PropertyType] = Query(None, description="Property type filter"),
    listing_service: ListingService = Depends(get_listing_service)
) -> ListingListResponse:
    return _to_list_response(listing_service.list_listings(region=region, property_type=property_type))


@router.get(
    "/featured",
    response_model=ListingListResponse,
    status_code=status.HTTP_200_OK,
    summary="Featured listings"
)
def get_featured_listings(
    listing_service: ListingService = Depends(get_listing_service)
) -> ListingListResponse:
    return _to_list_response(listing_service.get_featured_listings())


@router.get(
    "/search",
    response_model=ListingListResponse,
    status_code=status.HTTP_200_OK,
    summary="Search listings by city",
    description="Case-insensitive substring match on the listing's city",
    responses=get_error_responses(422)
)
def search_listings(
    city: str = Query(..., min_length=1, description="Part of the city name"),
    listing_service: ListingService = Depends(get_listing_service)
) -> ListingListResponse:
    return _to_list_response(listing_service.search_by_city(city))


@router.get(
    "/price-range",
    response_model=ListingListResponse,
    status_code=status.HTTP_200_OK,
    summary="Listings within a price range",
    description="Inclusive range over price_in_cents",
    responses=get_error_responses(400, 422)
)
def get_listings_by_price_range(
    min_price: int = Query(..., ge=0, description="Minimum price in minor units"),
    max_price: int = Query(..., ge=0, description="Maximum price in minor units"),
    listing_service: ListingService = Depends(get_listing_service)
) -> ListingListResponse:
    return _to_list_response(listing_service.get_by_price_range(min_price, max_price))


@router.get(
    "/bedrooms",
    response_model=ListingListResponse,
    status_code=status.HTTP_200_OK,
    summary="Listings within a bedroom range",
    responses=get_error_responses(400, 422)
)
def get_listings_by_bedrooms(
    min_bedrooms: int = Query(..., ge=0, description="Minimum number of bedrooms"),
    max_bedrooms: int = Query(..., ge=0, description="Maximum number of bedrooms"),
    listing_service: ListingService = Depends(get_listing_service)
) -> ListingListResponse:
    return _to_list_response(listing_service.get_by_bedroom_range(min_bedrooms, max_bedrooms))


@router.get(
    "/bathrooms",
    response_model=ListingListResponse,
    status_code=status.HTTP_200_OK,
    summary="Listings within a bathroom range",
    responses=get_error_responses(400, 422)
)
def get_listings_by_bathrooms(
    min_bathrooms: int = Query(..., ge=0, description="Minimum number of bathrooms"),
    max_bathrooms: int = Query(..., ge=0, description="Maximum number of bathrooms"),
    listing_service: ListingService = Depends(get_listing_service)
) -> ListingListResponse:
    return _to_list_response(listing_service.get_by_bathroom_range(min_bathrooms, max_bathrooms))


@router.get(
    "/{listing_id}",
    response_model=ListingResponse,
    status_code=status.HTTP_200_OK,
    summary="Get listing by ID",
    responses=get_read_error_responses()
)
def get_listing(
    listing_id: int = Path(..., description="Listing ID"),
    listing_service: ListingService = Depends(get_listing_service)
) -> ListingResponse:
    listing = listing_service.get_listing(listing_id)
    return ListingResponse.model_validate(listing.to_dict())


@router.put(
    "/{listing_id}",
    response_model=ListingResponse,
    status_code=status.HTTP_200_OK,
    summary="Update listing",
    description="Replace a listing. Omitting made_visible_at keeps the stored value.",
    responses=get_crud_error_responses()
)
def update_listing(
    listing_data: ListingUpdate,
    listing_id: int = Path(..., description="Listing ID"),
    listing_service: ListingService = Depends(get_listing_service)
) -> ListingResponse:
    """
    Update an existing listing.

    Raises:
        NotFoundError: If listing doesn't exist
        ValidationError: If listing data is invalid
    """
    listing = listing_service.update_listing(listing_id, listing_data)
    return ListingResponse.model_validate(listing.to_dict())


@router.delete(
    "/{listing_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete listing",
    responses=get_read_error_responses()
)
def delete_listing(
    listing_id: int = Path(..., description="Listing ID"),
    listing_service: ListingService = Depends(get_listing_service)
) -> Response:
    listing_service.delete_listing(listing_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
