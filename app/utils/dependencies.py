"""
FastAPI dependency injection utilities for repositories and services.
Repositories are created once per application and kept on ``app.state``.
"""

from fastapi import Depends, Request
from app.repositories.entity import EntityRepository
from app.repositories.listing import ListingRepository
from app.services.entity import EntityService
from app.services.listing import ListingService


def get_entity_repository(request: Request) -> EntityRepository:
    """
    Get the application's entity repository.

    Args:
        request: Current request

    Returns:
        EntityRepository instance
    """
    return request.app.state.entity_repository


def get_listing_repository(request: Request) -> ListingRepository:
    """
    Get the application's listing repository.

    Args:
        request: Current request

    Returns:
        ListingRepository instance
    """
    return request.app.state.listing_repository


def get_entity_service(
    entity_repo: EntityRepository = Depends(get_entity_repository)
) -> EntityService:
    """Get entity service instance."""
    return EntityService(entity_repo)


def get_listing_service(
    listing_repo: ListingRepository = Depends(get_listing_repository)
) -> ListingService:
    """Get listing service instance."""
    return ListingService(listing_repo)
