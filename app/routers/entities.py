"""
Entity API endpoints for CRUD operations.
"""

from fastapi import APIRouter, Depends, Path, Response, status

from app.services.entity import EntityService
from app.schemas.entity import (
    EntityCreate,
    EntityUpdate,
    EntityResponse,
    EntityListResponse
)
from app.utils.dependencies import get_entity_service
from app.schemas.error import get_crud_error_responses, get_read_error_responses


router = APIRouter(prefix="/entities", tags=["Entities"])


@router.post(
    "",
    response_model=EntityResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create new entity",
    description="Create an entity. Email addresses must be unique.",
    responses=get_crud_error_responses()
)
def create_entity(
    entity_data: EntityCreate,
    entity_service: EntityService = Depends(get_entity_service)
) -> EntityResponse:
    """
    Create a new entity.

    Args:
        entity_data: Entity creation data
        entity_service: Entity service instance

    Returns:
        Created entity with its assigned ID

    Raises:
        ValidationError: If name or email is empty
        ConflictError: If the email is already registered
    """
    entity = entity_service.create_entity(entity_data)
    return EntityResponse.model_validate(entity.to_dict())


@router.get(
    "",
    response_model=EntityListResponse,
    status_code=status.HTTP_200_OK,
    summary="List entities",
    description="Get all entities ordered by ID"
)
def list_entities(
    entity_service: EntityService = Depends(get_entity_service)
) -> EntityListResponse:
    entities = entity_service.list_entities()
    return EntityListResponse(
        entities=[EntityResponse.model_validate(entity.to_dict()) for entity in entities],
        total=len(entities)
    )


@router.get(
    "/{entity_id}",
    response_model=EntityResponse,
    status_code=status.HTTP_200_OK,
    summary="Get entity by ID",
    responses=get_read_error_responses()
)
def get_entity(
    entity_id: int = Path(..., description="Entity ID"),
    entity_service: EntityService = Depends(get_entity_service)
) -> EntityResponse:
    entity = entity_service.get_entity(entity_id)
    return EntityResponse.model_validate(entity.to_dict())


@router.put(
    "/{entity_id}",
    response_model=EntityResponse,
    status_code=status.HTTP_200_OK,
    summary="Update entity",
    description="Replace an entity's name and email. The creation timestamp is preserved.",
    responses=get_crud_error_responses()
)
def update_entity(
    entity_data: EntityUpdate,
    entity_id: int = Path(..., description="Entity ID"),
    entity_service: EntityService = Depends(get_entity_service)
) -> EntityResponse:
    """
    Update an existing entity.

    Raises:
        NotFoundError: If entity doesn't exist
        ValidationError: If name or email is empty
        ConflictError: If another entity already uses the email
    """
    entity = entity_service.update_entity(entity_id, entity_data)
    return EntityResponse.model_validate(entity.to_dict())


@router.delete(
    "/{entity_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete entity",
    responses=get_read_error_responses()
)
def delete_entity(
    entity_id: int = Path(..., description="Entity ID"),
    entity_service: EntityService = Depends(get_entity_service)
) -> Response:
    entity_service.delete_entity(entity_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
