"""
Entity service for managing named-contact records.
Converts request schemas into records and repository errors into API exceptions.
"""

from typing import List
from app.models.entity import Entity
from app.repositories.entity import EntityRepository
from app.repositories.exceptions import RepositoryError
from app.schemas.entity import EntityCreate, EntityUpdate
from app.services.error_handler import ErrorHandlerService
import logging

logger = logging.getLogger(__name__)


class EntityService:
    """
    Entity service handling CRUD operations over an entity repository.
    """

    def __init__(self, entity_repo: EntityRepository):
        self.entity_repo = entity_repo

    def create_entity(self, entity_data: EntityCreate) -> Entity:
        """
        Create a new entity.

        Args:
            entity_data: Entity creation data

        Returns:
            Created entity

        Raises:
            ValidationError: If name or email is empty
            ConflictError: If the email is already in use
        """
        try:
            entity = self.entity_repo.create(Entity(**entity_data.model_dump()))
        except RepositoryError as e:
            raise ErrorHandlerService.from_repository_error(e) from e

        logger.info(f"Entity created: {entity.email} (ID: {entity.id})")
        return entity

    def get_entity(self, entity_id: int) -> Entity:
        """
        Get entity by ID.

        Raises:
            NotFoundError: If entity doesn't exist
        """
        try:
            entity = self.entity_repo.get_by_id(entity_id)
        except RepositoryError as e:
            raise ErrorHandlerService.from_repository_error(e) from e

        logger.debug(f"Retrieved entity: {entity_id}")
        return entity

    def list_entities(self) -> List[Entity]:
        """Get all entities ordered by ID."""
        entities = sorted(self.entity_repo.get_all(), key=lambda entity: entity.id)
        logger.debug(f"Retrieved {len(entities)} entities")
        return entities

    def update_entity(self, entity_id: int, entity_data: EntityUpdate) -> Entity:
        """
        Replace an entity's name and email.

        Args:
            entity_id: ID of the entity to update
            entity_data: New entity data

        Returns:
            Updated entity

        Raises:
            NotFoundError: If entity doesn't exist
            ValidationError: If name or email is empty
            ConflictError: If the email belongs to another entity
        """
        try:
            entity = self.entity_repo.update(Entity(id=entity_id, **entity_data.model_dump()))
        except RepositoryError as e:
            raise ErrorHandlerService.from_repository_error(e) from e

        logger.info(f"Entity updated: {entity_id}")
        return entity

    def delete_entity(self, entity_id: int) -> None:
        """
        Delete an entity.

        Raises:
            NotFoundError: If entity doesn't exist
        """
        try:
            self.entity_repo.delete(entity_id)
        except RepositoryError as e:
            raise ErrorHandlerService.from_repository_error(e) from e

        logger.info(f"Entity deleted: {entity_id}")
