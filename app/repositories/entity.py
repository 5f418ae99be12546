"""
Entity repository for named-contact records.
Provides a concurrency-safe in-memory store with required-field and email-uniqueness checks.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from app.models.base import utc_now
from app.models.entity import Entity
from app.repositories.base import InMemoryStore
from app.repositories.exceptions import (
    RecordConflictError,
    RecordNotFoundError,
    RecordValidationError,
)

RESOURCE = "Entity"


class EntityRepository(ABC):
    """Storage capability interface for entities."""

    @abstractmethod
    def create(self, entity: Entity) -> Entity:
        """Validate and store a new entity, returning it with identity and timestamps."""

    @abstractmethod
    def get_by_id(self, entity_id: int) -> Entity:
        """Get an entity by identity."""

    @abstractmethod
    def get_all(self) -> List[Entity]:
        """Get every stored entity, in no particular order."""

    @abstractmethod
    def update(self, entity: Entity) -> Entity:
        """Replace the stored entity with the same identity."""

    @abstractmethod
    def delete(self, entity_id: int) -> None:
        """Remove an entity permanently."""

    @abstractmethod
    def get_by_email(self, email: str) -> Entity:
        """Get the entity owning an email address."""

    @abstractmethod
    def count(self) -> int:
        """Number of stored entities."""

    @abstractmethod
    def exists(self, entity_id: int) -> bool:
        """Whether an entity with this identity is stored."""


class InMemoryEntityRepository(EntityRepository):
    """
    In-memory entity repository.

    Every mutation runs under the exclusive side of the store lock, with all
    validation done before the record map or identity counter is touched.
    """

    def __init__(self):
        self._store: InMemoryStore[Entity] = InMemoryStore()

    @staticmethod
    def _validate(entity: Entity) -> None:
        errors = {}
        if not entity.name:
            errors["name"] = "name is required"
        if not entity.email:
            errors["email"] = "email is required"
        if errors:
            raise RecordValidationError(RESOURCE, errors)

    def _check_email_available(self, email: str, exclude_id: Optional[int] = None) -> None:
        for existing in self._store.iter_stored():
            if existing.email == email and existing.id != exclude_id:
                raise RecordConflictError(RESOURCE, "email", email)

    def create(self, entity: Entity) -> Entity:
        """
        Create a new entity.

        Args:
            entity: Entity to store; any identity or timestamps on it are ignored

        Returns:
            Stored entity with identity and timestamps populated

        Raises:
            RecordValidationError: If name or email is empty
            RecordConflictError: If the email is already used by a live entity
        """
        with self._store.write():
            self._validate(entity)
            self._check_email_available(entity.email)
            now = utc_now()
            return self._store.insert(entity, created_at=now, updated_at=now)

    def get_by_id(self, entity_id: int) -> Entity:
        """
        Get an entity by identity.

        Raises:
            RecordNotFoundError: If no entity has this identity
        """
        with self._store.read():
            entity = self._store.get(entity_id)
        if entity is None:
            raise RecordNotFoundError(RESOURCE, entity_id)
        return entity

    def get_all(self) -> List[Entity]:
        with self._store.read():
            return self._store.values()

    def update(self, entity: Entity) -> Entity:
        """
        Replace an existing entity wholesale.

        The original creation timestamp is carried forward and the update
        timestamp refreshed.

        Args:
            entity: New version of the entity, identified by ``entity.id``

        Returns:
            Stored entity after the update

        Raises:
            RecordNotFoundError: If ``entity.id`` is not stored
            RecordValidationError: If name or email is empty
            RecordConflictError: If the email belongs to a different entity
        """
        with self._store.write():
            existing = self._store.peek(entity.id) if entity.id is not None else None
            if existing is None:
                raise RecordNotFoundError(RESOURCE, entity.id)
            self._validate(entity)
            self._check_email_available(entity.email, exclude_id=entity.id)
            return self._store.replace(
                entity,
                created_at=existing.created_at,
                updated_at=utc_now(),
            )

    def delete(self, entity_id: int) -> None:
        """
        Delete an entity. Its identity is never reassigned.

        Raises:
            RecordNotFoundError: If no entity has this identity
        """
        with self._store.write():
            if not self._store.contains(entity_id):
                raise RecordNotFoundError(RESOURCE, entity_id)
            self._store.remove(entity_id)

    def get_by_email(self, email: str) -> Entity:
        with self._store.read():
            matches = self._store.select(lambda entity: entity.email == email)
        if not matches:
            raise RecordNotFoundError(RESOURCE, email, field="email")
        return matches[0]

    def count(self) -> int:
        with self._store.read():
            return len(self._store)

    def exists(self, entity_id: int) -> bool:
        with self._store.read():
            return self._store.contains(entity_id)
