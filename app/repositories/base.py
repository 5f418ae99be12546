"""
Shared in-memory storage used by the repository implementations.
Provides an identity-keyed record map, a monotonic identity counter and a reader/writer lock.
"""

from typing import Callable, Dict, Generic, Iterator, List, Optional, TypeVar
from contextlib import AbstractContextManager

from app.models.base import RecordModel
from app.utils.concurrency import ReadWriteLock

ModelType = TypeVar("ModelType", bound=RecordModel)


class InMemoryStore(Generic[ModelType]):
    """
    Single-table in-memory store guarded by one coarse reader/writer lock.

    The lock covers the record map and the identity counter as one unit.
    Callers take ``read()`` or ``write()`` around a whole operation so that
    validation, identity assignment and the write happen atomically; the
    helper methods below assume the appropriate side is already held.

    Records are deep-copied on the way in and on the way out, so nothing
    outside the store ever holds a reference to its internal state.
    """

    def __init__(self):
        self._records: Dict[int, ModelType] = {}
        self._next_id = 1
        self._lock = ReadWriteLock()

    def read(self) -> AbstractContextManager:
        """Shared access for read-only operations."""
        return self._lock.read_lock()

    def write(self) -> AbstractContextManager:
        """Exclusive access for mutations."""
        return self._lock.write_lock()

    @property
    def next_id(self) -> int:
        """Identity the next successful insert will receive."""
        return self._next_id

    def __len__(self) -> int:
        return len(self._records)

    def contains(self, record_id: int) -> bool:
        return record_id in self._records

    def get(self, record_id: int) -> Optional[ModelType]:
        """
        Get a copy of a stored record.

        Args:
            record_id: Identity of the record

        Returns:
            Copy of the record if present, None otherwise
        """
        record = self._records.get(record_id)
        if record is None:
            return None
        return record.model_copy(deep=True)

    def peek(self, record_id: int) -> Optional[ModelType]:
        """Stored record without copying; must not escape the store's owner."""
        return self._records.get(record_id)

    def iter_stored(self) -> Iterator[ModelType]:
        """Iterate stored records without copying, for in-lock checks only."""
        return iter(self._records.values())

    def values(self) -> List[ModelType]:
        """Snapshot of copies of every stored record."""
        return [record.model_copy(deep=True) for record in self._records.values()]

    def select(self, predicate: Callable[[ModelType], bool]) -> List[ModelType]:
        """
        Full scan returning copies of the records matching a predicate.

        Args:
            predicate: Callable evaluated against each stored record

        Returns:
            List of matching record copies, possibly empty
        """
        return [
            record.model_copy(deep=True)
            for record in self._records.values()
            if predicate(record)
        ]

    def insert(self, record: ModelType, **fields) -> ModelType:
        """
        Store a new record under the next identity.

        Args:
            record: Record to store; it is copied, never retained
            **fields: Field values to set on the stored copy

        Returns:
            Copy of the stored record with its identity populated
        """
        record_id = self._next_id
        stored = record.model_copy(update={**fields, "id": record_id}, deep=True)
        self._records[record_id] = stored
        self._next_id += 1
        return stored.model_copy(deep=True)

    def replace(self, record: ModelType, **fields) -> ModelType:
        """
        Replace an existing record wholesale.

        Args:
            record: New version of the record; ``record.id`` must already be stored
            **fields: Field values to set on the stored copy

        Returns:
            Copy of the stored record
        """
        if record.id not in self._records:
            raise KeyError(record.id)
        stored = record.model_copy(update=fields, deep=True)
        self._records[record.id] = stored
        return stored.model_copy(deep=True)

    def remove(self, record_id: int) -> None:
        del self._records[record_id]
