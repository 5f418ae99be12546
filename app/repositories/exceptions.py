"""
Domain exceptions raised by the repository layer.
These carry no HTTP semantics; the service layer maps them to API exceptions.
"""

from typing import Any, Dict, Optional


class RepositoryError(Exception):
    """Base class for all repository failures."""

    def __init__(self, resource: str, message: str):
        super().__init__(message)
        self.resource = resource
        self.message = message


class RecordValidationError(RepositoryError):
    """One or more required fields are missing or violate their constraints."""

    def __init__(self, resource: str, errors: Dict[str, str]):
        super().__init__(resource, f"Invalid {resource}: {'; '.join(errors.values())}")
        self.errors = dict(errors)


class RecordConflictError(RepositoryError):
    """A uniqueness constraint would be violated by the requested write."""

    def __init__(self, resource: str, field: str, value: Any):
        super().__init__(resource, f"{resource} with {field} '{value}' already exists")
        self.field = field
        self.value = value


class RecordNotFoundError(RepositoryError):
    """The referenced identity does not exist."""

    def __init__(self, resource: str, record_id: Optional[Any] = None, field: str = "id"):
        message = f"{resource} not found"
        if record_id is not None:
            message += f" with {field}: {record_id}"
        super().__init__(resource, message)
        self.record_id = record_id
        self.field = field
