"""
Base class for in-memory record models.
Records are pydantic models owned by the repositories; identity is assigned on creation.
"""

from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime, timezone
from typing import Any, Dict, Optional


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class RecordModel(BaseModel):
    """
    Base class for all stored records.
    Includes the integer identity assigned by the owning repository.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: Optional[int] = Field(
        None,
        description="Identity assigned by the repository on creation"
    )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the record to a JSON-compatible dictionary.

        Returns:
            Dictionary representation of the record
        """
        return self.model_dump(mode="json")
