"""
Entity model for generic named contacts.
An entity carries a display name and a unique email address.
"""

from pydantic import Field
from datetime import datetime
from typing import Optional

from app.models.base import RecordModel


class Entity(RecordModel):
    """
    Named-contact record.
    Email addresses are unique among live entities (case-sensitive exact match).
    """

    name: str = Field(
        "",
        description="Display name"
    )

    email: str = Field(
        "",
        description="Email address - must be unique"
    )

    created_at: Optional[datetime] = Field(
        None,
        description="Creation timestamp, set once by the repository"
    )

    updated_at: Optional[datetime] = Field(
        None,
        description="Last update timestamp, refreshed on every update"
    )

    def __repr__(self) -> str:
        """String representation of the entity."""
        return f"<Entity(id={self.id}, name={self.name}, email={self.email})>"
