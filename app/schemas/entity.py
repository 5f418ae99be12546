"""
Pydantic schemas for entity requests and responses.
Required-field and uniqueness rules are enforced by the repository, not here.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional
from datetime import datetime


class EntityBase(BaseModel):
    """Base entity schema with common fields."""

    name: str = Field(
        ...,
        max_length=255,
        description="Display name",
        examples=["Jane Doe"]
    )

    email: str = Field(
        ...,
        max_length=255,
        description="Email address, unique across entities",
        examples=["jane@example.com"]
    )

    @field_validator("name", "email")
    @classmethod
    def strip_whitespace(cls, v):
        """Trim surrounding whitespace."""
        return v.strip()


class EntityCreate(EntityBase):
    """Schema for creating a new entity."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Jane Doe",
                "email": "jane@example.com"
            }
        }
    )


class EntityUpdate(EntityBase):
    """Schema for replacing an existing entity. Both fields are required."""


class EntityResponse(BaseModel):
    """Schema for entity responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Entity identity")
    name: str
    email: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class EntityListResponse(BaseModel):
    """Schema for entity list responses."""

    entities: List[EntityResponse] = Field(..., description="Entities ordered by identity")
    total: int = Field(..., ge=0, description="Number of entities returned")
