"""Pydantic schemas for collector and field endpoints.

Request bodies are permissive on purpose: shape and range checks belong to
the core validator, which reports classified failures.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CreateCollectorRequest(BaseModel):
    """Request body for creating a collector."""

    model_config = ConfigDict(populate_by_name=True)

    name: Any = None
    description: Any = None
    max_occurrences_per_day: Any = Field(default=None, alias="maxOccurrencesPerDay")

    def to_data(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "max_occurrences_per_day": self.max_occurrences_per_day,
        }


class CreateFieldRequest(BaseModel):
    """Request body for adding a field to a collector."""

    label: Any = None
    type: Any = None
    required: Any = None
    settings: Any = None

    def to_data(self) -> dict[str, Any]:
        return self.model_dump()


class CollectorResponse(BaseModel):
    """Collector in API responses."""

    id: str
    name: str
    description: str | None = None
    max_occurrences_per_day: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


class FieldResponse(BaseModel):
    """Field in API responses."""

    id: str
    collector_id: str
    label: str
    type: str
    required: bool
    settings: dict[str, Any]
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CreatedResponse(BaseModel):
    """Response for create endpoints."""

    id: str
    message: str
