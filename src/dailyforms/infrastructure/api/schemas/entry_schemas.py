"""Pydantic schemas for entry endpoints."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CreateEntryRequest(BaseModel):
    """Request body for submitting an entry.

    ``values`` is a list of ``{"fieldId": ..., "value": ...}`` objects.
    """

    model_config = ConfigDict(populate_by_name=True)

    collector_id: Any = Field(default=None, alias="collectorId")
    date: Any = None
    values: Any = None

    def to_values(self) -> Any:
        """Translate camelCase value objects to the store's keys.

        Anything that is not a list of objects is passed through unchanged
        for the validator to reject.
        """
        if not isinstance(self.values, list):
            return self.values
        return [
            {"field_id": item.get("fieldId", item.get("field_id")), "value": item.get("value")}
            if isinstance(item, dict)
            else item
            for item in self.values
        ]


class EntryValueResponse(BaseModel):
    """Field value in entry responses."""

    field_id: str
    label: str | None = None
    type: str | None = None
    value: str


class EntryResponse(BaseModel):
    """Entry in API responses."""

    id: str
    collector_id: str
    entry_date: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
    values: list[EntryValueResponse]
