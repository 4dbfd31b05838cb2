"""Pydantic schemas for the HTTP boundary."""

from dailyforms.infrastructure.api.schemas.collector_schemas import (
    CollectorResponse,
    CreateCollectorRequest,
    CreatedResponse,
    CreateFieldRequest,
    FieldResponse,
)
from dailyforms.infrastructure.api.schemas.entry_schemas import (
    CreateEntryRequest,
    EntryResponse,
    EntryValueResponse,
)

__all__ = [
    "CollectorResponse",
    "CreateCollectorRequest",
    "CreateEntryRequest",
    "CreateFieldRequest",
    "CreatedResponse",
    "EntryResponse",
    "EntryValueResponse",
    "FieldResponse",
]
