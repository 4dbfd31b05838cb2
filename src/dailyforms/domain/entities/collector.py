"""Collector entity.

A collector is a named data-collection form. Its fields define the schema
of the entries submitted against it.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

# Quota sentinel meaning "unlimited entries per day"
UNLIMITED_OCCURRENCES = -1


@dataclass
class Collector:
    """Collector entity.

    Attributes:
        id: Unique identifier (UUID string).
        name: Form name, non-empty.
        description: Optional free text.
        max_occurrences_per_day: Positive daily quota, or -1 for unlimited.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
        deleted_at: Soft-deletion timestamp, None while active.
    """

    id: str
    name: str
    description: str | None = None
    max_occurrences_per_day: int = UNLIMITED_OCCURRENCES
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Collector ID is required")
        if not self.name:
            raise ValueError("Collector name is required")

    @property
    def is_unlimited(self) -> bool:
        return self.max_occurrences_per_day == UNLIMITED_OCCURRENCES

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "max_occurrences_per_day": self.max_occurrences_per_day,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
