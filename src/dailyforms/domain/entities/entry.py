"""Entry and EntryValue entities.

An entry is one dated submission against a collector; each entry value
holds one field's canonical stored text.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class EntryValue:
    """One field's value within one entry.

    Attributes:
        id: Unique identifier (UUID string).
        entry_id: Owning entry ID.
        field_id: Referenced field ID.
        value_text: Canonical string form of the value.
        label: Label of the referenced field, when loaded with it.
        type: Type of the referenced field, when loaded with it.
    """

    id: str
    entry_id: str
    field_id: str
    value_text: str
    label: str | None = None
    type: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "field_id": self.field_id,
            "label": self.label,
            "type": self.type,
            "value": self.value_text,
        }


@dataclass
class Entry:
    """Entry entity.

    Attributes:
        id: Unique identifier (UUID string).
        collector_id: Collector this entry was submitted against.
        entry_date: Calendar date as YYYY-MM-DD.
        values: Field values in field definition order.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
        deleted_at: Soft-deletion timestamp, None while active.
    """

    id: str
    collector_id: str
    entry_date: str
    values: list[EntryValue] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "collector_id": self.collector_id,
            "entry_date": self.entry_date,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
            "values": [v.to_dict() for v in self.values],
        }
