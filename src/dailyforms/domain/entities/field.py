"""Field entity and the closed set of field types.

A field is one typed input definition belonging to a collector. The set of
types is fixed; value coercion is keyed by it.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class FieldType(str, Enum):
    """Supported field types for collector forms."""

    TEXT = "text"
    NUMBER = "number"
    CHECKBOX = "checkbox"
    TEXTAREA = "textarea"

    @classmethod
    def values(cls) -> list[str]:
        return [t.value for t in cls]


@dataclass
class Field:
    """Field entity.

    Attributes:
        id: Unique identifier (UUID string).
        collector_id: Owning collector ID.
        label: Display label, non-empty.
        type: One of FieldType.
        required: Whether the form marks the field as required.
        settings: Free-form settings document (JSON object).
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
        deleted_at: Soft-deletion timestamp, None while active.
    """

    id: str
    collector_id: str
    label: str
    type: FieldType
    required: bool = True
    settings: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Field ID is required")
        if not self.label:
            raise ValueError("Field label is required")
        if not isinstance(self.type, FieldType):
            self.type = FieldType(self.type)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "collector_id": self.collector_id,
            "label": self.label,
            "type": self.type.value,
            "required": self.required,
            "settings": self.settings,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
