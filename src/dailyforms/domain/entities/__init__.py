"""Domain entities for DailyForms."""

from dailyforms.domain.entities.collector import UNLIMITED_OCCURRENCES, Collector
from dailyforms.domain.entities.entry import Entry, EntryValue
from dailyforms.domain.entities.field import Field, FieldType

__all__ = [
    "Collector",
    "Entry",
    "EntryValue",
    "Field",
    "FieldType",
    "UNLIMITED_OCCURRENCES",
]
