"""SQLAlchemy models for the DailyForms tables.

All models inherit from the Base class defined in database.py and are
created on startup outside production.
"""

from dailyforms.infrastructure.persistence.models.collector import CollectorModel
from dailyforms.infrastructure.persistence.models.entry import EntryModel
from dailyforms.infrastructure.persistence.models.entry_value import EntryValueModel
from dailyforms.infrastructure.persistence.models.field import FieldModel
from dailyforms.infrastructure.persistence.models.file import FileModel

__all__ = [
    "CollectorModel",
    "EntryModel",
    "EntryValueModel",
    "FieldModel",
    "FileModel",
]
