"""Repositories for DailyForms tables.

Each repository wraps one table and works on the session it is given, so
several repositories can share one transaction.
"""

from dailyforms.infrastructure.persistence.repositories.collector_repository import (
    CollectorRepository,
)
from dailyforms.infrastructure.persistence.repositories.entry_repository import (
    EntryRepository,
)
from dailyforms.infrastructure.persistence.repositories.entry_value_repository import (
    EntryValueRepository,
)
from dailyforms.infrastructure.persistence.repositories.field_repository import (
    FieldRepository,
)
from dailyforms.infrastructure.persistence.repositories.file_repository import (
    FileRepository,
)

__all__ = [
    "CollectorRepository",
    "EntryRepository",
    "EntryValueRepository",
    "FieldRepository",
    "FileRepository",
]
