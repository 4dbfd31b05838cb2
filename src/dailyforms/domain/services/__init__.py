"""Domain services for DailyForms.

Validation and coercion are pure; the stores own all storage access through
the injected database manager.
"""

from dailyforms.domain.services.input_validator import (
    DATE_PATTERN,
    InputValidator,
    raise_for_failures,
)
from dailyforms.domain.services.value_coercer import ValueCoercer
from dailyforms.domain.services.schema_service import SchemaStore
from dailyforms.domain.services.entry_service import EntryStore
from dailyforms.domain.services.collector_deletion_service import (
    CollectorDeletionService,
)

__all__ = [
    "CollectorDeletionService",
    "DATE_PATTERN",
    "EntryStore",
    "InputValidator",
    "SchemaStore",
    "ValueCoercer",
    "raise_for_failures",
]
