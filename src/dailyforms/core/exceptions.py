"""Error kinds raised by the DailyForms core.

Every failure that crosses a store boundary is one of these classes.
Anything else reaching a caller is a bug.
"""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class ValidationFailure:
    """A single input validation failure."""

    field: str
    message: str
    code: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


class DailyFormsError(Exception):
    """Base class for all classified core errors."""

    code = "error"

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        if code is not None:
            self.code = code
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "code": self.code}


class InvalidInputError(DailyFormsError):
    """Raised when caller-supplied data is malformed or missing."""

    code = "invalid_input"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        errors: list[ValidationFailure] | None = None,
    ) -> None:
        self.errors = errors or []
        super().__init__(message, code)

    @classmethod
    def from_failures(cls, failures: list[ValidationFailure]) -> "InvalidInputError":
        """Build an error from validator output.

        The first failure provides the code; the message joins all of them.
        """
        message = "; ".join(f.message for f in failures)
        return cls(message, code=failures[0].code, errors=failures)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if self.errors:
            data["errors"] = [e.to_dict() for e in self.errors]
        return data


class InvalidValueError(InvalidInputError):
    """Raised when a submitted value cannot be coerced to its field type."""

    code = "invalid_value"


class NotFoundError(DailyFormsError):
    """Raised when a referenced entity is absent or soft-deleted."""

    code = "not_found"


class UnknownFieldError(DailyFormsError):
    """Raised when a value references a field outside the target collector."""

    code = "unknown_field"

    def __init__(self, field_id: str) -> None:
        self.field_id = field_id
        super().__init__(f"Invalid field ID: {field_id}")


class QuotaExceededError(DailyFormsError):
    """Raised when a collector's daily submission limit is reached."""

    code = "max_entries_reached"

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"Maximum entries per day ({limit}) reached")


class ConstraintViolationError(DailyFormsError):
    """Raised when the storage layer rejects a write on a constraint."""

    code = "constraint_violation"


class StorageError(DailyFormsError):
    """Raised on underlying I/O or connectivity failure."""

    code = "storage_error"
