"""Input validation for collectors, fields, and entry submissions.

Pure functions: every check returns a list of ValidationFailure (empty when
the input is acceptable) and never touches storage. Callers turn a non-empty
list into an InvalidInputError with ``raise_for_failures``.
"""

import json
import re
from collections.abc import Mapping, Sequence
from typing import Any

from dailyforms.core.exceptions import InvalidInputError, ValidationFailure
from dailyforms.domain.entities import UNLIMITED_OCCURRENCES, FieldType

# Shape only: 4-digit year, 2-digit month, 2-digit day. Calendar validity is not checked.
DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def raise_for_failures(failures: list[ValidationFailure]) -> None:
    """Raise InvalidInputError if any failure was collected."""
    if failures:
        raise InvalidInputError.from_failures(failures)


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


class InputValidator:
    """Validator for identifiers, dates, collector and field definitions."""

    @classmethod
    def validate_id(cls, value: Any, field: str = "id") -> list[ValidationFailure]:
        """Validate an identifier: a string, non-empty after trimming."""
        if _is_blank(value):
            return [
                ValidationFailure(
                    field=field,
                    message=f"{field} is required",
                    code=f"invalid_{field}",
                )
            ]
        return []

    @classmethod
    def validate_date(cls, value: Any, field: str = "date") -> list[ValidationFailure]:
        """Validate a calendar date string in YYYY-MM-DD form."""
        if _is_blank(value):
            return [
                ValidationFailure(field=field, message="Date is required", code="invalid_date")
            ]
        if not DATE_PATTERN.match(value):
            return [
                ValidationFailure(
                    field=field,
                    message="Invalid date format. Use YYYY-MM-DD",
                    code="invalid_date_format",
                )
            ]
        return []

    @classmethod
    def validate_max_occurrences(cls, value: Any) -> list[ValidationFailure]:
        """Validate a daily quota: the sentinel -1 or an integer >= 1.

        Booleans are rejected even though they are ints in Python.
        """
        if value is None:
            return []
        if (
            isinstance(value, bool)
            or not isinstance(value, int)
            or (value != UNLIMITED_OCCURRENCES and value < 1)
        ):
            return [
                ValidationFailure(
                    field="max_occurrences_per_day",
                    message="Max occurrences must be -1 (unlimited) or greater than 0",
                    code="invalid_max_occurrences",
                )
            ]
        return []

    @classmethod
    def validate_collector(cls, data: Mapping[str, Any]) -> list[ValidationFailure]:
        """Validate a collector definition.

        Args:
            data: Mapping with ``name``, optional ``description`` and
                optional ``max_occurrences_per_day``.

        Returns:
            List of validation failures (empty if valid).
        """
        failures: list[ValidationFailure] = []

        if _is_blank(data.get("name")):
            failures.append(
                ValidationFailure(
                    field="name",
                    message="Name is required and cannot be empty",
                    code="invalid_name",
                )
            )

        description = data.get("description")
        if description is not None and not isinstance(description, str):
            failures.append(
                ValidationFailure(
                    field="description",
                    message="Description must be a string",
                    code="invalid_description",
                )
            )

        failures.extend(cls.validate_max_occurrences(data.get("max_occurrences_per_day")))
        return failures

    @classmethod
    def validate_settings(cls, value: Any) -> list[ValidationFailure]:
        """Validate a field settings document.

        Accepts a mapping or JSON text decoding to an object. The mapping
        must itself be JSON-serializable.
        """
        if value is None:
            return []

        failure = ValidationFailure(
            field="settings",
            message="Settings must be a JSON object",
            code="invalid_settings",
        )
        if isinstance(value, str):
            try:
                value = json.loads(value)
            except json.JSONDecodeError:
                return [failure]
        if not isinstance(value, Mapping):
            return [failure]
        try:
            json.dumps(dict(value))
        except (TypeError, ValueError):
            return [failure]
        return []

    @classmethod
    def validate_field(cls, data: Mapping[str, Any]) -> list[ValidationFailure]:
        """Validate a field definition.

        Args:
            data: Mapping with ``label``, ``type``, optional ``required``
                and optional ``settings``.

        Returns:
            List of validation failures (empty if valid).
        """
        failures: list[ValidationFailure] = []

        if _is_blank(data.get("label")):
            failures.append(
                ValidationFailure(
                    field="label",
                    message="Label is required and cannot be empty",
                    code="invalid_label",
                )
            )

        field_type = data.get("type")
        if not isinstance(field_type, str) or field_type not in FieldType.values():
            failures.append(
                ValidationFailure(
                    field="type",
                    message=f"Type must be one of: {', '.join(FieldType.values())}",
                    code="invalid_type",
                )
            )

        required = data.get("required")
        if required is not None and not isinstance(required, bool):
            failures.append(
                ValidationFailure(
                    field="required",
                    message="Required must be a boolean",
                    code="invalid_required",
                )
            )

        failures.extend(cls.validate_settings(data.get("settings")))
        return failures

    @classmethod
    def validate_values(cls, values: Any) -> list[ValidationFailure]:
        """Validate the shape of an entry submission's values.

        Values must be a non-empty sequence of ``{"field_id", "value"}``
        mappings, with each field referenced at most once.
        """
        if isinstance(values, (str, bytes)) or not isinstance(values, Sequence) or not values:
            return [
                ValidationFailure(
                    field="values",
                    message="Values must be a non-empty array",
                    code="invalid_values",
                )
            ]

        failures: list[ValidationFailure] = []
        seen: set[str] = set()
        for index, item in enumerate(values):
            path = f"values[{index}].field_id"
            if not isinstance(item, Mapping):
                failures.append(
                    ValidationFailure(
                        field=f"values[{index}]",
                        message="Each value must be an object with fieldId and value",
                        code="invalid_values",
                    )
                )
                continue
            field_id = item.get("field_id")
            if _is_blank(field_id):
                failures.append(
                    ValidationFailure(field=path, message="Field ID is required", code="invalid_field_id")
                )
            elif field_id in seen:
                failures.append(
                    ValidationFailure(
                        field=path,
                        message=f"Duplicate value for field: {field_id}",
                        code="duplicate_field_id",
                    )
                )
            else:
                seen.add(field_id)
        return failures
