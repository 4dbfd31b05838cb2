"""Value coercion for entry submissions.

Converts a raw submitted value into the canonical text stored in
``entry_values.value_text``, keyed by the field's declared type.
"""

import math
import re
from collections.abc import Callable
from typing import Any

from dailyforms.core.exceptions import InvalidValueError, ValidationFailure
from dailyforms.domain.entities import FieldType

# Integral floats below this magnitude render without an exponent.
_MAX_PLAIN_INTEGER = 1e21

# Plain decimal or exponent notation, ASCII digits only.
NUMBER_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


class ValueCoercer:
    """Coerces raw values to their stored text form, one rule per field type."""

    @classmethod
    def coerce_number(cls, value: Any, label: str) -> str:
        """Coerce a number field value.

        Empty or absent values are stored as ``"0"``. Anything else must
        parse as a finite number and is stored in canonical form: integral
        values without a fractional part (``"42.0"`` -> ``"42"``), others
        in shortest round-trip form.

        Raises:
            InvalidValueError: If the value is not numeric.
        """
        if _is_empty(value):
            return "0"

        if isinstance(value, str):
            value = value.strip()
            if not value:
                return "0"
            numeric = NUMBER_PATTERN.fullmatch(value) is not None
        else:
            numeric = isinstance(value, (int, float)) and not isinstance(value, bool)

        number: float | None = None
        if numeric:
            try:
                number = float(value)
            except (ValueError, OverflowError):
                number = None

        if number is None or not math.isfinite(number):
            raise InvalidValueError(
                f"Invalid number value for field: {label}",
                code="invalid_number_value",
                errors=[
                    ValidationFailure(
                        field=label,
                        message="Value must be a number",
                        code="invalid_number_value",
                    )
                ],
            )

        if number.is_integer() and abs(number) < _MAX_PLAIN_INTEGER:
            return str(int(number))
        return repr(number)

    @classmethod
    def coerce_checkbox(cls, value: Any, label: str) -> str:
        """Coerce a checkbox value: only ``True`` or ``"true"`` are checked."""
        return "true" if value is True or value == "true" else "false"

    @classmethod
    def coerce_text(cls, value: Any, label: str) -> str:
        """Coerce a text or textarea value to its string form."""
        if value is None:
            return ""
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    @classmethod
    def coerce(cls, value: Any, field_type: FieldType | str, label: str = "value") -> str:
        """Coerce a raw value according to a field type.

        Args:
            value: The submitted raw value.
            field_type: The field's declared type.
            label: Field label for error messages.

        Returns:
            The canonical stored text.
        """
        coercers: dict[FieldType, Callable[[Any, str], str]] = {
            FieldType.TEXT: cls.coerce_text,
            FieldType.TEXTAREA: cls.coerce_text,
            FieldType.NUMBER: cls.coerce_number,
            FieldType.CHECKBOX: cls.coerce_checkbox,
        }
        return coercers[FieldType(field_type)](value, label)
