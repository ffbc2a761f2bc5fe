"""Field-level validation rules for calculator responses.

Every calculator declares its closed set of response fields as a tuple of
rules. The rules are evaluated uniformly by ``validate_fields``, so all
calculators share one error-code vocabulary:

- REQUIRED: value missing or None
- INVALID_TYPE: value is not a finite number (or not whole, for integers)
- OUT_OF_RANGE: number outside the inclusive [min, max] bounds
- INVALID_CHOICE: value not one of an enumerated field's choices
- UNKNOWN_FIELD: key not declared by the calculator

Rules with a Danish ``label`` produce Danish messages for display next to
the form field. Rules without one fall back to the generic
``"<field> must be between <min> and <max>"`` messages.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union

from medcalc.scoring.types import ValidationCode, ValidationError


def _format_number(value: float) -> str:
    return f"{value:g}"


def coerce_number(value: Any) -> Optional[float]:
    """Coerce a raw form value to a finite number.

    Returns None when the value cannot be read as a number. Booleans are
    rejected even though Python treats them as integers.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(number):
        return None
    return number


def validate_numeric_range(
    field: str,
    value: Any,
    min_value: float,
    max_value: float,
    is_integer: bool = False,
    label: Optional[str] = None,
    unit: str = "",
    range_message: Optional[str] = None,
) -> list[ValidationError]:
    """Check a single numeric value against an inclusive range.

    Args:
        field: Response field name reported in the error
        value: Raw value as supplied by the caller
        min_value: Inclusive lower bound
        max_value: Inclusive upper bound
        is_integer: Whether the value must be a whole number
        label: Danish field label; selects Danish messages when given
        unit: Unit suffix appended to Danish bound messages (e.g. " mmHg")
        range_message: Fixed Danish message used for both bounds

    Returns:
        List with at most one ValidationError. Never raises.
    """
    if value is None:
        message = f"{label} skal udfyldes" if label else f"{field} is required"
        return [ValidationError(field, message, ValidationCode.REQUIRED.value, value)]

    number = coerce_number(value)
    if number is None:
        message = f"{label} skal være et tal" if label else f"{field} must be a number"
        return [ValidationError(field, message, ValidationCode.INVALID_TYPE.value, value)]

    if is_integer and not number.is_integer():
        message = (
            f"{label} skal være et helt tal" if label else f"{field} must be an integer"
        )
        return [ValidationError(field, message, ValidationCode.INVALID_TYPE.value, value)]

    if number < min_value or number > max_value:
        if range_message:
            message = range_message
        elif label and number < min_value:
            message = f"{label} skal være mindst {_format_number(min_value)}{unit}"
        elif label:
            message = f"{label} skal være højst {_format_number(max_value)}{unit}"
        else:
            message = (
                f"{field} must be between {_format_number(min_value)} "
                f"and {_format_number(max_value)}"
            )
        return [ValidationError(field, message, ValidationCode.OUT_OF_RANGE.value, value)]

    return []


@dataclass(frozen=True)
class NumberField:
    """A numeric response field with inclusive bounds."""

    name: str
    min_value: float
    max_value: float
    integer: bool = True
    required: bool = True
    label: Optional[str] = None
    unit: str = ""
    range_message: Optional[str] = None

    def check(self, value: Any) -> list[ValidationError]:
        if value is None and not self.required:
            return []
        return validate_numeric_range(
            self.name,
            value,
            self.min_value,
            self.max_value,
            is_integer=self.integer,
            label=self.label,
            unit=self.unit,
            range_message=self.range_message,
        )

    def normalize(self, value: Any) -> Union[int, float, None]:
        number = coerce_number(value)
        if number is None:
            return None
        if self.integer:
            return int(number)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return number


@dataclass(frozen=True)
class ChoiceField:
    """An enumerated response field (e.g. gender)."""

    name: str
    choices: tuple[str, ...]
    required: bool = True
    label: Optional[str] = None
    message: Optional[str] = None

    def check(self, value: Any) -> list[ValidationError]:
        if value is None:
            if not self.required:
                return []
            message = f"{self.label} skal udfyldes" if self.label else f"{self.name} is required"
            return [ValidationError(self.name, message, ValidationCode.REQUIRED.value, value)]

        if value not in self.choices:
            message = self.message or (
                f"{self.name} must be one of: {', '.join(self.choices)}"
            )
            return [
                ValidationError(self.name, message, ValidationCode.INVALID_CHOICE.value, value)
            ]
        return []

    def normalize(self, value: Any) -> Optional[str]:
        return value


@dataclass(frozen=True)
class BooleanField:
    """A yes/no response field."""

    name: str
    required: bool = True
    label: Optional[str] = None

    def check(self, value: Any) -> list[ValidationError]:
        if value is None:
            if not self.required:
                return []
            message = f"{self.label} skal udfyldes" if self.label else f"{self.name} is required"
            return [ValidationError(self.name, message, ValidationCode.REQUIRED.value, value)]

        if not isinstance(value, bool):
            message = (
                f"{self.label} skal være ja eller nej"
                if self.label
                else f"{self.name} must be a boolean"
            )
            return [ValidationError(self.name, message, ValidationCode.INVALID_TYPE.value, value)]
        return []

    def normalize(self, value: Any) -> Optional[bool]:
        return value


FieldRule = Union[NumberField, ChoiceField, BooleanField]


def question_fields(
    count: int,
    min_value: int,
    max_value: int,
    label: Optional[str] = None,
    prefix: str = "question",
) -> tuple[NumberField, ...]:
    """Build integer rules for numbered questionnaire items (question1..N)."""
    return tuple(
        NumberField(f"{prefix}{i}", min_value, max_value, label=label)
        for i in range(1, count + 1)
    )


def validate_fields(
    responses: Mapping[str, Any],
    fields: tuple[FieldRule, ...],
) -> list[ValidationError]:
    """Evaluate every rule against the responses.

    Keys not declared by any rule are reported as UNKNOWN_FIELD, since
    calculators accept a closed record of fields.
    """
    errors: list[ValidationError] = []
    declared = {rule.name for rule in fields}

    for key in responses:
        if key not in declared:
            errors.append(
                ValidationError(
                    str(key),
                    f"{key} is not a recognised field",
                    ValidationCode.UNKNOWN_FIELD.value,
                    responses[key],
                )
            )

    for rule in fields:
        errors.extend(rule.check(responses.get(rule.name)))

    return errors
