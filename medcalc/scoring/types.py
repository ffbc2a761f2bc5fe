"""Shared vocabulary for calculator configuration, validation and risk."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal, Optional

CalculatorCategory = Literal["psychology", "infection", "pregnancy", "general"]


class RiskLevel(str, Enum):
    """Coarse risk classification shared by every calculator."""

    MINIMAL = "minimal"
    LOW = "low"
    MILD = "mild"
    MEDIUM = "medium"
    MODERATE = "moderate"
    HIGH = "high"
    SEVERE = "severe"
    VERY_HIGH = "very_high"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ScoreRange:
    """Inclusive bounds on a calculator's total score."""

    min: int
    max: int

    def __contains__(self, score: float) -> bool:
        return self.min <= score <= self.max


@dataclass(frozen=True)
class CalculatorMetadata:
    """Static description of a calculator."""

    name: str
    version: str
    description: str
    category: CalculatorCategory
    estimated_duration: Optional[int] = None  # minutes
    references: tuple[str, ...] = ()


class ValidationCode(str, Enum):
    """Error codes reported by input validation."""

    REQUIRED = "REQUIRED"
    INVALID_TYPE = "INVALID_TYPE"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_CHOICE = "INVALID_CHOICE"
    UNKNOWN_FIELD = "UNKNOWN_FIELD"


@dataclass(frozen=True)
class ValidationError:
    """A single field-level validation failure."""

    field: str
    message: str
    code: str
    value: Any = None


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a set of responses."""

    is_valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @classmethod
    def from_errors(cls, errors: list[ValidationError]) -> "ValidationResult":
        return cls(is_valid=not errors, errors=list(errors))

    @property
    def messages(self) -> list[str]:
        return [error.message for error in self.errors]

    def errors_for(self, field_name: str) -> list[ValidationError]:
        """Get the errors reported for one field."""
        return [error for error in self.errors if error.field == field_name]
