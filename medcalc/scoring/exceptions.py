"""Exceptions raised by the scoring engine.

Only programming and consistency errors are raised. Bad user input is
reported through ``ValidationResult`` and never raised.
"""

from medcalc.scoring.types import ScoreRange, ValidationError


class CalculatorError(Exception):
    """Base class for calculator failures."""


class CalculationValidationError(CalculatorError, ValueError):
    """``calculate`` was called with responses that fail validation."""

    def __init__(self, errors: list[ValidationError]) -> None:
        self.errors = list(errors)
        messages = ", ".join(error.message for error in self.errors)
        super().__init__(f"Validation failed: {messages}")


class ScoreRangeError(CalculatorError):
    """A computed score fell outside the calculator's declared range."""

    def __init__(self, score: float, score_range: ScoreRange) -> None:
        self.score = score
        self.score_range = score_range
        super().__init__(
            f"Calculated score {score} is outside valid range "
            f"{score_range.min}-{score_range.max}"
        )


class UnknownCalculatorType(CalculatorError, LookupError):
    """The calculator type key has never been heard of."""

    def __init__(self, calculator_type: str, valid_types: tuple[str, ...]) -> None:
        self.calculator_type = calculator_type
        super().__init__(
            f"Unknown calculator type: '{calculator_type}'. "
            f"Valid types are: {', '.join(valid_types)}"
        )


class CalculatorNotRegistered(CalculatorError, LookupError):
    """A documented calculator type is missing from the registry."""

    def __init__(self, calculator_type: str) -> None:
        self.calculator_type = calculator_type
        super().__init__(
            f"Calculator '{calculator_type}' should be available but is not "
            "found in registry. This is likely a bug."
        )


class CalculationFailedError(CalculatorError):
    """Wraps any calculator failure with the calculator type for traceability."""

    def __init__(self, calculator_type: str, cause: Exception) -> None:
        self.calculator_type = calculator_type
        self.cause = cause
        super().__init__(f"Calculation failed for {calculator_type}: {cause}")
