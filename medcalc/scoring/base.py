"""Calculator contract shared by every clinical score.

A calculator is stateless: it holds only immutable configuration (metadata,
score range and field rules), so one instance can serve any number of
concurrent calls.

``BaseCalculator.calculate`` enforces the two safety checks every
calculator inherits:

1. Responses must pass ``validate`` first; calling ``calculate`` with
   invalid responses is a programming error and raises
   ``CalculationValidationError``.
2. The computed score must lie within ``score_range``; a score outside it
   means the scoring function itself is wrong and raises
   ``ScoreRangeError``.

Concrete calculators only implement ``calculate_score``.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar, Protocol, runtime_checkable

from medcalc.scoring.exceptions import CalculationValidationError, ScoreRangeError
from medcalc.scoring.result import CalculationResult
from medcalc.scoring.types import (
    CalculatorMetadata,
    ScoreRange,
    ValidationCode,
    ValidationError,
    ValidationResult,
)
from medcalc.scoring.validation import FieldRule, validate_fields

logger = logging.getLogger(__name__)


@runtime_checkable
class MedicalCalculator(Protocol):
    """Capability every registered calculator provides."""

    metadata: CalculatorMetadata
    score_range: ScoreRange

    def validate(self, responses: Any) -> ValidationResult: ...

    def calculate(self, responses: Any) -> CalculationResult: ...

    def get_score_range(self) -> ScoreRange: ...


class BaseCalculator(ABC):
    """Validate-then-score template for clinical calculators."""

    metadata: ClassVar[CalculatorMetadata]
    score_range: ClassVar[ScoreRange]
    fields: ClassVar[tuple[FieldRule, ...]] = ()

    def validate(self, responses: Any) -> ValidationResult:
        """Validate raw responses against the declared field rules.

        Never raises; a non-mapping input yields a single INVALID_INPUT error.
        """
        if not isinstance(responses, Mapping):
            return ValidationResult.from_errors(
                [
                    ValidationError(
                        "responses",
                        "Responses must be a valid object",
                        ValidationCode.INVALID_INPUT.value,
                    )
                ]
            )

        return ValidationResult.from_errors(validate_fields(responses, self.fields))

    def calculate(self, responses: Any) -> CalculationResult:
        """Validate responses and compute the result.

        Raises:
            CalculationValidationError: If responses fail validation.
            ScoreRangeError: If the computed score is outside score_range.
        """
        validation = self.validate(responses)
        if not validation.is_valid:
            raise CalculationValidationError(validation.errors)

        return self.compute(self.normalize(responses))

    def compute(self, values: Mapping[str, Any]) -> CalculationResult:
        """Score already-normalised values and enforce the score range.

        This skips input validation; only the range check on the resulting
        score protects against bad values here.
        """
        result = self.calculate_score(values)

        if result.score not in self.score_range:
            logger.error(
                f"{self.metadata.name} produced score {result.score} outside "
                f"{self.score_range.min}-{self.score_range.max}"
            )
            raise ScoreRangeError(result.score, self.score_range)

        return result

    def normalize(self, responses: Mapping[str, Any]) -> dict[str, Any]:
        """Coerce validated responses into typed values keyed by field name."""
        return {rule.name: rule.normalize(responses.get(rule.name)) for rule in self.fields}

    def get_score_range(self) -> ScoreRange:
        """Get the valid score range for this calculator."""
        return self.score_range

    @abstractmethod
    def calculate_score(self, values: Mapping[str, Any]) -> CalculationResult:
        """Compute the calculator-specific result from normalised values."""
