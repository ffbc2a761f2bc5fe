"""Tests for the calculator contract shared by every calculator.

Covers the validate-then-score flow of BaseCalculator and the properties
every registered calculator must satisfy.
"""

from collections.abc import Mapping
from typing import Any

import pytest

from medcalc.scoring.base import BaseCalculator, MedicalCalculator
from medcalc.scoring.exceptions import CalculationValidationError, ScoreRangeError
from medcalc.scoring.gcs import gcs_calculator
from medcalc.scoring.registry import CALCULATOR_REGISTRY
from medcalc.scoring.result import CalculationResult
from medcalc.scoring.types import CalculatorMetadata, RiskLevel, ScoreRange, ValidationCode
from medcalc.scoring.validation import NumberField

# One valid response set per calculator
VALID_RESPONSES: dict[str, dict[str, Any]] = {
    "audit": {f"question{i}": 1 for i in range(1, 11)},
    "danpss": {f"question{i}": 1 for i in range(1, 13)},
    "epds": {f"question{i}": 1 for i in range(1, 11)},
    "gcs": {"eyeOpening": 3, "verbalResponse": 4, "motorResponse": 5},
    "ipss": {
        "incompleteEmptying": 1,
        "frequency": 2,
        "intermittency": 0,
        "urgency": 1,
        "weakStream": 3,
        "straining": 0,
        "nocturia": 2,
        "qualityOfLife": 3,
    },
    "puqe": {"nausea": 2, "vomiting": 3, "retching": 1},
    "westleycroupscore": {
        "levelOfConsciousness": 0,
        "cyanosis": 0,
        "stridor": 1,
        "airEntry": 1,
        "retractions": 1,
    },
    "who5": {f"question{i}": 3 for i in range(1, 6)},
    "lrti": {
        "temperature": 38.0,
        "respiratoryRate": 20,
        "heartRate": 90,
        "bloodPressureSystolic": 120,
    },
    "score2": {
        "age": 55,
        "gender": "female",
        "smoking": False,
        "systolicBP": 130,
        "ldlCholesterol": 3.5,
    },
}


class FixedScoreCalculator(BaseCalculator):
    """Test calculator returning whatever its single field says."""

    metadata = CalculatorMetadata(
        name="Fixed",
        version="0.0.1",
        description="Returns the input as score",
        category="general",
    )
    score_range = ScoreRange(min=0, max=10)
    fields = (NumberField("value", 0, 100),)

    def calculate_score(self, values: Mapping[str, Any]) -> CalculationResult:
        return CalculationResult(
            score=values["value"],
            interpretation="fixed",
            recommendations=[],
            risk_level=RiskLevel.LOW,
        )


class TestBaseCalculator:
    """Tests for the validate/calculate/compute flow."""

    def test_non_mapping_input_is_invalid(self) -> None:
        """Test that non-object input reports INVALID_INPUT."""
        result = gcs_calculator.validate([4, 5, 6])

        assert result.is_valid is False
        assert result.errors[0].code == ValidationCode.INVALID_INPUT.value

    def test_calculate_raises_with_joined_messages(self) -> None:
        """Test that calculate refuses invalid responses."""
        with pytest.raises(CalculationValidationError, match="^Validation failed: ") as exc_info:
            gcs_calculator.calculate({"eyeOpening": 7, "verbalResponse": 5})

        messages = [error.message for error in exc_info.value.errors]
        assert len(messages) == 2
        assert str(exc_info.value) == f"Validation failed: {', '.join(messages)}"

    def test_validation_error_is_value_error(self) -> None:
        """Test that validation failures can be caught as ValueError."""
        with pytest.raises(ValueError):
            gcs_calculator.calculate({})

    def test_gcs_out_of_range_field_is_reported(self) -> None:
        """Test that validate flags eyeOpening=7 as OUT_OF_RANGE."""
        result = gcs_calculator.validate(
            {"eyeOpening": 7, "verbalResponse": 5, "motorResponse": 6}
        )

        assert result.is_valid is False
        errors = result.errors_for("eyeOpening")
        assert errors[0].code == ValidationCode.OUT_OF_RANGE.value

    def test_unvalidated_scoring_trips_range_check(self) -> None:
        """Test that forcing invalid values through compute fails the range check."""
        with pytest.raises(ScoreRangeError, match="Calculated score 18 is outside valid range 3-15"):
            gcs_calculator.compute({"eyeOpening": 7, "verbalResponse": 5, "motorResponse": 6})

    def test_range_check_on_buggy_scoring(self) -> None:
        """Test that a scoring function exceeding its range is caught."""
        calculator = FixedScoreCalculator()

        assert calculator.calculate({"value": 10}).score == 10
        with pytest.raises(ScoreRangeError) as exc_info:
            calculator.calculate({"value": 11})
        assert exc_info.value.score == 11

    def test_responses_are_not_mutated(self) -> None:
        """Test that calculate leaves the caller's mapping untouched."""
        responses = {"eyeOpening": "4", "verbalResponse": 5, "motorResponse": 6}
        snapshot = dict(responses)

        gcs_calculator.calculate(responses)

        assert responses == snapshot

    def test_numeric_strings_are_scored(self) -> None:
        """Test that numeric strings from form inputs are coerced."""
        result = gcs_calculator.calculate(
            {"eyeOpening": "4", "verbalResponse": "5", "motorResponse": "6"}
        )
        assert result.score == 15


class TestCalculatorProperties:
    """Properties every registered calculator must satisfy."""

    @pytest.mark.parametrize("calculator_type", sorted(CALCULATOR_REGISTRY))
    def test_implements_protocol(self, calculator_type: str) -> None:
        """Test that each calculator satisfies the MedicalCalculator protocol."""
        assert isinstance(CALCULATOR_REGISTRY[calculator_type], MedicalCalculator)

    @pytest.mark.parametrize("calculator_type", sorted(CALCULATOR_REGISTRY))
    def test_sample_responses_are_valid(self, calculator_type: str) -> None:
        """Test that the sample responses pass validation."""
        calculator = CALCULATOR_REGISTRY[calculator_type]
        result = calculator.validate(VALID_RESPONSES[calculator_type])
        assert result.is_valid, result.messages

    @pytest.mark.parametrize("calculator_type", sorted(CALCULATOR_REGISTRY))
    def test_deterministic(self, calculator_type: str) -> None:
        """Test that calculating twice gives identical results."""
        calculator = CALCULATOR_REGISTRY[calculator_type]
        responses = VALID_RESPONSES[calculator_type]

        assert calculator.calculate(responses) == calculator.calculate(responses)

    @pytest.mark.parametrize("calculator_type", sorted(CALCULATOR_REGISTRY))
    def test_score_within_range(self, calculator_type: str) -> None:
        """Test that the score lies within the declared range."""
        calculator = CALCULATOR_REGISTRY[calculator_type]
        score = calculator.calculate(VALID_RESPONSES[calculator_type]).score

        assert score in calculator.get_score_range()

    @pytest.mark.parametrize(
        "calculator_type,field_name",
        [
            (calculator_type, rule.name)
            for calculator_type, calculator in sorted(CALCULATOR_REGISTRY.items())
            for rule in calculator.fields
            if isinstance(rule, NumberField)
        ],
    )
    def test_field_bounds_are_enforced(self, calculator_type: str, field_name: str) -> None:
        """Test one unit below min and above max report OUT_OF_RANGE."""
        calculator = CALCULATOR_REGISTRY[calculator_type]
        rule = next(r for r in calculator.fields if r.name == field_name)

        for value in (rule.min_value - 1, rule.max_value + 1):
            responses = {**VALID_RESPONSES[calculator_type], field_name: value}
            errors = calculator.validate(responses).errors_for(field_name)
            assert [e.code for e in errors] == [ValidationCode.OUT_OF_RANGE.value]

    @pytest.mark.parametrize(
        "calculator_type,field_name",
        [
            (calculator_type, rule.name)
            for calculator_type, calculator in sorted(CALCULATOR_REGISTRY.items())
            for rule in calculator.fields
            if rule.required
        ],
    )
    def test_missing_required_field(self, calculator_type: str, field_name: str) -> None:
        """Test that a missing required field reports REQUIRED."""
        calculator = CALCULATOR_REGISTRY[calculator_type]
        responses = {
            k: v for k, v in VALID_RESPONSES[calculator_type].items() if k != field_name
        }

        errors = calculator.validate(responses).errors_for(field_name)
        assert [e.code for e in errors] == [ValidationCode.REQUIRED.value]

    @pytest.mark.parametrize("calculator_type", sorted(CALCULATOR_REGISTRY))
    def test_payload_uses_camel_case(self, calculator_type: str) -> None:
        """Test that results serialise with camelCase keys."""
        payload = CALCULATOR_REGISTRY[calculator_type].calculate(
            VALID_RESPONSES[calculator_type]
        ).to_payload()

        assert "riskLevel" in payload
        assert "risk_level" not in payload
        assert isinstance(payload["details"], dict)
        assert payload["details"]
