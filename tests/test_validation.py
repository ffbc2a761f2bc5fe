"""Unit tests for field validation rules.

Tests the validation primitives from medcalc.scoring.validation.
"""

import math

import pytest

from medcalc.scoring.types import ValidationCode, ValidationResult
from medcalc.scoring.validation import (
    BooleanField,
    ChoiceField,
    NumberField,
    coerce_number,
    question_fields,
    validate_fields,
    validate_numeric_range,
)


class TestCoerceNumber:
    """Tests for raw value coercion."""

    @pytest.mark.parametrize("value,expected", [(3, 3.0), (2.5, 2.5), ("4", 4.0), (" 7.5 ", 7.5)])
    def test_accepts_numbers_and_numeric_strings(self, value: object, expected: float) -> None:
        """Test that numbers and numeric strings are coerced."""
        assert coerce_number(value) == expected

    @pytest.mark.parametrize("value", [True, False, "abc", "", None, [], math.nan, math.inf])
    def test_rejects_non_numbers(self, value: object) -> None:
        """Test that booleans, NaN, infinity and text are rejected."""
        assert coerce_number(value) is None


class TestValidateNumericRange:
    """Tests for the numeric range primitive."""

    def test_valid_value_has_no_errors(self) -> None:
        """Test that an in-range value passes."""
        assert validate_numeric_range("question1", 2, 0, 4, is_integer=True) == []

    def test_bounds_are_inclusive(self) -> None:
        """Test that min and max themselves are accepted."""
        assert validate_numeric_range("q", 0, 0, 4) == []
        assert validate_numeric_range("q", 4, 0, 4) == []

    def test_missing_value_is_required(self) -> None:
        """Test that None reports REQUIRED."""
        errors = validate_numeric_range("question1", None, 0, 4)

        assert len(errors) == 1
        assert errors[0].code == ValidationCode.REQUIRED.value
        assert errors[0].message == "question1 is required"

    def test_non_numeric_is_invalid_type(self) -> None:
        """Test that text reports INVALID_TYPE."""
        errors = validate_numeric_range("question1", "many", 0, 4)

        assert errors[0].code == ValidationCode.INVALID_TYPE.value
        assert errors[0].value == "many"

    def test_fraction_rejected_for_integer_field(self) -> None:
        """Test that a whole number is required for integer fields."""
        errors = validate_numeric_range("question1", 2.5, 0, 4, is_integer=True)

        assert errors[0].code == ValidationCode.INVALID_TYPE.value
        assert errors[0].message == "question1 must be an integer"

    def test_fraction_allowed_for_float_field(self) -> None:
        """Test that fractions pass when integers are not required."""
        assert validate_numeric_range("temperature", 38.7, 30, 45) == []

    @pytest.mark.parametrize("value", [-1, 5])
    def test_out_of_range(self, value: int) -> None:
        """Test that values outside the bounds report OUT_OF_RANGE."""
        errors = validate_numeric_range("question1", value, 0, 4)

        assert errors[0].code == ValidationCode.OUT_OF_RANGE.value
        assert errors[0].message == "question1 must be between 0 and 4"

    def test_danish_messages_with_label(self) -> None:
        """Test that a label selects Danish messages with units."""
        low = validate_numeric_range(
            "systolicBP", 90, 100, 200, label="Systolisk blodtryk", unit=" mmHg"
        )
        high = validate_numeric_range(
            "systolicBP", 210, 100, 200, label="Systolisk blodtryk", unit=" mmHg"
        )
        missing = validate_numeric_range("systolicBP", None, 100, 200, label="Systolisk blodtryk")

        assert low[0].message == "Systolisk blodtryk skal være mindst 100 mmHg"
        assert high[0].message == "Systolisk blodtryk skal være højst 200 mmHg"
        assert missing[0].message == "Systolisk blodtryk skal udfyldes"

    def test_fixed_range_message(self) -> None:
        """Test that a fixed range message is used for both bounds."""
        message = "SCORE2 er for personer 40-89 år"
        errors = validate_numeric_range("age", 30, 40, 89, label="Alder", range_message=message)

        assert errors[0].message == message


class TestFieldRules:
    """Tests for declarative field rules."""

    def test_optional_number_may_be_missing(self) -> None:
        """Test that optional fields accept None."""
        rule = NumberField("oxygenSaturation", 70, 100, integer=False, required=False)
        assert rule.check(None) == []

    def test_optional_number_still_range_checked(self) -> None:
        """Test that optional fields are range checked when present."""
        rule = NumberField("oxygenSaturation", 70, 100, integer=False, required=False)
        assert rule.check(60)[0].code == ValidationCode.OUT_OF_RANGE.value

    def test_number_normalize(self) -> None:
        """Test that integer fields normalise to int and float fields keep fractions."""
        assert NumberField("q", 0, 4).normalize("3") == 3
        assert isinstance(NumberField("q", 0, 4).normalize(3.0), int)
        assert NumberField("t", 30, 45, integer=False).normalize("38.5") == 38.5

    def test_choice_field(self) -> None:
        """Test enumerated choices."""
        rule = ChoiceField("gender", ("male", "female"))

        assert rule.check("female") == []
        assert rule.check("x")[0].code == ValidationCode.INVALID_CHOICE.value
        assert rule.check(None)[0].code == ValidationCode.REQUIRED.value

    def test_boolean_field_rejects_numbers(self) -> None:
        """Test that 0/1 are not accepted as booleans."""
        rule = BooleanField("smoking")

        assert rule.check(True) == []
        assert rule.check(False) == []
        assert rule.check(1)[0].code == ValidationCode.INVALID_TYPE.value

    def test_question_fields(self) -> None:
        """Test numbered question rule generation."""
        rules = question_fields(3, 0, 4)

        assert [rule.name for rule in rules] == ["question1", "question2", "question3"]
        assert all(rule.integer for rule in rules)


class TestValidateFields:
    """Tests for evaluating a full set of rules."""

    RULES = question_fields(2, 0, 3)

    def test_valid_responses(self) -> None:
        """Test that complete valid responses pass."""
        assert validate_fields({"question1": 0, "question2": 3}, self.RULES) == []

    def test_unknown_field_rejected(self) -> None:
        """Test that undeclared keys are reported."""
        errors = validate_fields({"question1": 0, "question2": 1, "extra": 1}, self.RULES)

        assert len(errors) == 1
        assert errors[0].field == "extra"
        assert errors[0].code == ValidationCode.UNKNOWN_FIELD.value

    def test_reports_every_failing_field(self) -> None:
        """Test that all errors are collected, not just the first."""
        errors = validate_fields({"question1": 9}, self.RULES)

        assert {(e.field, e.code) for e in errors} == {
            ("question1", ValidationCode.OUT_OF_RANGE.value),
            ("question2", ValidationCode.REQUIRED.value),
        }

    def test_validation_result_helpers(self) -> None:
        """Test ValidationResult construction and lookups."""
        result = ValidationResult.from_errors(validate_fields({"question1": 9}, self.RULES))

        assert result.is_valid is False
        assert len(result.messages) == 2
        assert len(result.errors_for("question2")) == 1
        assert ValidationResult.from_errors([]).is_valid is True
