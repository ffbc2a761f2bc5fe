"""Unit tests for LRTI scoring module."""

import pytest

from medcalc.scoring.lrti import get_risk_level, get_vital_signs_category, lrti_calculator
from medcalc.scoring.types import RiskLevel

NORMAL_VITALS = {
    "temperature": 37.0,
    "respiratoryRate": 16,
    "heartRate": 80,
    "bloodPressureSystolic": 125,
}


class TestLrtiScoring:
    """Tests for LRTI point accrual."""

    def test_normal_vitals(self) -> None:
        """Test that normal vital signs score zero."""
        result = lrti_calculator.calculate(NORMAL_VITALS)

        assert result.score == 0
        assert result.risk_level == RiskLevel.LOW
        assert result.interpretation == "LRTI risiko: lav"
        assert result.recommendations == ["Symptomatisk behandling", "Observation hjemme"]
        assert result.details.antibiotic_recommended is False
        assert result.details.vital_signs_category == "normal"

    def test_all_criteria_met(self) -> None:
        """Test fever, tachypnea, tachycardia and hypotension together."""
        result = lrti_calculator.calculate(
            {"temperature": 39, "respiratoryRate": 30, "heartRate": 110, "bloodPressureSystolic": 90}
        )

        assert result.score == 6
        assert result.risk_level == RiskLevel.VERY_HIGH
        assert result.interpretation == "LRTI risiko: meget høj"
        assert result.details.antibiotic_recommended is True
        assert result.details.vital_signs_category == "critical"

    def test_fever_alone_recommends_antibiotics(self) -> None:
        """Test that fever gives two points."""
        result = lrti_calculator.calculate({**NORMAL_VITALS, "temperature": 38.6})

        assert result.score == 2
        assert result.risk_level == RiskLevel.MODERATE
        assert result.details.antibiotic_recommended is True
        assert result.recommendations == ["Antibiotika behandling", "Symptomatisk behandling"]

    def test_thresholds_are_strict(self) -> None:
        """Test that values exactly at the thresholds give no points."""
        result = lrti_calculator.calculate(
            {"temperature": 38.5, "respiratoryRate": 25, "heartRate": 100, "bloodPressureSystolic": 100}
        )
        assert result.score == 0

    def test_validated_inputs_in_details(self) -> None:
        """Test that the scored vital signs are echoed in details."""
        payload = lrti_calculator.calculate({**NORMAL_VITALS, "heartRate": 101}).to_payload()

        assert payload["score"] == 1
        assert payload["details"]["validatedInputs"]["heartRate"] == 101
        assert payload["details"]["riskFactors"] == 1

    def test_optional_fields_accepted(self) -> None:
        """Test that oxygen saturation and consciousness may be supplied."""
        responses = {**NORMAL_VITALS, "oxygenSaturation": 94.5, "consciousnessLevel": 0}

        assert lrti_calculator.validate(responses).is_valid
        assert lrti_calculator.calculate(responses).score == 0

    def test_temperature_message(self) -> None:
        """Test the labelled temperature error with unit."""
        result = lrti_calculator.validate({**NORMAL_VITALS, "temperature": 46})

        assert result.messages == ["Temperatur skal være højst 45°C"]


class TestLrtiBands:
    """Tests for LRTI bands."""

    @pytest.mark.parametrize(
        "score,risk,category",
        [
            (0, RiskLevel.LOW, "normal"),
            (1, RiskLevel.LOW, "normal"),
            (2, RiskLevel.MODERATE, "concerning"),
            (3, RiskLevel.MODERATE, "concerning"),
            (4, RiskLevel.HIGH, "critical"),
            (5, RiskLevel.HIGH, "critical"),
            (6, RiskLevel.VERY_HIGH, "critical"),
        ],
    )
    def test_bands(self, score: int, risk: RiskLevel, category: str) -> None:
        """Test risk and vital-sign category boundaries."""
        assert get_risk_level(score) == risk
        assert get_vital_signs_category(score) == category
