"""LRTI (Lower Respiratory Tract Infection) risk scoring module.

Rule-based point accrual from vital signs:
- Temperature > 38.5 °C: +2
- Respiratory rate > 25/min: +1
- Heart rate > 100/min: +1
- Systolic blood pressure < 100 mmHg: +2

Total score ranges 0-6.

Risk bands:
- 0-1: low (vital signs normal)
- 2-3: moderate (concerning)
- 4-5: high (critical)
- 6: very high (critical)

Antibiotic treatment is recommended from 2 points.
Oxygen saturation and consciousness level may be recorded but do not
contribute points.
"""

from collections.abc import Mapping
from typing import Any, Literal

from medcalc.scoring.base import BaseCalculator
from medcalc.scoring.result import CalculationResult, CalculatorDetails
from medcalc.scoring.types import CalculatorMetadata, RiskLevel, ScoreRange
from medcalc.scoring.validation import NumberField

VitalSignsCategory = Literal["normal", "concerning", "critical"]

SCORE_RANGE = ScoreRange(min=0, max=6)

FEVER_THRESHOLD = 38.5
TACHYPNEA_THRESHOLD = 25
TACHYCARDIA_THRESHOLD = 100
HYPOTENSION_THRESHOLD = 100

ANTIBIOTIC_THRESHOLD = 2

RISK_TEXT = {
    RiskLevel.LOW: "lav",
    RiskLevel.MODERATE: "moderat",
    RiskLevel.HIGH: "høj",
    RiskLevel.VERY_HIGH: "meget høj",
}


class LrtiVitalSigns(CalculatorDetails):
    """Vital signs the score was computed from."""

    temperature: float
    respiratory_rate: int
    heart_rate: int
    blood_pressure_systolic: int


class LrtiDetails(CalculatorDetails):
    """LRTI risk factors and treatment flag."""

    risk_factors: int
    validated_inputs: LrtiVitalSigns
    vital_signs_category: VitalSignsCategory
    antibiotic_recommended: bool


def get_risk_level(score: int) -> RiskLevel:
    """Determine LRTI risk level from the point total."""
    if score <= 1:
        return RiskLevel.LOW
    if score <= 3:
        return RiskLevel.MODERATE
    if score <= 5:
        return RiskLevel.HIGH
    return RiskLevel.VERY_HIGH


def get_vital_signs_category(score: int) -> VitalSignsCategory:
    """Classify vital signs from the point total."""
    if score <= 1:
        return "normal"
    if score <= 3:
        return "concerning"
    return "critical"


class LrtiCalculator(BaseCalculator):
    """Lower respiratory tract infection risk calculator."""

    metadata = CalculatorMetadata(
        name="LRTI",
        version="1.0.0",
        description="Lower Respiratory Tract Infection - Risk assessment for respiratory infections",
        category="infection",
        references=("Pneumonia severity assessment guidelines and clinical protocols.",),
    )
    score_range = SCORE_RANGE
    fields = (
        NumberField("temperature", 30, 45, integer=False, label="Temperatur", unit="°C"),
        NumberField("respiratoryRate", 5, 60, label="Respirationsfrekvens", unit="/min"),
        NumberField("heartRate", 30, 250, label="Puls", unit="/min"),
        NumberField(
            "bloodPressureSystolic", 50, 250, label="Systolisk blodtryk", unit=" mmHg"
        ),
        NumberField(
            "oxygenSaturation",
            70,
            100,
            integer=False,
            required=False,
            label="Iltmætning",
            unit="%",
        ),
        NumberField(
            "consciousnessLevel", 0, 4, required=False, label="Bevidsthedsniveau"
        ),
    )

    def calculate_score(self, values: Mapping[str, Any]) -> CalculationResult:
        temperature = values["temperature"]
        respiratory_rate = values["respiratoryRate"]
        heart_rate = values["heartRate"]
        systolic = values["bloodPressureSystolic"]

        score = 0
        if temperature > FEVER_THRESHOLD:
            score += 2
        if respiratory_rate > TACHYPNEA_THRESHOLD:
            score += 1
        if heart_rate > TACHYCARDIA_THRESHOLD:
            score += 1
        if systolic < HYPOTENSION_THRESHOLD:
            score += 2

        risk_level = get_risk_level(score)

        if risk_level == RiskLevel.LOW:
            recommendations = ["Symptomatisk behandling", "Observation hjemme"]
        else:
            recommendations = ["Antibiotika behandling", "Symptomatisk behandling"]

        return CalculationResult(
            score=score,
            interpretation=f"LRTI risiko: {RISK_TEXT[risk_level]}",
            recommendations=recommendations,
            risk_level=risk_level,
            details=LrtiDetails(
                risk_factors=score,
                validated_inputs=LrtiVitalSigns(
                    temperature=temperature,
                    respiratory_rate=respiratory_rate,
                    heart_rate=heart_rate,
                    blood_pressure_systolic=systolic,
                ),
                vital_signs_category=get_vital_signs_category(score),
                antibiotic_recommended=score >= ANTIBIOTIC_THRESHOLD,
            ),
        )


lrti_calculator = LrtiCalculator()
