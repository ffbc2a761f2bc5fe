"""GCS (Glasgow Coma Scale) scoring module.

The Glasgow Coma Scale assesses level of consciousness after brain injury
from three components:
- Eye opening: 1-4
- Verbal response: 1-5
- Motor response: 1-6

Total score ranges 3-15; lower scores mean more severe impairment.

Consciousness bands:
- 3-8: severe
- 9-12: moderate
- 13-14: mild
- 15: normal
"""

from collections.abc import Mapping
from typing import Any, Literal

from medcalc.scoring.base import BaseCalculator
from medcalc.scoring.result import CalculationResult, CalculatorDetails
from medcalc.scoring.types import CalculatorMetadata, RiskLevel, ScoreRange
from medcalc.scoring.validation import NumberField

Consciousness = Literal["severe", "moderate", "mild", "normal"]

SCORE_RANGE = ScoreRange(min=3, max=15)

SEVERE_MAX = 8
MODERATE_MAX = 12
NORMAL_SCORE = 15

CLINICAL_SIGNIFICANCE: dict[Consciousness, str] = {
    "severe": "Alvorlig bevidsthedspåvirkning - komatøs tilstand",
    "moderate": "Moderat bevidsthedspåvirkning - kraftigt nedsat bevidsthed",
    "mild": "Let bevidsthedspåvirkning - nedsat bevidsthed",
    "normal": "Normal bevidsthed",
}

INTERPRETATION_TEXT: dict[Consciousness, str] = {
    "severe": "Alvorlig bevidsthedspåvirkning",
    "moderate": "Moderat bevidsthedspåvirkning",
    "mild": "Let bevidsthedspåvirkning",
    "normal": "Normal bevidsthed",
}

RECOMMENDATIONS: dict[Consciousness, list[str]] = {
    "severe": [
        "Øjeblikkelig intensiv behandling påkrævet",
        "Neurolog konsultation akut",
        "Overvej intubation og mekanisk ventilation",
        "Kontinuerlig neurologisk overvågning",
        "CT-scanning af cerebrum inden for 1 time",
    ],
    "moderate": [
        "Tæt neurologisk observation påkrævet",
        "Neurolog vurdering inden for 4 timer",
        "CT-scanning af cerebrum",
        "Vurdering af behov for neurologisk intensiv behandling",
        "Hyppig GCS-kontrol (hver time)",
    ],
    "mild": [
        "Neurologisk observation i 24 timer",
        "Gentagen GCS-vurdering hver 2-4 timer",
        "CT-scanning ved klinisk forværring",
        "Patientpårørende instruktion om observationstegn",
    ],
    "normal": [
        "Fortsat observation anbefales",
        "Opmærksomhed på eventuelle neurologiske ændringer",
        "Follow-up efter behov",
    ],
}

GENERAL_RECOMMENDATIONS = [
    "Dokumenter bevidsthedsniveau regelmæssigt",
    "Vurder andre neurologiske fund",
]

RISK_LEVELS: dict[Consciousness, RiskLevel] = {
    "severe": RiskLevel.SEVERE,
    "moderate": RiskLevel.MODERATE,
    "mild": RiskLevel.MILD,
    "normal": RiskLevel.LOW,
}


class GcsDetails(CalculatorDetails):
    """GCS component scores and consciousness level."""

    eye_score: int
    verbal_score: int
    motor_score: int
    consciousness: Consciousness
    clinical_significance: str


def get_consciousness_level(score: int) -> Consciousness:
    """Determine consciousness level from the total GCS score."""
    if score <= SEVERE_MAX:
        return "severe"
    if score <= MODERATE_MAX:
        return "moderate"
    if score < NORMAL_SCORE:
        return "mild"
    return "normal"


class GcsCalculator(BaseCalculator):
    """Glasgow Coma Scale calculator."""

    metadata = CalculatorMetadata(
        name="GCS",
        version="1.0.0",
        description="Glasgow Coma Scale",
        category="general",
        estimated_duration=3,
        references=(
            "Teasdale G, Jennett B. Assessment of coma and impaired consciousness. "
            "Lancet. 1974;2:81-84.",
            "Teasdale GM, et al. The Glasgow Coma Scale at 40 years. "
            "Lancet Neurol. 2014;13:844-854.",
        ),
    )
    score_range = SCORE_RANGE
    fields = (
        NumberField("eyeOpening", 1, 4, label="Øjenåbning score"),
        NumberField("verbalResponse", 1, 5, label="Verbalt respons score"),
        NumberField("motorResponse", 1, 6, label="Motorisk respons score"),
    )

    def calculate_score(self, values: Mapping[str, Any]) -> CalculationResult:
        eye = values["eyeOpening"]
        verbal = values["verbalResponse"]
        motor = values["motorResponse"]
        score = eye + verbal + motor

        consciousness = get_consciousness_level(score)

        return CalculationResult(
            score=score,
            interpretation=f"GCS {score}/15: {INTERPRETATION_TEXT[consciousness]}",
            recommendations=RECOMMENDATIONS[consciousness] + GENERAL_RECOMMENDATIONS,
            risk_level=RISK_LEVELS[consciousness],
            details=GcsDetails(
                eye_score=eye,
                verbal_score=verbal,
                motor_score=motor,
                consciousness=consciousness,
                clinical_significance=CLINICAL_SIGNIFICANCE[consciousness],
            ),
        )


gcs_calculator = GcsCalculator()
