"""IPSS (International Prostate Symptom Score) scoring module.

Seven urinary symptom items scored 0-5 (never to almost always) plus a
separate quality-of-life item scored 0-6 (delighted to terrible).

The symptom score (0-35) is the reported score:
- 0-7: mild
- 8-19: moderate
- 20-35: severe

Quality of life impact:
- 0-1: minimal
- 2-3: moderate
- 4-5: significant
- 6: severe
"""

from collections.abc import Mapping
from typing import Any, Literal

from medcalc.scoring.base import BaseCalculator
from medcalc.scoring.result import CalculationResult, CalculatorDetails
from medcalc.scoring.types import CalculatorMetadata, RiskLevel, ScoreRange
from medcalc.scoring.validation import NumberField

SymptomSeverity = Literal["mild", "moderate", "severe"]
QualityImpact = Literal["minimal", "moderate", "significant", "severe"]

SCORE_RANGE = ScoreRange(min=0, max=35)

SYMPTOM_QUESTIONS = (
    "incompleteEmptying",
    "frequency",
    "intermittency",
    "urgency",
    "weakStream",
    "straining",
    "nocturia",
)

SEVERITY_TEXT: dict[SymptomSeverity, str] = {
    "mild": "Lette",
    "moderate": "Moderate",
    "severe": "Svære",
}


class IpssDetails(CalculatorDetails):
    """IPSS symptom and quality-of-life breakdown."""

    symptom_score: int
    quality_of_life_score: int
    symptom_severity: SymptomSeverity
    quality_impact: QualityImpact


def get_symptom_severity(symptom_score: int) -> SymptomSeverity:
    """Determine symptom severity from the symptom score."""
    if symptom_score <= 7:
        return "mild"
    if symptom_score <= 19:
        return "moderate"
    return "severe"


def get_quality_impact(quality_of_life: int) -> QualityImpact:
    """Determine quality-of-life impact from the QoL item."""
    if quality_of_life <= 1:
        return "minimal"
    if quality_of_life <= 3:
        return "moderate"
    if quality_of_life <= 5:
        return "significant"
    return "severe"


class IpssCalculator(BaseCalculator):
    """International Prostate Symptom Score calculator."""

    metadata = CalculatorMetadata(
        name="IPSS",
        version="1.0.0",
        description=(
            "International Prostate Symptom Score - Assessment of prostate-related "
            "urinary symptoms"
        ),
        category="general",
        references=(
            "Barry MJ, et al. The American Urological Association symptom index for "
            "benign prostatic hyperplasia.",
        ),
    )
    score_range = SCORE_RANGE
    fields = tuple(
        NumberField(name, 0, 5, label="Score") for name in SYMPTOM_QUESTIONS
    ) + (NumberField("qualityOfLife", 0, 6, label="Livskvalitet score"),)

    def calculate_score(self, values: Mapping[str, Any]) -> CalculationResult:
        symptom_score = sum(values[name] for name in SYMPTOM_QUESTIONS)
        quality_of_life = values["qualityOfLife"]

        severity = get_symptom_severity(symptom_score)

        return CalculationResult(
            score=symptom_score,
            interpretation=f"{SEVERITY_TEXT[severity]} prostata symptomer",
            recommendations=["Diskuter med læge", "Overvej behandlingsmuligheder"],
            risk_level=RiskLevel(severity),
            details=IpssDetails(
                symptom_score=symptom_score,
                quality_of_life_score=quality_of_life,
                symptom_severity=severity,
                quality_impact=get_quality_impact(quality_of_life),
            ),
        )


ipss_calculator = IpssCalculator()
