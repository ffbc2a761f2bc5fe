"""AUDIT (Alcohol Use Disorders Identification Test) scoring module.

The AUDIT is the WHO 10-item alcohol screening questionnaire.
Each item is scored 0-4, total score ranges 0-40.

Domains:
- Q1-Q3: hazardous alcohol use (consumption)
- Q4-Q6: dependence symptoms
- Q7-Q10: harmful alcohol use

Screening conclusion:
- 0-7: no sign of alcohol dependence (low)
- 8-40: sign of alcohol dependence (high)

WHO risk zones, reported in the details:
- 0-7: low
- 8-15: medium
- 16-19: high
- 20-40: very high
"""

from collections.abc import Mapping
from typing import Any, Literal

from medcalc.scoring.base import BaseCalculator
from medcalc.scoring.result import CalculationResult, CalculatorDetails
from medcalc.scoring.types import CalculatorMetadata, RiskLevel, ScoreRange
from medcalc.scoring.validation import question_fields

AuditRiskCategory = Literal["low", "medium", "high", "very_high"]

QUESTION_COUNT = 10
SCORE_RANGE = ScoreRange(min=0, max=40)

# Screening cutoff for the interpretation text
HIGH_RISK_THRESHOLD = 8

CONSUMPTION_QUESTIONS = (1, 2, 3)
DEPENDENCE_QUESTIONS = (4, 5, 6)
HARM_QUESTIONS = (7, 8, 9, 10)

# WHO risk zones (inclusive upper bounds)
RISK_ZONES: list[tuple[int, AuditRiskCategory]] = [
    (7, "low"),
    (15, "medium"),
    (19, "high"),
    (40, "very_high"),
]

# Action per zone, worded as the screening recommendations
RECOMMENDED_ACTIONS: dict[AuditRiskCategory, str] = {
    "low": "Fortsæt med at overvåge dit alkoholforbrug",
    "medium": "Tal med din læge om dit alkoholforbrug",
    "high": "Overvej at søge professionel hjælp",
    "very_high": "Overvej at søge professionel hjælp",
}


class AuditDetails(CalculatorDetails):
    """AUDIT domain subscores and WHO risk zone."""

    consumption_score: int
    dependence_score: int
    harm_score: int
    risk_category: AuditRiskCategory
    recommended_action: str


def get_risk_category(total: int) -> AuditRiskCategory:
    """Determine the WHO risk zone from the total score."""
    for upper, category in RISK_ZONES:
        if total <= upper:
            return category
    return "very_high"


def _subscore(values: Mapping[str, Any], questions: tuple[int, ...]) -> int:
    return sum(values[f"question{i}"] for i in questions)


class AuditCalculator(BaseCalculator):
    """AUDIT alcohol screening calculator."""

    metadata = CalculatorMetadata(
        name="AUDIT",
        version="2.0.0",
        description="Alcohol Use Disorders Identification Test",
        category="psychology",
        estimated_duration=2,
        references=(
            "Babor, T. F., Higgins-Biddle, J. C., Saunders, J. B., & Monteiro, M. G. "
            "(2001). The Alcohol Use Disorders Identification Test. "
            "World Health Organization.",
        ),
    )
    score_range = SCORE_RANGE
    fields = question_fields(QUESTION_COUNT, 0, 4)

    def calculate_score(self, values: Mapping[str, Any]) -> CalculationResult:
        consumption = _subscore(values, CONSUMPTION_QUESTIONS)
        dependence = _subscore(values, DEPENDENCE_QUESTIONS)
        harm = _subscore(values, HARM_QUESTIONS)
        score = consumption + dependence + harm

        if score >= HIGH_RISK_THRESHOLD:
            interpretation = "Tegn på alkoholafhængighed (AUDIT Score ≥ 8)"
            risk_level = RiskLevel.HIGH
            recommendations = [
                "Overvej at søge professionel hjælp",
                "Tal med din læge om dit alkoholforbrug",
            ]
        else:
            interpretation = "Ikke tegn på alkoholafhængighed (AUDIT Score < 8)"
            risk_level = RiskLevel.LOW
            recommendations = ["Fortsæt med at overvåge dit alkoholforbrug"]

        category = get_risk_category(score)

        return CalculationResult(
            score=score,
            interpretation=interpretation,
            recommendations=recommendations,
            risk_level=risk_level,
            details=AuditDetails(
                consumption_score=consumption,
                dependence_score=dependence,
                harm_score=harm,
                risk_category=category,
                recommended_action=RECOMMENDED_ACTIONS[category],
            ),
        )


audit_calculator = AuditCalculator()
