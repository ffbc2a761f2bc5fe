"""EPDS (Edinburgh Postnatal Depression Scale) scoring module.

The EPDS is a 10-item screening instrument for perinatal depression.
Each item is scored 0-3, total score ranges 0-30.

Risk bands:
- 0-9: minimal
- 10-12: mild
- 13-30: moderate, or severe with urgent referral when item 10 is positive

Item 10 asks about thoughts of self-harm and is flagged whenever it is
endorsed, regardless of the total.
"""

from collections.abc import Mapping
from typing import Any, Literal

from medcalc.scoring.base import BaseCalculator
from medcalc.scoring.result import CalculationResult, CalculatorDetails
from medcalc.scoring.types import CalculatorMetadata, RiskLevel, ScoreRange
from medcalc.scoring.validation import question_fields

EpdsCategory = Literal["minimal", "mild", "moderate", "severe"]

QUESTION_COUNT = 10
SCORE_RANGE = ScoreRange(min=0, max=30)

MINIMAL_MAX = 9
MILD_MAX = 12

SELF_HARM_WARNING = (
    "Spørgsmål 10 indikerer tanker om selvskade - vurder behov for akut henvisning"
)


class EpdsDetails(CalculatorDetails):
    """EPDS category and self-harm flags."""

    depression_risk: RiskLevel
    suicidal_thoughts: bool
    urgent_referral_needed: bool
    score_category: EpdsCategory


class EpdsCalculator(BaseCalculator):
    """Edinburgh Postnatal Depression Scale calculator."""

    metadata = CalculatorMetadata(
        name="EPDS",
        version="1.0.0",
        description="Edinburgh Postnatal Depression Scale - Screening for perinatal depression",
        category="pregnancy",
        references=(
            "Cox, J.L., Holden, J.M., and Sagovsky, R. 1987. Detection of postnatal depression.",
        ),
    )
    score_range = SCORE_RANGE
    fields = question_fields(QUESTION_COUNT, 0, 3, label="Score")

    def calculate_score(self, values: Mapping[str, Any]) -> CalculationResult:
        score = sum(values[f"question{i}"] for i in range(1, QUESTION_COUNT + 1))
        suicidal_thoughts = values["question10"] > 0
        urgent_referral_needed = False

        if score <= MINIMAL_MAX:
            interpretation = "Minimal risiko for postnatal depression"
            recommendations = ["Fortsat observation", "Støt fra familie og venner"]
            category: EpdsCategory = "minimal"
        elif score <= MILD_MAX:
            interpretation = "Mild risiko for postnatal depression"
            recommendations = ["Tal med sundhedsplejerske", "Overvej støttegrupper"]
            category = "mild"
        else:
            interpretation = "Moderat til høj risiko for postnatal depression"
            if suicidal_thoughts:
                recommendations = [
                    "Søg øjeblikkelig hjælp",
                    "Kontakt læge eller akutmodtagelse",
                ]
                category = "severe"
                urgent_referral_needed = True
            else:
                recommendations = ["Kontakt læge", "Psykologisk vurdering anbefales"]
                category = "moderate"

        risk_level = RiskLevel(category)

        return CalculationResult(
            score=score,
            interpretation=interpretation,
            recommendations=recommendations,
            risk_level=risk_level,
            details=EpdsDetails(
                depression_risk=risk_level,
                suicidal_thoughts=suicidal_thoughts,
                urgent_referral_needed=urgent_referral_needed,
                score_category=category,
            ),
            warnings=[SELF_HARM_WARNING] if suicidal_thoughts else [],
        )


epds_calculator = EpdsCalculator()
