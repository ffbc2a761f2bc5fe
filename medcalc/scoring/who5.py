"""WHO-5 Well-Being Index scoring module.

Five items scored 0-5 over the last two weeks. The raw sum (0-25) is
multiplied by 4 to give a percentage score (0-100), which is reported.

Well-being bands on the percentage score:
- below 28: poor (depression likely, screening recommended)
- 28-49: below average
- 50-67: average
- 68-84: good
- 85-100: excellent
"""

from collections.abc import Mapping
from typing import Any, Literal

from medcalc.scoring.base import BaseCalculator
from medcalc.scoring.result import CalculationResult, CalculatorDetails
from medcalc.scoring.types import CalculatorMetadata, RiskLevel, ScoreRange
from medcalc.scoring.validation import question_fields

WellBeingLevel = Literal["poor", "below_average", "average", "good", "excellent"]

QUESTION_COUNT = 5
MAX_RAW_SCORE = 25
SCORE_RANGE = ScoreRange(min=0, max=100)

DEPRESSION_THRESHOLD = 28

# (exclusive upper bound, level)
WELL_BEING_BANDS: tuple[tuple[int, WellBeingLevel], ...] = (
    (DEPRESSION_THRESHOLD, "poor"),
    (50, "below_average"),
    (68, "average"),
    (85, "good"),
)

LEVEL_TEXT: dict[WellBeingLevel, str] = {
    "poor": "dårligt",
    "below_average": "under gennemsnit",
    "average": "gennemsnitligt",
    "good": "godt",
    "excellent": "fremragende",
}


class Who5Details(CalculatorDetails):
    """WHO-5 raw and percentage scores."""

    raw_score: int
    percentage_score: int
    well_being_level: WellBeingLevel
    depression_risk: bool
    screening_recommended: bool


def get_well_being_level(percentage: int) -> WellBeingLevel:
    """Map a percentage score to its well-being level."""
    for upper, level in WELL_BEING_BANDS:
        if percentage < upper:
            return level
    return "excellent"


class Who5Calculator(BaseCalculator):
    """WHO-5 Well-Being Index calculator."""

    metadata = CalculatorMetadata(
        name="WHO-5",
        version="1.0.0",
        description="WHO-5 Well-Being Index - Assessment of psychological well-being",
        category="psychology",
        references=(
            "Bech P, et al. Measuring well-being rather than the absence of "
            "distress symptoms.",
        ),
    )
    score_range = SCORE_RANGE
    fields = question_fields(QUESTION_COUNT, 0, 5, label="Score")

    def calculate_score(self, values: Mapping[str, Any]) -> CalculationResult:
        raw_score = sum(values[f"question{i}"] for i in range(1, QUESTION_COUNT + 1))
        percentage = round(raw_score / MAX_RAW_SCORE * 100)

        level = get_well_being_level(percentage)
        depression_risk = percentage < DEPRESSION_THRESHOLD

        if depression_risk:
            recommendations = [
                "Kontakt læge for depression screening",
                "Overvej psykologisk støtte",
            ]
        else:
            recommendations = [
                "Fortsæt gode vaner",
                "Regelmæssig motion og social kontakt",
            ]

        return CalculationResult(
            score=percentage,
            interpretation=f"Velbefindende niveau: {LEVEL_TEXT[level]}",
            recommendations=recommendations,
            risk_level=RiskLevel.HIGH if depression_risk else RiskLevel.LOW,
            details=Who5Details(
                raw_score=raw_score,
                percentage_score=percentage,
                well_being_level=level,
                depression_risk=depression_risk,
                screening_recommended=depression_risk,
            ),
        )


who5_calculator = Who5Calculator()
