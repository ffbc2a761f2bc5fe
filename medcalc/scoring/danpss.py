"""DANPSS (Danish Depression and Anxiety Symptom Scale) scoring module.

A screening instrument for depression and anxiety symptoms developed for
Danish healthcare settings. Each of the 12 items is scored 0-3.

Subscales:
- Depression: items 1-7, range 0-21
- Anxiety: items 8-12, range 0-15
- Total: depression + anxiety, range 0-36

Depression severity: 0-5 none, 6-10 mild, 11-15 moderate, 16-21 severe.
Anxiety severity: 0-3 none, 4-6 mild, 7-9 moderate, 10-15 severe.
Combined risk: 0-8 low, 9-16 medium, 17-36 high.
"""

from collections.abc import Mapping
from typing import Any, Literal

from medcalc.scoring.base import BaseCalculator
from medcalc.scoring.result import CalculationResult, CalculatorDetails
from medcalc.scoring.types import CalculatorMetadata, RiskLevel, ScoreRange
from medcalc.scoring.validation import question_fields

SeverityLevel = Literal["none", "mild", "moderate", "severe"]

QUESTION_COUNT = 12
SCORE_RANGE = ScoreRange(min=0, max=36)

DEPRESSION_QUESTIONS = (1, 2, 3, 4, 5, 6, 7)
ANXIETY_QUESTIONS = (8, 9, 10, 11, 12)

# Inclusive upper bounds for none/mild/moderate; anything above is severe
DEPRESSION_THRESHOLDS = (5, 10, 15)
ANXIETY_THRESHOLDS = (3, 6, 9)

# Inclusive upper bounds for low/medium; anything above is high
COMBINED_LOW = 8
COMBINED_MEDIUM = 16

SEVERITY_TEXT: dict[SeverityLevel, str] = {
    "none": "ingen/minimal",
    "mild": "let",
    "moderate": "moderat",
    "severe": "svær",
}


class DanpssDetails(CalculatorDetails):
    """DANPSS subscale scores and severities."""

    depression_score: int
    anxiety_score: int
    depression_level: SeverityLevel
    anxiety_level: SeverityLevel
    combined_risk: RiskLevel


def _severity(score: int, thresholds: tuple[int, int, int]) -> SeverityLevel:
    none, mild, moderate = thresholds
    if score <= none:
        return "none"
    if score <= mild:
        return "mild"
    if score <= moderate:
        return "moderate"
    return "severe"


def get_depression_level(score: int) -> SeverityLevel:
    """Determine depression severity from the depression subscale."""
    return _severity(score, DEPRESSION_THRESHOLDS)


def get_anxiety_level(score: int) -> SeverityLevel:
    """Determine anxiety severity from the anxiety subscale."""
    return _severity(score, ANXIETY_THRESHOLDS)


def get_combined_risk(total: int) -> RiskLevel:
    """Determine combined risk from the total score."""
    if total <= COMBINED_LOW:
        return RiskLevel.LOW
    if total <= COMBINED_MEDIUM:
        return RiskLevel.MEDIUM
    return RiskLevel.HIGH


def build_recommendations(
    depression_level: SeverityLevel,
    anxiety_level: SeverityLevel,
    combined_risk: RiskLevel,
) -> list[str]:
    """Collect Danish recommendations for the subscale severities."""
    recommendations: list[str] = []

    if combined_risk == RiskLevel.LOW:
        recommendations.append("Fortsat selvovervågning af symptomer")
        recommendations.append("Fokus på sunde livsstilsvaner")

    if depression_level == "mild":
        recommendations.append("Overvej psykoedukation og selvhjælpsressourcer")
        recommendations.append("Øget fysisk aktivitet og sociale aktiviteter")
    elif depression_level == "moderate":
        recommendations.append("Psykologisk behandling anbefales")
        recommendations.append("Overvej kognitiv adfærdsterapi (KBT)")
    elif depression_level == "severe":
        recommendations.append("Øjeblikkelig psykiatrisk vurdering påkrævet")
        recommendations.append("Overvej medicinsk behandling kombineret med psykoterapi")

    if anxiety_level == "mild":
        recommendations.append("Afslapningsteknikker og mindfulness")
        recommendations.append("Stresshåndtering og livsstilsændringer")
    elif anxiety_level == "moderate":
        recommendations.append("Angsthåndtering gennem terapi")
        recommendations.append("Gradvis eksponering for angstudløsende situationer")
    elif anxiety_level == "severe":
        recommendations.append("Specialiseret angstbehandling påkrævet")
        recommendations.append("Overvej medicinsk intervention")

    if combined_risk == RiskLevel.HIGH:
        recommendations.append("Regelmæssig opfølgning med sundhedspersonale")
        recommendations.append("Overvej henvisning til psykiatrisk speciallæge")
        recommendations.append("Vurdering af selvmordsrisiko")

    if not recommendations:
        recommendations.append("Konsulter din læge for yderligere vurdering")
        recommendations.append("Fortsat opfølgning anbefales")

    return recommendations


class DanpssCalculator(BaseCalculator):
    """DANPSS depression and anxiety calculator."""

    metadata = CalculatorMetadata(
        name="DANPSS",
        version="1.0.0",
        description="Danish Depression and Anxiety Symptom Scale",
        category="psychology",
        estimated_duration=7,
        references=(
            "Olsen, L.R., et al. The internal and external validity of the Major "
            "Depression Inventory. Psychol Med. 2003;33:351-362.",
            "Danish Health Authority. Clinical guidelines for depression and "
            "anxiety screening. 2020.",
        ),
    )
    score_range = SCORE_RANGE
    fields = question_fields(QUESTION_COUNT, 0, 3)

    def calculate_score(self, values: Mapping[str, Any]) -> CalculationResult:
        depression_score = sum(values[f"question{i}"] for i in DEPRESSION_QUESTIONS)
        anxiety_score = sum(values[f"question{i}"] for i in ANXIETY_QUESTIONS)
        total = depression_score + anxiety_score

        depression_level = get_depression_level(depression_score)
        anxiety_level = get_anxiety_level(anxiety_score)
        combined_risk = get_combined_risk(total)

        interpretation = (
            f"Depression: {SEVERITY_TEXT[depression_level]}, "
            f"Angst: {SEVERITY_TEXT[anxiety_level]}"
        )

        return CalculationResult(
            score=total,
            interpretation=interpretation,
            recommendations=build_recommendations(
                depression_level, anxiety_level, combined_risk
            ),
            risk_level=combined_risk,
            details=DanpssDetails(
                depression_score=depression_score,
                anxiety_score=anxiety_score,
                depression_level=depression_level,
                anxiety_level=anxiety_level,
                combined_risk=combined_risk,
            ),
        )


danpss_calculator = DanpssCalculator()
