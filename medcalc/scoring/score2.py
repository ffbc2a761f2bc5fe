"""SCORE2 (European 10-year cardiovascular risk) module.

The score is the percentage risk read from the SCORE2 chart for the
patient's gender, smoking status, LDL band, age band and systolic blood
pressure band. Inputs outside the chart give the sentinel -1, reported
as unknown risk rather than an error.

Risk bands on the percentage:
- 0-5: low
- 6-10: moderate
- 11-20: high
- above 20: very high

Lipid-lowering treatment is considered above 10%.
"""

import logging
from collections.abc import Mapping
from typing import Any, Literal, Optional

from medcalc.scoring.base import BaseCalculator
from medcalc.scoring.result import CalculationResult, CalculatorDetails
from medcalc.scoring.score2_table import (
    RISK_NOT_FOUND,
    Score2Table,
    calculate_risk,
    get_age_group,
    get_bp_group,
    get_ldl_group,
    get_smoking_group,
    load_score2_table,
)
from medcalc.scoring.types import CalculatorMetadata, RiskLevel, ScoreRange
from medcalc.scoring.validation import BooleanField, ChoiceField, NumberField

logger = logging.getLogger(__name__)

RiskCategory = Literal["low", "moderate", "high", "very_high", "unknown"]

# -1 is the "not in chart" sentinel
SCORE_RANGE = ScoreRange(min=RISK_NOT_FOUND, max=100)

INTERVENTION_THRESHOLD = 10
HYPERTENSION_THRESHOLD = 140
AGE_RISK_THRESHOLD = 60

AGE_MESSAGE = "SCORE2 er for personer 40-89 år"

TABLE_MISSING_WARNING = "SCORE2 risikotabel er ikke konfigureret - risikoen kan ikke beregnes"


class Score2RiskFactors(CalculatorDetails):
    smoking: bool
    hypertension: bool
    age: bool


class Score2Details(CalculatorDetails):
    """SCORE2 risk factors and the chart cell used."""

    risk_factors: Score2RiskFactors
    cvd_risk_percentage: float
    risk_category: RiskCategory
    intervention_recommended: bool
    age_group: str
    bp_group: str
    ldl_group: str
    smoking_group: str


def get_risk_level(risk_percentage: float) -> RiskLevel:
    """Classify a tabulated risk percentage."""
    if risk_percentage == RISK_NOT_FOUND:
        return RiskLevel.UNKNOWN
    if risk_percentage <= 5:
        return RiskLevel.LOW
    if risk_percentage <= 10:
        return RiskLevel.MODERATE
    if risk_percentage <= 20:
        return RiskLevel.HIGH
    return RiskLevel.VERY_HIGH


class Score2Calculator(BaseCalculator):
    """SCORE2 cardiovascular risk calculator.

    Args:
        table: Risk chart to read from. Defaults to the configured table,
            loaded on first use.
    """

    metadata = CalculatorMetadata(
        name="SCORE2",
        version="1.0.0",
        description="SCORE2 - European cardiovascular risk assessment tool",
        category="general",
        references=(
            "SCORE2 risk prediction algorithms: new models to estimate 10-year risk "
            "of cardiovascular disease in Europe.",
        ),
    )
    score_range = SCORE_RANGE
    fields = (
        NumberField("age", 40, 89, label="Alder", range_message=AGE_MESSAGE),
        ChoiceField("gender", ("male", "female"), label="Køn", message="Køn skal være mand eller kvinde"),
        BooleanField("smoking", label="Rygning"),
        NumberField("systolicBP", 100, 200, label="Systolisk blodtryk", unit=" mmHg"),
        NumberField(
            "ldlCholesterol", 1, 10, integer=False, label="LDL-kolesterol", unit=" mmol/L"
        ),
    )

    def __init__(self, table: Optional[Score2Table] = None) -> None:
        self._table = table

    @property
    def table(self) -> Optional[Score2Table]:
        if self._table is None:
            return load_score2_table()
        return self._table

    def calculate_score(self, values: Mapping[str, Any]) -> CalculationResult:
        age = values["age"]
        gender = values["gender"]
        smoking = values["smoking"]
        systolic_bp = values["systolicBP"]
        ldl = values["ldlCholesterol"]

        table = self.table
        warnings = []
        if table is None:
            logger.warning("SCORE2 table not configured, risk reported as unknown")
            risk_percentage = RISK_NOT_FOUND
            warnings.append(TABLE_MISSING_WARNING)
        else:
            risk_percentage = calculate_risk(table, gender, age, smoking, systolic_bp, ldl)

        risk_level = get_risk_level(risk_percentage)
        intervention_recommended = risk_percentage > INTERVENTION_THRESHOLD

        if risk_level == RiskLevel.UNKNOWN:
            interpretation = "10-års kardiovaskulær risiko: ukendt"
        else:
            interpretation = f"10-års kardiovaskulær risiko: {risk_percentage}%"

        if intervention_recommended:
            recommendations = [
                "Livsstilsændringer",
                "Overvej lipidsænkende medicin",
                "Regelmæssig kontrol",
            ]
        else:
            recommendations = ["Livsstilsændringer", "Regelmæssig kontrol"]

        return CalculationResult(
            score=risk_percentage,
            interpretation=interpretation,
            recommendations=recommendations,
            risk_level=risk_level,
            warnings=warnings,
            details=Score2Details(
                risk_factors=Score2RiskFactors(
                    smoking=smoking,
                    hypertension=systolic_bp > HYPERTENSION_THRESHOLD,
                    age=age > AGE_RISK_THRESHOLD,
                ),
                cvd_risk_percentage=risk_percentage,
                risk_category=risk_level.value,
                intervention_recommended=intervention_recommended,
                age_group=get_age_group(age),
                bp_group=get_bp_group(systolic_bp),
                ldl_group=get_ldl_group(ldl),
                smoking_group=get_smoking_group(smoking),
            ),
        )


score2_calculator = Score2Calculator()
