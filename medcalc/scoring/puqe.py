"""PUQE (Pregnancy-Unique Quantification of Emesis) scoring module.

Three items scored 1-5:
- Nausea: hours of nausea per day
- Vomiting: vomiting episodes per day
- Retching: retching episodes per day

Total score ranges 3-15.
- 3-6: mild
- 7-12: moderate
- 13-15: severe (hyperemesis gravidarum risk)
"""

from collections.abc import Mapping
from typing import Any, Literal

from medcalc.scoring.base import BaseCalculator
from medcalc.scoring.result import CalculationResult, CalculatorDetails
from medcalc.scoring.types import CalculatorMetadata, RiskLevel, ScoreRange
from medcalc.scoring.validation import NumberField

PuqeSeverity = Literal["mild", "moderate", "severe"]

SCORE_RANGE = ScoreRange(min=3, max=15)

MILD_MAX = 6
MODERATE_MAX = 12


class PuqeDetails(CalculatorDetails):
    """PUQE item scores and hyperemesis flag."""

    nausea_hours: int
    vomiting_episodes: int
    retching_episodes: int
    severity: PuqeSeverity
    hyperemesis_risk: bool


class PuqeCalculator(BaseCalculator):
    """Nausea and vomiting in pregnancy calculator."""

    metadata = CalculatorMetadata(
        name="PUQE",
        version="1.0.0",
        description=(
            "Pregnancy-Unique Quantification of Emesis - Assessment of nausea and "
            "vomiting in pregnancy"
        ),
        category="pregnancy",
        references=(
            "Koren G, et al. The PUQE (pregnancy-unique quantification of emesis "
            "and nausea) score.",
        ),
    )
    score_range = SCORE_RANGE
    fields = (
        NumberField("nausea", 1, 5, label="Kvalme score"),
        NumberField("vomiting", 1, 5, label="Opkastning score"),
        NumberField("retching", 1, 5, label="Gylping score"),
    )

    def calculate_score(self, values: Mapping[str, Any]) -> CalculationResult:
        score = values["nausea"] + values["vomiting"] + values["retching"]
        hyperemesis_risk = False

        if score <= MILD_MAX:
            interpretation = "Mild graviditetskvalme"
            recommendations = ["Små hyppige måltider", "Undgå trigger foods"]
            severity: PuqeSeverity = "mild"
        elif score <= MODERATE_MAX:
            interpretation = "Moderat graviditetskvalme"
            recommendations = ["Kontakt jordemoder", "Overvej anti-emetika"]
            severity = "moderate"
        else:
            interpretation = "Alvorlig graviditetskvalme (Hyperemesis)"
            recommendations = [
                "Kontakt læge øjeblikkeligt",
                "Hospitalsindlæggelse kan være nødvendig",
            ]
            severity = "severe"
            hyperemesis_risk = True

        return CalculationResult(
            score=score,
            interpretation=interpretation,
            recommendations=recommendations,
            risk_level=RiskLevel(severity),
            details=PuqeDetails(
                nausea_hours=values["nausea"],
                vomiting_episodes=values["vomiting"],
                retching_episodes=values["retching"],
                severity=severity,
                hyperemesis_risk=hyperemesis_risk,
            ),
        )


puqe_calculator = PuqeCalculator()
