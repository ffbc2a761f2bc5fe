"""Westley Croup Score module.

Five clinical signs in children with croup:
- Level of consciousness: 0 (normal) or 5 (disoriented)
- Cyanosis: 0 (none), 4 (with agitation) or 5 (at rest)
- Stridor: 0 (none), 1 (with agitation) or 2 (at rest)
- Air entry: 0 (normal), 1 (decreased) or 2 (markedly decreased)
- Retractions: 0 (none) to 3 (severe)

Total score ranges 0-14.
- 0-2: mild
- 3-5: moderate
- 6-14: severe
"""

from collections.abc import Mapping
from typing import Any, Literal

from medcalc.scoring.base import BaseCalculator
from medcalc.scoring.result import CalculationResult, CalculatorDetails
from medcalc.scoring.types import CalculatorMetadata, RiskLevel, ScoreRange
from medcalc.scoring.validation import NumberField

RespiratoryDistress = Literal["mild", "moderate", "severe"]
Urgency = Literal["observe", "treat", "critical"]

SCORE_RANGE = ScoreRange(min=0, max=14)

MILD_MAX = 2
MODERATE_MAX = 5


class WestleyCroupDetails(CalculatorDetails):
    """Croup severity and urgency of treatment."""

    consciousness_score: int
    respiratory_distress: RespiratoryDistress
    urgency: Urgency


class WestleyCroupCalculator(BaseCalculator):
    """Westley croup severity calculator."""

    metadata = CalculatorMetadata(
        name="Westley Croup Score",
        version="1.0.0",
        description="Westley Croup Score - Assessment of croup severity in pediatric patients",
        category="general",
        references=(
            "Westley CR, et al. Nebulized racemic epinephrine by IPPB for the "
            "treatment of croup.",
        ),
    )
    score_range = SCORE_RANGE
    fields = (
        NumberField("levelOfConsciousness", 0, 5, label="Bevidsthedsniveau score"),
        NumberField("cyanosis", 0, 5, label="Cyanose score"),
        NumberField("stridor", 0, 2, label="Stridor score"),
        NumberField("airEntry", 0, 2, label="Luftindstrømning score"),
        NumberField("retractions", 0, 3, label="Indtrækninger score"),
    )

    def calculate_score(self, values: Mapping[str, Any]) -> CalculationResult:
        score = (
            values["levelOfConsciousness"]
            + values["cyanosis"]
            + values["stridor"]
            + values["airEntry"]
            + values["retractions"]
        )

        if score <= MILD_MAX:
            interpretation = "Let croup"
            recommendations = ["Observation hjemme", "Kølig fugtig luft"]
            distress: RespiratoryDistress = "mild"
            urgency: Urgency = "observe"
        elif score <= MODERATE_MAX:
            interpretation = "Moderat croup"
            recommendations = ["Nebuliseret epinephrin", "Steroid behandling"]
            distress = "moderate"
            urgency = "treat"
        else:
            interpretation = "Alvorlig croup"
            recommendations = ["Hospitalsindlæggelse", "Intensiv behandling"]
            distress = "severe"
            urgency = "critical"

        return CalculationResult(
            score=score,
            interpretation=interpretation,
            recommendations=recommendations,
            risk_level=RiskLevel(distress),
            details=WestleyCroupDetails(
                consciousness_score=values["levelOfConsciousness"],
                respiratory_distress=distress,
                urgency=urgency,
            ),
        )


westley_croup_calculator = WestleyCroupCalculator()
