"""Unit tests for Westley Croup Score module."""

import pytest

from medcalc.scoring.types import RiskLevel
from medcalc.scoring.westley_croup import westley_croup_calculator


def answers(
    consciousness: int = 0,
    cyanosis: int = 0,
    stridor: int = 0,
    air_entry: int = 0,
    retractions: int = 0,
) -> dict[str, int]:
    return {
        "levelOfConsciousness": consciousness,
        "cyanosis": cyanosis,
        "stridor": stridor,
        "airEntry": air_entry,
        "retractions": retractions,
    }


class TestWestleyCroupScoring:
    """Tests for Westley croup score calculation."""

    def test_no_symptoms(self) -> None:
        """Test that no symptoms is mild croup."""
        result = westley_croup_calculator.calculate(answers())

        assert result.score == 0
        assert result.risk_level == RiskLevel.MILD
        assert result.interpretation == "Let croup"
        assert result.details.urgency == "observe"

    def test_severe_with_cyanosis_and_disorientation(self) -> None:
        """Test a severe presentation."""
        result = westley_croup_calculator.calculate(
            answers(consciousness=5, cyanosis=5, stridor=2, air_entry=1)
        )

        assert result.score == 13
        assert result.risk_level == RiskLevel.SEVERE
        assert result.details.urgency == "critical"
        assert result.details.consciousness_score == 5
        assert result.recommendations == ["Hospitalsindlæggelse", "Intensiv behandling"]

    @pytest.mark.parametrize(
        "responses,score,risk,urgency",
        [
            (answers(stridor=2), 2, RiskLevel.MILD, "observe"),
            (answers(stridor=1, air_entry=1, retractions=1), 3, RiskLevel.MODERATE, "treat"),
            (answers(stridor=2, retractions=3), 5, RiskLevel.MODERATE, "treat"),
            (answers(stridor=2, air_entry=2, retractions=2), 6, RiskLevel.SEVERE, "critical"),
        ],
    )
    def test_band_boundaries(
        self, responses: dict[str, int], score: int, risk: RiskLevel, urgency: str
    ) -> None:
        """Test mild/moderate/severe boundaries at 2, 3, 5 and 6."""
        result = westley_croup_calculator.calculate(responses)

        assert result.score == score
        assert result.risk_level == risk
        assert result.details.urgency == urgency

    def test_moderate_recommendations(self) -> None:
        """Test moderate croup treatment advice."""
        result = westley_croup_calculator.calculate(answers(stridor=2, air_entry=1))

        assert result.interpretation == "Moderat croup"
        assert result.recommendations == ["Nebuliseret epinephrin", "Steroid behandling"]

    def test_stridor_max(self) -> None:
        """Test that stridor is limited to 0-2."""
        result = westley_croup_calculator.validate(answers(stridor=3))
        assert result.messages == ["Stridor score skal være højst 2"]


class TestWestleyCroupMetadata:
    """Tests for Westley croup calculator metadata."""

    def test_description(self) -> None:
        """Test the published calculator description."""
        assert westley_croup_calculator.metadata.description == (
            "Westley Croup Score - Assessment of croup severity in pediatric patients"
        )
