"""Unit tests for PUQE scoring module."""

from medcalc.scoring.puqe import puqe_calculator
from medcalc.scoring.types import RiskLevel


class TestPuqeScoring:
    """Tests for PUQE score calculation."""

    def test_minimum_is_mild(self) -> None:
        """Test minimum score (all items = 1)."""
        result = puqe_calculator.calculate({"nausea": 1, "vomiting": 1, "retching": 1})

        assert result.score == 3
        assert result.risk_level == RiskLevel.MILD
        assert result.interpretation == "Mild graviditetskvalme"
        assert result.details.hyperemesis_risk is False

    def test_six_is_mild(self) -> None:
        """Test the upper mild boundary."""
        result = puqe_calculator.calculate({"nausea": 2, "vomiting": 2, "retching": 2})
        assert result.risk_level == RiskLevel.MILD

    def test_moderate(self) -> None:
        """Test scores 7-12 are moderate."""
        result = puqe_calculator.calculate({"nausea": 4, "vomiting": 4, "retching": 4})

        assert result.score == 12
        assert result.risk_level == RiskLevel.MODERATE
        assert result.recommendations == ["Kontakt jordemoder", "Overvej anti-emetika"]

    def test_severe_flags_hyperemesis(self) -> None:
        """Test scores above 12 are severe with hyperemesis risk."""
        result = puqe_calculator.calculate({"nausea": 5, "vomiting": 4, "retching": 4})

        assert result.score == 13
        assert result.risk_level == RiskLevel.SEVERE
        assert result.interpretation == "Alvorlig graviditetskvalme (Hyperemesis)"
        assert result.details.hyperemesis_risk is True
        assert result.details.severity == "severe"

    def test_item_details(self) -> None:
        """Test that item values are reported in details."""
        details = puqe_calculator.calculate({"nausea": 5, "vomiting": 2, "retching": 3}).details

        assert details.nausea_hours == 5
        assert details.vomiting_episodes == 2
        assert details.retching_episodes == 3

    def test_zero_is_below_minimum(self) -> None:
        """Test that items start at 1."""
        result = puqe_calculator.validate({"nausea": 0, "vomiting": 1, "retching": 1})

        assert result.messages == ["Kvalme score skal være mindst 1"]
