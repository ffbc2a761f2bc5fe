"""Result vocabulary produced by every calculator."""

from typing import Optional, Union

from pydantic import ConfigDict, Field, SerializeAsAny

from medcalc.schemas.base import CamelModel
from medcalc.scoring.types import RiskLevel


class CalculatorDetails(CamelModel):
    """Calculator-specific breakdown attached to a result.

    Each calculator subclasses this with its own named fields.
    """

    model_config = ConfigDict(frozen=True)


class CalculationResult(CamelModel):
    """Canonical output of every calculator."""

    model_config = ConfigDict(frozen=True)

    score: Union[int, float]
    interpretation: str
    recommendations: list[str]
    risk_level: RiskLevel
    details: Optional[SerializeAsAny[CalculatorDetails]] = None
    warnings: list[str] = Field(default_factory=list)

    def to_payload(self) -> dict:
        """Plain JSON-compatible dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)
