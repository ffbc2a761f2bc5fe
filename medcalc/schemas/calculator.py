"""Pydantic schemas for the calculator HTTP endpoints."""

from typing import Any, Optional

from pydantic import Field

from medcalc.schemas.base import CamelModel
from medcalc.schemas.bundle import CalculatorConfig
from medcalc.schemas.patient import PatientData
from medcalc.scoring.base import MedicalCalculator
from medcalc.scoring.types import CalculatorCategory, ValidationResult


class CalculatorMetadataRead(CamelModel):
    name: str
    version: str
    description: str
    category: CalculatorCategory
    estimated_duration: Optional[int] = None
    references: list[str] = Field(default_factory=list)


class ScoreRangeRead(CamelModel):
    min: int
    max: int


class CalculatorRead(CamelModel):
    """A registered calculator with its metadata and score range."""

    type: str
    metadata: CalculatorMetadataRead
    score_range: ScoreRangeRead

    @classmethod
    def from_calculator(
        cls, calculator_type: str, calculator: MedicalCalculator
    ) -> "CalculatorRead":
        meta = calculator.metadata
        score_range = calculator.get_score_range()
        return cls(
            type=calculator_type,
            metadata=CalculatorMetadataRead(
                name=meta.name,
                version=meta.version,
                description=meta.description,
                category=meta.category,
                estimated_duration=meta.estimated_duration,
                references=list(meta.references),
            ),
            score_range=ScoreRangeRead(min=score_range.min, max=score_range.max),
        )


class ValidationErrorRead(CamelModel):
    field: str
    message: str
    code: str
    value: Any = None


class ValidationResultRead(CamelModel):
    is_valid: bool
    errors: list[ValidationErrorRead]

    @classmethod
    def from_result(cls, result: ValidationResult) -> "ValidationResultRead":
        return cls(
            is_valid=result.is_valid,
            errors=[
                ValidationErrorRead(
                    field=e.field, message=e.message, code=e.code, value=e.value
                )
                for e in result.errors
            ],
        )


class ExportRequest(CamelModel):
    """Responses to score and export, with the form context."""

    responses: dict[str, Any]
    patient: PatientData = Field(default_factory=PatientData)
    session_id: str
    duration: float = Field(0, ge=0, description="Seconds spent on the form")


def config_for(calculator_type: str, calculator: MedicalCalculator) -> CalculatorConfig:
    """Build the calculator config bundled with exports."""
    meta = calculator.metadata
    return CalculatorConfig(
        type=calculator_type,
        name=meta.name,
        version=meta.version,
        description=meta.description,
        category=meta.category,
        estimated_duration=meta.estimated_duration,
    )
