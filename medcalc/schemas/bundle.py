"""Pydantic schemas for the bundles handed to export and submission.

Both bundles serialise to plain JSON with camelCase keys via
``model_dump(mode="json", by_alias=True)``.
"""

from datetime import datetime
from typing import Any, Literal, Optional

from pydantic import Field

from medcalc.schemas.base import CamelModel
from medcalc.schemas.patient import PatientData
from medcalc.scoring.result import CalculationResult
from medcalc.scoring.types import CalculatorCategory


class CalculatorConfig(CamelModel):
    """Presentation config of a calculator page."""

    type: str
    name: str
    version: str
    description: Optional[str] = None
    author: Optional[str] = None
    category: CalculatorCategory
    theme: Literal["sky", "teal", "orange"] = "teal"
    min_age: Optional[int] = None
    max_age: Optional[int] = None
    allowed_genders: Optional[list[str]] = None
    required_fields: Optional[list[str]] = None
    estimated_duration: Optional[int] = Field(None, description="Minutes")


class SubmissionMetadata(CamelModel):
    session_id: str
    duration: float = Field(..., description="Seconds spent on the form")
    version: str
    timestamp: datetime


class SubmissionData(CamelModel):
    """Bundle sent to the submission server."""

    config: CalculatorConfig
    patient: PatientData
    responses: dict[str, Any]
    result: CalculationResult
    metadata: SubmissionMetadata

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ExportMetadata(CamelModel):
    session_id: str
    duration: float = Field(..., description="Seconds spent on the form")
    export_time: datetime


class ExportData(CamelModel):
    """Bundle rendered by the export plugins."""

    calculator: CalculatorConfig
    patient: PatientData
    responses: dict[str, Any]
    result: CalculationResult
    metadata: ExportMetadata

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
