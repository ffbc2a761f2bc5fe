"""FastAPI dependency injection utilities."""

from typing import Annotated

from fastapi import Depends, HTTPException, status

from medcalc.scoring.base import MedicalCalculator
from medcalc.scoring.exceptions import UnknownCalculatorType
from medcalc.scoring.registry import get_calculator
from medcalc.services.export import ExportService


async def get_calculator_or_404(calculator_type: str) -> MedicalCalculator:
    """Resolve the calculator named in the path.

    Raises:
        HTTPException: 404 if the calculator type is unknown
    """
    try:
        return get_calculator(calculator_type)
    except UnknownCalculatorType as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


def get_export_service() -> ExportService:
    return ExportService()


Calculator = Annotated[MedicalCalculator, Depends(get_calculator_or_404)]
Exporter = Annotated[ExportService, Depends(get_export_service)]
