"""Calculator endpoints: listing, validation, scoring and export."""

import logging
from typing import Any

from fastapi import APIRouter, Body, HTTPException, Query, Response, status
from fastapi.responses import JSONResponse

from medcalc.api.deps import Calculator, Exporter
from medcalc.schemas.calculator import (
    CalculatorRead,
    ExportRequest,
    ValidationResultRead,
    config_for,
)
from medcalc.scoring.registry import CALCULATOR_REGISTRY
from medcalc.scoring.result import CalculationResult

logger = logging.getLogger(__name__)

router = APIRouter()

MEDIA_TYPES = {
    "json": "application/json",
    "text": "text/plain; charset=utf-8",
    "csv": "text/csv; charset=utf-8",
    "pdf": "application/pdf",
}


def _validation_failed(calculator: Any, responses: Any) -> JSONResponse | None:
    """422 response with the validation errors, or None if responses are valid."""
    validation = calculator.validate(responses)
    if validation.is_valid:
        return None
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=ValidationResultRead.from_result(validation).model_dump(
            mode="json", by_alias=True
        ),
    )


@router.get("", response_model=list[CalculatorRead])
async def list_calculators() -> list[CalculatorRead]:
    """List every registered calculator."""
    return [
        CalculatorRead.from_calculator(calculator_type, calculator)
        for calculator_type, calculator in CALCULATOR_REGISTRY.items()
    ]


@router.get("/{calculator_type}", response_model=CalculatorRead)
async def get_calculator_info(calculator_type: str, calculator: Calculator) -> CalculatorRead:
    """Get metadata and score range for one calculator."""
    return CalculatorRead.from_calculator(calculator_type, calculator)


@router.post("/{calculator_type}/validate", response_model=ValidationResultRead)
async def validate_responses(
    calculator: Calculator,
    responses: Any = Body(...),
) -> ValidationResultRead:
    """Validate responses without scoring them.

    Always returns 200; the body says whether the responses are valid.
    """
    return ValidationResultRead.from_result(calculator.validate(responses))


@router.post(
    "/{calculator_type}/calculate",
    response_model=None,
    responses={200: {"model": CalculationResult}, 422: {"model": ValidationResultRead}},
)
async def calculate(
    calculator_type: str,
    calculator: Calculator,
    responses: Any = Body(...),
) -> JSONResponse:
    """Validate and score responses.

    Returns 422 with the validation errors when responses are invalid.
    """
    failed = _validation_failed(calculator, responses)
    if failed is not None:
        return failed

    result = calculator.calculate(responses)
    logger.info(
        f"Calculated {calculator_type}: score={result.score} risk={result.risk_level.value}",
        extra={"calculator_type": calculator_type},
    )
    return JSONResponse(content=result.to_payload())


@router.post("/{calculator_type}/export")
async def export_calculation(
    calculator_type: str,
    calculator: Calculator,
    exporter: Exporter,
    export_request: ExportRequest,
    format: str = Query("json", description="Export format"),
) -> Response:
    """Score responses and render the result in the requested format."""
    if exporter.get_plugin(format) is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=(
                f"Export format '{format}' is not supported. "
                f"Available formats: {', '.join(exporter.get_available_formats())}"
            ),
        )

    failed = _validation_failed(calculator, export_request.responses)
    if failed is not None:
        return failed

    result = calculator.calculate(export_request.responses)
    data = exporter.prepare_export_data(
        config_for(calculator_type, calculator),
        export_request.patient,
        export_request.responses,
        result,
        export_request.session_id,
        export_request.duration,
    )

    document = exporter.export_results(data, format)
    if document is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Export to {format} failed",
        )

    # Return as downloadable file
    filename = f"{calculator_type}_{export_request.session_id[:8]}.{format}"

    return Response(
        content=document,
        media_type=MEDIA_TYPES.get(format, "application/octet-stream"),
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"',
        },
    )
