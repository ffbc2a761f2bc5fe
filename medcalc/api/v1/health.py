"""Health check endpoints."""

from fastapi import APIRouter, status
from pydantic import BaseModel

from medcalc.scoring.registry import get_available_calculator_types

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response."""

    status: str


class ReadinessResponse(HealthResponse):
    calculators: int


@router.get(
    "",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
    description="Returns service health status",
)
async def health_check() -> HealthResponse:
    """Check if the service is healthy."""
    return HealthResponse(status="ok")


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    status_code=status.HTTP_200_OK,
    summary="Readiness check",
    description="Returns service readiness status for k8s probes",
)
async def readiness_check() -> ReadinessResponse:
    """Check if the service is ready to accept requests.

    Returns:
        Readiness status with the number of registered calculators
    """
    return ReadinessResponse(
        status="ok",
        calculators=len(get_available_calculator_types()),
    )
