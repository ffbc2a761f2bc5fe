"""API v1 router aggregating all endpoints."""

from fastapi import APIRouter

from medcalc.api.v1 import calculators, health

api_router = APIRouter()

# Health check
api_router.include_router(
    health.router,
    prefix="/health",
    tags=["health"],
)

# Calculators
api_router.include_router(
    calculators.router,
    prefix="/calculators",
    tags=["calculators"],
)
