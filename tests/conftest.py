"""Pytest configuration and fixtures."""

import json
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient

from medcalc.main import app
from medcalc.schemas.bundle import CalculatorConfig
from medcalc.schemas.patient import PatientData
from medcalc.scoring.gcs import gcs_calculator
from medcalc.scoring.result import CalculationResult


# Small chart covering one cell per smoking group, plus a female row
# without any age data to exercise the not-found paths.
MOCK_SCORE2_TABLE: dict[str, Any] = {
    "male": {
        "Ikke-ryger": {
            "LDL-kolesterol": {
                "3.2-4.1": {
                    "50-54": {"160-179": 6, "140-159": 5, "120-139": 4, "100-119": 3},
                    "60-64": {"160-179": 12, "140-159": 10, "120-139": 8, "100-119": 7},
                },
            },
        },
        "Ryger": {
            "LDL-kolesterol": {
                "3.2-4.1": {
                    "50-54": {"160-179": 11, "140-159": 9, "120-139": 7, "100-119": 6},
                    "60-64": {"160-179": 22, "140-159": 18, "120-139": 15, "100-119": 12},
                },
                "4.2-5.1": {
                    "60-64": {"160-179": 25, "140-159": 21, "120-139": 17, "100-119": 14},
                },
            },
        },
    },
    "female": {
        "Ikke-ryger": {
            "LDL-kolesterol": {
                "2.2-3.1": {
                    "40-44": {"160-179": 2, "140-159": 1, "120-139": 1, "100-119": 1},
                },
                "3.2-4.1": {},
            },
        },
    },
}


@pytest.fixture
def score2_table() -> dict[str, Any]:
    """SCORE2 chart fixture with known values."""
    return MOCK_SCORE2_TABLE


@pytest.fixture
def score2_table_file(tmp_path: Path, score2_table: dict[str, Any]) -> Path:
    """SCORE2 chart fixture written to a JSON file."""
    path = tmp_path / "score2.json"
    path.write_text(json.dumps(score2_table), encoding="utf-8")
    return path


@pytest.fixture(scope="function")
def client() -> Generator[TestClient, None, None]:
    """Create FastAPI test client."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def gcs_config() -> CalculatorConfig:
    """Calculator config for the GCS page."""
    return CalculatorConfig(
        type="gcs",
        name="GCS",
        version="1.0.0",
        description="Glasgow Coma Scale",
        category="general",
    )


@pytest.fixture
def gcs_result() -> CalculationResult:
    """A normal GCS result."""
    return gcs_calculator.calculate(
        {"eyeOpening": 4, "verbalResponse": 5, "motorResponse": 6}
    )


@pytest.fixture
def adult_patient() -> PatientData:
    """Adult patient with name, age and gender."""
    return PatientData(name="Test Patient", age=45, gender="male")
