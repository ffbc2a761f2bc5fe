"""Scoring engine for validated clinical calculators."""

from medcalc.scoring.base import BaseCalculator, MedicalCalculator
from medcalc.scoring.exceptions import (
    CalculationFailedError,
    CalculationValidationError,
    CalculatorError,
    CalculatorNotRegistered,
    ScoreRangeError,
    UnknownCalculatorType,
)
from medcalc.scoring.registry import (
    KNOWN_CALCULATOR_TYPES,
    calculate_medical_score,
    get_available_calculator_types,
    get_calculator,
    get_calculator_metadata,
    get_calculator_score_range,
    is_calculator_implemented,
)
from medcalc.scoring.result import CalculationResult, CalculatorDetails
from medcalc.scoring.types import (
    CalculatorMetadata,
    RiskLevel,
    ScoreRange,
    ValidationError,
    ValidationResult,
)

__all__ = [
    "BaseCalculator",
    "MedicalCalculator",
    "CalculationFailedError",
    "CalculationValidationError",
    "CalculatorError",
    "CalculatorNotRegistered",
    "ScoreRangeError",
    "UnknownCalculatorType",
    "KNOWN_CALCULATOR_TYPES",
    "calculate_medical_score",
    "get_available_calculator_types",
    "get_calculator",
    "get_calculator_metadata",
    "get_calculator_score_range",
    "is_calculator_implemented",
    "CalculationResult",
    "CalculatorDetails",
    "CalculatorMetadata",
    "RiskLevel",
    "ScoreRange",
    "ValidationError",
    "ValidationResult",
]
