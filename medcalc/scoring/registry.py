"""Calculator registry.

Fixed mapping from calculator type key to its calculator singleton. The
mapping is built once at import time and never mutated.
"""

import logging
from collections.abc import Mapping
from typing import Any

from medcalc.scoring.audit import audit_calculator
from medcalc.scoring.base import MedicalCalculator
from medcalc.scoring.danpss import danpss_calculator
from medcalc.scoring.epds import epds_calculator
from medcalc.scoring.exceptions import (
    CalculationFailedError,
    CalculatorNotRegistered,
    UnknownCalculatorType,
)
from medcalc.scoring.gcs import gcs_calculator
from medcalc.scoring.ipss import ipss_calculator
from medcalc.scoring.lrti import lrti_calculator
from medcalc.scoring.puqe import puqe_calculator
from medcalc.scoring.result import CalculationResult
from medcalc.scoring.score2 import score2_calculator
from medcalc.scoring.types import CalculatorMetadata, ScoreRange
from medcalc.scoring.westley_croup import westley_croup_calculator
from medcalc.scoring.who5 import who5_calculator

logger = logging.getLogger(__name__)

# Every calculator type the application knows about
KNOWN_CALCULATOR_TYPES = (
    "audit",
    "danpss",
    "epds",
    "gcs",
    "ipss",
    "puqe",
    "westleycroupscore",
    "who5",
    "lrti",
    "score2",
)

CALCULATOR_REGISTRY: Mapping[str, MedicalCalculator] = {
    "audit": audit_calculator,
    "danpss": danpss_calculator,
    "epds": epds_calculator,
    "gcs": gcs_calculator,
    "ipss": ipss_calculator,
    "puqe": puqe_calculator,
    "westleycroupscore": westley_croup_calculator,
    "who5": who5_calculator,
    "lrti": lrti_calculator,
    "score2": score2_calculator,
}


def get_calculator(
    calculator_type: str,
    registry: Mapping[str, MedicalCalculator] = CALCULATOR_REGISTRY,
) -> MedicalCalculator:
    """Get the calculator registered for a type key.

    Args:
        calculator_type: Calculator type key (e.g. "audit")
        registry: Registry to look in

    Raises:
        UnknownCalculatorType: If the key is not a known calculator type
        CalculatorNotRegistered: If the key is known but has no calculator
    """
    if calculator_type not in KNOWN_CALCULATOR_TYPES:
        raise UnknownCalculatorType(calculator_type, KNOWN_CALCULATOR_TYPES)

    calculator = registry.get(calculator_type)
    if calculator is None:
        logger.error(f"Calculator '{calculator_type}' missing from registry")
        raise CalculatorNotRegistered(calculator_type)

    return calculator


def get_available_calculator_types() -> list[str]:
    """Get all registered calculator type keys."""
    return list(CALCULATOR_REGISTRY)


def is_calculator_implemented(calculator_type: str) -> bool:
    """Check if a calculator type has a registered calculator."""
    return calculator_type in CALCULATOR_REGISTRY


def get_calculator_metadata(calculator_type: str) -> CalculatorMetadata:
    """Get metadata for a calculator type."""
    return get_calculator(calculator_type).metadata


def get_calculator_score_range(calculator_type: str) -> ScoreRange:
    """Get the valid score range for a calculator type."""
    return get_calculator(calculator_type).get_score_range()


def calculate_medical_score(calculator_type: str, responses: Any) -> CalculationResult:
    """Look up a calculator and compute its result.

    Raises:
        CalculationFailedError: If the lookup or the calculation fails, with
            the calculator type in the message and the original error as
            ``cause``.
    """
    try:
        calculator = get_calculator(calculator_type)
        result = calculator.calculate(responses)
    except Exception as e:
        logger.warning(
            f"Calculation failed for {calculator_type}: {e}",
            extra={"calculator_type": calculator_type},
        )
        raise CalculationFailedError(calculator_type, e) from e

    logger.debug(
        f"Calculated {calculator_type}: score={result.score} risk={result.risk_level.value}",
        extra={"calculator_type": calculator_type},
    )
    return result
