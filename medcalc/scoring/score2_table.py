"""SCORE2 lookup table.

The table is a nested JSON document keyed, in order, by gender, smoking
group, the literal ``"LDL-kolesterol"`` level, LDL band, age band and
systolic blood pressure band, ending in a 10-year risk percentage::

    {"male": {"Ryger": {"LDL-kolesterol": {"3.2-4.1": {"60-64": {"140-159": 9}}}}}}

Key strings are part of the data format and must be preserved exactly.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal, Optional

from medcalc.core.config import settings

logger = logging.getLogger(__name__)

Gender = Literal["male", "female"]
SmokingGroup = Literal["Ikke-ryger", "Ryger"]

Score2Table = dict[str, Any]

RISK_NOT_FOUND = -1

LDL_LEVEL = "LDL-kolesterol"

# (inclusive lower bound, band label), highest first
AGE_GROUPS = (
    (85, "85-89"),
    (80, "80-84"),
    (75, "75-79"),
    (70, "70-74"),
    (65, "65-69"),
    (60, "60-64"),
    (55, "55-59"),
    (50, "50-54"),
    (45, "45-49"),
)
BP_GROUPS = (
    (160, "160-179"),
    (140, "140-159"),
    (120, "120-139"),
)
LDL_GROUPS = (
    (5.2, "5.2-6.1"),
    (4.2, "4.2-5.1"),
    (3.2, "3.2-4.1"),
)


def _bucket(value: float, groups: tuple, fallback: str) -> str:
    for lower, label in groups:
        if value >= lower:
            return label
    return fallback


def get_age_group(age: float) -> str:
    """Map an age in years to its 5-year band."""
    return _bucket(age, AGE_GROUPS, "40-44")


def get_bp_group(systolic_bp: float) -> str:
    """Map a systolic blood pressure to its 20 mmHg band."""
    return _bucket(systolic_bp, BP_GROUPS, "100-119")


def get_ldl_group(ldl: float) -> str:
    """Map an LDL cholesterol value (mmol/L) to its band."""
    return _bucket(ldl, LDL_GROUPS, "2.2-3.1")


def get_smoking_group(smoker: bool) -> SmokingGroup:
    return "Ryger" if smoker else "Ikke-ryger"


def calculate_risk(
    table: Score2Table,
    gender: str,
    age: float,
    smoker: bool,
    systolic_bp: float,
    ldl: float,
) -> float:
    """Look up the 10-year cardiovascular risk percentage.

    Returns:
        The tabulated percentage, or RISK_NOT_FOUND when any level of the
        table has no entry for the given inputs.
    """
    try:
        return table[gender][get_smoking_group(smoker)][LDL_LEVEL][get_ldl_group(ldl)][
            get_age_group(age)
        ][get_bp_group(systolic_bp)]
    except (KeyError, TypeError):
        return RISK_NOT_FOUND


def filter_by_age_group(
    table: Score2Table,
    gender: str,
    smoker_status: str,
    age_group: str,
) -> Optional[dict[str, dict[str, float]]]:
    """Get the blood pressure rows of one age band for every LDL band.

    Used to draw the risk chart around the patient's own cell.

    Returns:
        Mapping of LDL band to BP row (empty if the age band has no data),
        or None for an unknown gender or smoking status.
    """
    gender_data = table.get(gender)
    if not gender_data:
        return None

    smoker_data = gender_data.get(smoker_status)
    if not smoker_data:
        return None

    filtered: dict[str, dict[str, float]] = {}
    for ldl_range, ldl_data in smoker_data.get(LDL_LEVEL, {}).items():
        if ldl_data and ldl_data.get(age_group):
            filtered[ldl_range] = ldl_data[age_group]

    return filtered


@lru_cache
def _read_table(path: Path) -> Score2Table:
    logger.info(f"Loading SCORE2 table from {path}")
    with path.open(encoding="utf-8") as f:
        return json.load(f)


def load_score2_table(path: Optional[Path] = None) -> Optional[Score2Table]:
    """Load the SCORE2 table.

    No chart ships with the package; deployments point
    ``MEDCALC_SCORE2_TABLE_PATH`` at the published chart.

    Args:
        path: JSON file to read. Defaults to ``settings.score2_table_path``.

    Returns:
        The parsed table, cached per path, or None if no table is configured.

    Raises:
        FileNotFoundError: If the configured file does not exist
    """
    configured = path or settings.score2_table_path
    if configured is None:
        return None
    return _read_table(Path(configured).resolve())
