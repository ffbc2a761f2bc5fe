"""Danish gender labels for display and export."""

from typing import Optional

GENDER_LABELS = {
    "male": "Mand",
    "female": "Kvinde",
}

CHILD_GENDER_LABELS = {
    "male": "Dreng",
    "female": "Pige",
}

# Patients at or below this age get child labels
CHILD_MAX_AGE = 16


def get_gender_label(gender: str, is_child: bool = False) -> str:
    """Get the Danish label for a gender value.

    Unknown values are returned unchanged.
    """
    labels = CHILD_GENDER_LABELS if is_child else GENDER_LABELS
    return labels.get(gender, gender)


def get_gender_label_by_age(gender: str, age: Optional[int]) -> str:
    """Get the Danish gender label, using child labels for ages up to 16."""
    return get_gender_label(gender, is_child=age is not None and age <= CHILD_MAX_AGE)
