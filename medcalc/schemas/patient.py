"""Pydantic schema for patient information attached to a calculation.

Every field is optional since calculators collect different subsets
(e.g. SCORE2 needs age and gender, AUDIT needs neither). Calculator
specific extras are kept as-is.
"""

import re
from typing import Literal, Optional

from pydantic import ConfigDict, EmailStr, Field, field_validator

from medcalc.schemas.base import CamelModel

CPR_PATTERN = re.compile(r"^\d{6}-?\d{4}$")


class PatientData(CamelModel):
    """Patient details as entered on the calculator form."""

    model_config = ConfigDict(extra="allow")

    name: Optional[str] = Field(None, max_length=100)
    age: Optional[int] = Field(None, ge=0, le=150)
    gender: Optional[Literal["male", "female", "other"]] = None
    cpr: Optional[str] = None

    phone: Optional[str] = None
    email: Optional[EmailStr] = None

    height: Optional[float] = Field(None, ge=10, le=300, description="Height in cm")
    weight: Optional[float] = Field(None, ge=0.1, le=1000, description="Weight in kg")
    bmi: Optional[float] = None

    @field_validator("cpr")
    @classmethod
    def validate_cpr(cls, v: Optional[str]) -> Optional[str]:
        """CPR numbers are DDMMYY-XXXX, dash optional."""
        if v is not None and not CPR_PATTERN.match(v):
            raise ValueError("CPR nummer skal have formatet DDMMYY-XXXX")
        return v

    def to_payload(self) -> dict:
        """Plain dict of the fields that were actually provided."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
