"""Questionnaire response fed into the matching and scoring engine.

Built by the UI collaborator, which owns validation. The engine reads it as-is:
enum-like answers stay plain strings and unknown values fall back to the
defaults documented on each rule.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class QuestionnaireResponse(BaseModel):
    """Answers collected by the plan questionnaire."""

    model_config = ConfigDict(extra="ignore")

    age: int

    # Household
    coverage_type: str | None = None      # just_me | me_spouse | me_kids | family
    household_size: int | None = None     # used only when coverage_type is missing

    # Cost-sharing
    iua_preference: str | None = None     # exact IUA filter, e.g. "1000"
    financial_capacity: str | None = None  # largest IUA the user can absorb
    expense_preference: str | None = None  # lower_monthly | balanced | higher_monthly
    annual_healthcare_spend: str | None = None  # less_1000 | 1000_5000 | more_5000
    visit_frequency: str | None = None    # just_checkups | few_months | monthly_plus

    # Health
    pregnancy: bool = False
    pregnancy_planning: str | None = None  # yes | no | maybe
    pre_existing: bool = False

    # Location
    state: str | None = None
    zip_code: str | None = None

    @field_validator("iua_preference", "financial_capacity", mode="before")
    @classmethod
    def _amount_as_str(cls, v: Any) -> Any:
        """Accept 1000 as well as "1000"; blank means no preference."""
        if v is None:
            return None
        if isinstance(v, bool):
            return v
        if isinstance(v, int):
            return str(v)
        if isinstance(v, float):
            # 2500.0 → "2500"; fractional amounts keep their cents
            return str(int(v)) if v.is_integer() else str(v)
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("pregnancy", "pre_existing", mode="before")
    @classmethod
    def _blank_is_false(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return False
        return v

    @property
    def financial_capacity_amount(self) -> int | None:
        return _parse_amount(self.financial_capacity)

    @property
    def expects_pregnancy(self) -> bool:
        return self.pregnancy or self.pregnancy_planning == "yes"


def _parse_amount(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(float(value))
    except (ValueError, OverflowError):
        return None
