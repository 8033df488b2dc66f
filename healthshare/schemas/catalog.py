"""Pydantic schemas for the provider plan catalog.

Records are frozen: the catalog is built once by the loader and only read
afterwards. Field names serialize in camelCase to match the published
dataset (``planMatrix``, ``initialUnsharedAmount``, ...).
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field, model_validator

from healthshare.models.enums import HouseholdType
from healthshare.schemas.base import FrozenCamelModel

# Premiums and IUAs stay JSON numbers on the wire (int for whole dollars), not Decimal strings.
Amount = Annotated[int | float, Field(ge=0)]


# ---------------------------------------------------------------------------
# Pricing matrix
# ---------------------------------------------------------------------------


class CostOption(FrozenCamelModel):
    """One selectable cost-sharing tier inside a matrix row."""

    monthly_premium: Amount
    initial_unshared_amount: Amount
    sharing_percentage: float | None = None  # e.g. 80.0 for 80/20 sharing after the IUA


class PlanMatrixRow(FrozenCamelModel):
    """Price row for one (age bracket, household type) pair."""

    age_bracket: str
    household_type: HouseholdType
    costs: tuple[CostOption, ...] = ()

    @model_validator(mode="after")
    def _unique_iua_tiers(self) -> PlanMatrixRow:
        iuas = [c.initial_unshared_amount for c in self.costs]
        if len(iuas) != len(set(iuas)):
            msg = f"Duplicate initialUnsharedAmount in row {self.age_bracket}/{self.household_type.value}: {iuas}"
            raise ValueError(msg)
        return self


# ---------------------------------------------------------------------------
# Age rules (tagged variant)
# ---------------------------------------------------------------------------


class AgeRange(FrozenCamelModel):
    """Inclusive age range mapped to a provider-defined bracket label."""

    min: int
    max: int
    bracket: str

    @model_validator(mode="after")
    def _ordered(self) -> AgeRange:
        if self.min > self.max:
            msg = f"Age range {self.bracket!r} has min {self.min} > max {self.max}"
            raise ValueError(msg)
        return self


class CustomBrackets(FrozenCamelModel):
    ranges: tuple[AgeRange, ...]


class StandardAgeRules(FrozenCamelModel):
    """Plan prices on the standard 18-29 / 30-39 / 40-49 / 50-64 brackets."""

    type: Literal["standard"] = "standard"


class CustomAgeRules(FrozenCamelModel):
    """Plan prices on its own brackets; ranges are scanned in declaration order."""

    type: Literal["custom"] = "custom"
    custom_brackets: CustomBrackets


AgeRules = Annotated[StandardAgeRules | CustomAgeRules, Field(discriminator="type")]


# ---------------------------------------------------------------------------
# Coverage attributes
# ---------------------------------------------------------------------------


class MaternityCoverage(FrozenCamelModel):
    covered: bool = False
    waiting_period_months: int | None = None
    details: str | None = None


class PreExistingPolicy(FrozenCamelModel):
    waiting_period_months: int | None = None
    details: str | None = None


# ---------------------------------------------------------------------------
# Provider plan
# ---------------------------------------------------------------------------


class ProviderPlan(FrozenCamelModel):
    """A single provider plan with its pricing matrix and coverage attributes."""

    id: str
    provider_name: str
    plan_name: str
    age_rules: AgeRules = Field(default_factory=StandardAgeRules)
    plan_matrix: tuple[PlanMatrixRow, ...] = ()

    max_coverage: str | None = None
    annual_unshared_amount: str | None = None  # free text, e.g. "Total of paid three IUAs in 12 months"
    source_url: str | None = None
    network_type: str | None = None
    maternity: MaternityCoverage = Field(default_factory=MaternityCoverage)
    pre_existing_conditions: PreExistingPolicy = Field(default_factory=PreExistingPolicy)
