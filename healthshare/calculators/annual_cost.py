"""Annual cost estimator.

Turns a monthly premium and an IUA into one comparable yearly number:

  base         = monthly_premium × 12 + IUA      (all premiums, one shared incident)
  with usage   = base + expected visits × visit cost
  DPC/VPC plan = base                           (primary care is in the premium)

Expected visits are per person × people covered:

  just_checkups   1 visit / person
  few_months      3 visits / person
  monthly_plus   12 visits / person

  just_me 1, me_spouse 2, me_kids 3, family 4 people
"""

from __future__ import annotations

from healthshare.config import settings
from healthshare.models.enums import CoverageType, VisitFrequency
from healthshare.schemas.catalog import ProviderPlan

VISITS_PER_PERSON: dict[VisitFrequency, int] = {
    VisitFrequency.JUST_CHECKUPS: 1,
    VisitFrequency.FEW_MONTHS: 3,
    VisitFrequency.MONTHLY_PLUS: 12,
}

HOUSEHOLD_MULTIPLIER: dict[CoverageType, int] = {
    CoverageType.JUST_ME: 1,
    CoverageType.ME_SPOUSE: 2,
    CoverageType.ME_KIDS: 3,
    CoverageType.FAMILY: 4,
}

_DPC_MARKERS = ("dpc", "vpc")


def household_multiplier(coverage_type: str | None) -> int:
    """People covered; unknown or missing coverage counts as one."""
    try:
        return HOUSEHOLD_MULTIPLIER[CoverageType(coverage_type)]
    except ValueError:
        return 1


def expected_visits(visit_frequency: str | None, coverage_type: str | None = None) -> int:
    """Expected yearly visits for the household; unknown frequency means checkups only."""
    try:
        per_person = VISITS_PER_PERSON[VisitFrequency(visit_frequency)]
    except ValueError:
        per_person = VISITS_PER_PERSON[VisitFrequency.JUST_CHECKUPS]
    return per_person * household_multiplier(coverage_type)


def visit_frequency_cost(
    visit_frequency: str | None,
    coverage_type: str | None = None,
    visit_cost: int | float | None = None,
) -> float:
    """Estimated yearly out-of-pocket spend on primary care visits."""
    cost = settings.costs.visit_cost if visit_cost is None else visit_cost
    return expected_visits(visit_frequency, coverage_type) * cost


def is_dpc_plan(plan: ProviderPlan) -> bool:
    """Plans bundling direct/virtual primary care carry dpc or vpc in id or name."""
    text = f"{plan.id} {plan.plan_name}".lower()
    return any(marker in text for marker in _DPC_MARKERS)


def calculate_annual_cost(
    monthly_premium: float,
    iua: float,
    visit_frequency: str | None = None,
    coverage_type: str | None = None,
    is_dpc_plan: bool = False,
) -> float:
    """Estimate the yearly cost of one cost option.

    Args:
        monthly_premium: Monthly share amount.
        iua: Initial unshared amount of the selected tier.
        visit_frequency: Questionnaire answer; None skips the usage addend.
        coverage_type: Questionnaire coverage answer, scales expected visits.
        is_dpc_plan: Primary care bundled in the premium, no visit addend.

    Returns:
        Premiums for twelve months plus one IUA, plus expected visit costs
        when usage is known.
    """
    total = monthly_premium * 12 + iua
    if visit_frequency is None or is_dpc_plan:
        return total
    return total + visit_frequency_cost(visit_frequency, coverage_type)
