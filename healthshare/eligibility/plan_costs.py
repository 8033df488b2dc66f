"""Cost matrix lookup — plan × age bracket × household type → cost options.

Matching rule shared with the eligibility filter: the first row with the
requested (age bracket, household type) wins; a Member & Family (5+) request
falls back to the Member & Family row. IUA preferences are exact matches.
"""

from __future__ import annotations

from collections.abc import Iterable

from healthshare.calculators.annual_cost import calculate_annual_cost, is_dpc_plan
from healthshare.catalog.catalog import PlanCatalog
from healthshare.eligibility.age_brackets import get_age_bracket
from healthshare.eligibility.household import coerce_household_type, row_candidates
from healthshare.models.enums import CoverageType, HouseholdType
from healthshare.schemas.catalog import CostOption, PlanMatrixRow, ProviderPlan
from healthshare.schemas.recommendation import PlanComparisonRow


def find_plan_row(
    plan: ProviderPlan,
    age_bracket: str,
    household_type: HouseholdType | str,
) -> PlanMatrixRow | None:
    """Scan a plan's matrix for the row priced on this bracket and household."""
    household = coerce_household_type(household_type)
    if household is None:
        return None
    for candidate in row_candidates(household):
        for row in plan.plan_matrix:
            if row.age_bracket == age_bracket and row.household_type == candidate:
                return row
    return None


def find_plan_costs(
    plan: ProviderPlan,
    age_bracket: str,
    household_type: HouseholdType | str,
) -> list[CostOption] | None:
    """Cost options of the matching row, or None when the plan has no such row."""
    row = find_plan_row(plan, age_bracket, household_type)
    return list(row.costs) if row is not None else None


def filter_costs_by_iua(costs: Iterable[CostOption], iua_preference: int | float | str | None) -> list[CostOption]:
    """Keep options whose IUA equals the preference exactly; None keeps everything.

    A preference that is not a number matches nothing.
    """
    costs = list(costs)
    if iua_preference is None:
        return costs
    try:
        target = float(iua_preference)
    except (TypeError, ValueError):
        return []
    return [c for c in costs if c.initial_unshared_amount == target]


def get_plan_cost(
    catalog: PlanCatalog,
    plan_id: str,
    age: int,
    household_or_coverage: HouseholdType | CoverageType | str | int,
    iua_preference: int | float | str | None = None,
) -> CostOption | None:
    """Single cost option for one plan and one user, or None.

    ``household_or_coverage`` accepts a matrix label ("Member Only"), a
    coverage answer ("me_spouse") or a household size (3).
    """
    plan = catalog.get(plan_id)
    if plan is None:
        return None

    age_bracket = get_age_bracket(age, plan.age_rules)
    if age_bracket is None:
        return None

    costs = find_plan_costs(plan, age_bracket, household_or_coverage)
    if not costs:
        return None

    matching = filter_costs_by_iua(costs, iua_preference)
    return matching[0] if matching else None


def _eligible_costs(
    plan: ProviderPlan,
    age: int,
    household_type: HouseholdType | str,
    max_iua: float | None,
) -> list[CostOption]:
    age_bracket = get_age_bracket(age, plan.age_rules)
    if age_bracket is None:
        return []
    costs = find_plan_costs(plan, age_bracket, household_type) or []
    if max_iua is not None:
        costs = [c for c in costs if c.initial_unshared_amount <= max_iua]
    return costs


def find_cheapest_plan(
    catalog: PlanCatalog,
    age: int,
    household_type: HouseholdType | str,
    max_iua: float | None = None,
) -> tuple[ProviderPlan, CostOption] | None:
    """Lowest monthly premium across the catalog; ties keep the earlier plan."""
    cheapest: tuple[ProviderPlan, CostOption] | None = None
    for plan in catalog:
        for cost in _eligible_costs(plan, age, household_type, max_iua):
            if cheapest is None or cost.monthly_premium < cheapest[1].monthly_premium:
                cheapest = (plan, cost)
    return cheapest


def get_available_iua_levels(catalog: PlanCatalog) -> list[float]:
    """Every IUA tier published anywhere in the catalog, ascending."""
    return sorted({
        cost.initial_unshared_amount
        for plan in catalog
        for row in plan.plan_matrix
        for cost in row.costs
    })


def get_plan_comparison(
    catalog: PlanCatalog,
    age: int,
    household_type: HouseholdType | str,
    max_iua: float | None = None,
    visit_frequency: str | None = None,
    coverage_type: str | None = None,
) -> list[PlanComparisonRow]:
    """One row per eligible cost option, cheapest annual cost first."""
    comparison: list[PlanComparisonRow] = []
    for plan in catalog:
        dpc = is_dpc_plan(plan)
        for cost in _eligible_costs(plan, age, household_type, max_iua):
            comparison.append(PlanComparisonRow(
                plan_id=plan.id,
                provider_name=plan.provider_name,
                plan_name=plan.plan_name,
                monthly_premium=cost.monthly_premium,
                initial_unshared_amount=cost.initial_unshared_amount,
                annual_cost=calculate_annual_cost(
                    cost.monthly_premium,
                    cost.initial_unshared_amount,
                    visit_frequency,
                    coverage_type,
                    is_dpc_plan=dpc,
                ),
            ))
    comparison.sort(key=lambda r: r.annual_cost)
    return comparison
