"""Eligibility engine — age brackets, household types, matrix lookup and plan matching."""

from healthshare.eligibility.age_brackets import (
    find_matching_age_brackets,
    get_age_bracket,
    get_standard_age_bracket,
    is_age_in_bracket,
)
from healthshare.eligibility.household import coerce_household_type, resolve_household_type
from healthshare.eligibility.matching import PlanMatchingService
from healthshare.eligibility.plan_costs import (
    filter_costs_by_iua,
    find_cheapest_plan,
    find_plan_costs,
    find_plan_row,
    get_available_iua_levels,
    get_plan_comparison,
    get_plan_cost,
)

__all__ = [
    "PlanMatchingService",
    "get_standard_age_bracket",
    "get_age_bracket",
    "is_age_in_bracket",
    "find_matching_age_brackets",
    "resolve_household_type",
    "coerce_household_type",
    "find_plan_row",
    "find_plan_costs",
    "filter_costs_by_iua",
    "get_plan_cost",
    "find_cheapest_plan",
    "get_available_iua_levels",
    "get_plan_comparison",
]
