"""Cost calculators — annual cost estimate and visit-cost assumptions."""

from healthshare.calculators.annual_cost import (
    calculate_annual_cost,
    expected_visits,
    household_multiplier,
    is_dpc_plan,
    visit_frequency_cost,
)

__all__ = [
    "calculate_annual_cost",
    "expected_visits",
    "household_multiplier",
    "is_dpc_plan",
    "visit_frequency_cost",
]
