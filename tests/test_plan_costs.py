"""Tests for cost matrix lookup, cheapest plan and plan comparison."""

from __future__ import annotations

from healthshare.eligibility.plan_costs import (
    filter_costs_by_iua,
    find_cheapest_plan,
    find_plan_costs,
    find_plan_row,
    get_available_iua_levels,
    get_plan_comparison,
    get_plan_cost,
)
from healthshare.models.enums import HouseholdType


class TestFindPlanCosts:
    def test_regression_row(self, alpha) -> None:
        costs = find_plan_costs(alpha, "30-39", "Member Only")
        assert costs[0].monthly_premium == 251
        assert [c.initial_unshared_amount for c in costs] == [1000, 2500, 5000]

    def test_missing_row_is_none(self, alpha) -> None:
        assert find_plan_costs(alpha, "40-49", "Member Only") is None
        assert find_plan_costs(alpha, "30-39", "Member & Child(ren)") is None

    def test_unknown_household_is_none(self, alpha) -> None:
        assert find_plan_costs(alpha, "30-39", "Extended Clan") is None

    def test_large_family_uses_dedicated_row(self, gamma) -> None:
        row = find_plan_row(gamma, "18-39", HouseholdType.MEMBER_FAMILY_5_PLUS)
        assert row.household_type == HouseholdType.MEMBER_FAMILY_5_PLUS
        assert row.costs[0].monthly_premium == 900

    def test_large_family_falls_back_to_family_row(self, alpha) -> None:
        row = find_plan_row(alpha, "30-39", HouseholdType.MEMBER_FAMILY_5_PLUS)
        assert row.household_type == HouseholdType.MEMBER_FAMILY
        assert row.costs[0].monthly_premium == 640


class TestFilterCostsByIua:
    def test_none_keeps_all(self, alpha) -> None:
        costs = find_plan_costs(alpha, "30-39", "Member Only")
        assert filter_costs_by_iua(costs, None) == costs

    def test_exact_match_only(self, alpha) -> None:
        costs = find_plan_costs(alpha, "30-39", "Member Only")
        assert [c.monthly_premium for c in filter_costs_by_iua(costs, "2500")] == [201]
        assert [c.monthly_premium for c in filter_costs_by_iua(costs, 5000)] == [150]
        assert filter_costs_by_iua(costs, "2000") == []

    def test_non_numeric_preference_matches_nothing(self, alpha) -> None:
        costs = find_plan_costs(alpha, "30-39", "Member Only")
        assert filter_costs_by_iua(costs, "cheap") == []


class TestGetPlanCost:
    def test_with_coverage_type(self, catalog) -> None:
        cost = get_plan_cost(catalog, "alpha-standard", 35, "just_me", "2500")
        assert cost.monthly_premium == 201

    def test_with_household_size(self, catalog) -> None:
        cost = get_plan_cost(catalog, "alpha-standard", 35, 2)
        assert cost.monthly_premium == 450

    def test_without_iua_takes_first_option(self, catalog) -> None:
        assert get_plan_cost(catalog, "alpha-standard", 35, "Member Only").monthly_premium == 251

    def test_no_result_cases(self, catalog) -> None:
        assert get_plan_cost(catalog, "no-such-plan", 35, "just_me") is None
        assert get_plan_cost(catalog, "alpha-standard", 70, "just_me") is None
        assert get_plan_cost(catalog, "alpha-standard", 35, "just_me", "750") is None
        assert get_plan_cost(catalog, "beta-crowd", 35, "me_spouse") is None


class TestCatalogQueries:
    def test_cheapest_overall(self, catalog) -> None:
        plan, cost = find_cheapest_plan(catalog, 35, "Member Only")
        assert plan.id == "alpha-standard"
        assert cost.monthly_premium == 150

    def test_cheapest_under_iua_cap(self, catalog) -> None:
        plan, cost = find_cheapest_plan(catalog, 35, "Member Only", max_iua=1000)
        assert plan.id == "beta-crowd"
        assert cost.monthly_premium == 195

    def test_cheapest_none_when_nothing_eligible(self, catalog) -> None:
        assert find_cheapest_plan(catalog, 80, "Member Only") is None

    def test_available_iua_levels(self, catalog) -> None:
        assert get_available_iua_levels(catalog) == [500, 1000, 2500, 5000]

    def test_comparison_sorted_by_annual_cost(self, catalog) -> None:
        rows = get_plan_comparison(catalog, 35, "Member Only", max_iua=1000)
        assert [r.plan_id for r in rows] == ["beta-crowd", "gamma-dpc", "alpha-standard"]
        assert [r.annual_cost for r in rows] == [2840, 3640, 4012]

    def test_comparison_skips_visit_cost_for_dpc(self, catalog) -> None:
        rows = get_plan_comparison(
            catalog, 35, "Member Only", max_iua=1000,
            visit_frequency="few_months", coverage_type="just_me",
        )
        by_id = {r.plan_id: r.annual_cost for r in rows}
        assert by_id["gamma-dpc"] == 3640
        assert by_id["alpha-standard"] == 4012 + 3 * 175
