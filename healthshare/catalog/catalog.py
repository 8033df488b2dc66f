"""Immutable in-memory plan catalog.

Built once at load time and passed into the engine explicitly. A matrix index
keyed by (plan id, age bracket, household type) is computed in the
constructor; when a plan publishes the same pair twice the first row wins.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from types import MappingProxyType

from healthshare.models.enums import HouseholdType
from healthshare.schemas.catalog import PlanMatrixRow, ProviderPlan


class PlanCatalog:
    """Ordered, read-only collection of provider plans."""

    __slots__ = ("_plans", "_by_id", "_rows")

    def __init__(self, plans: Iterable[ProviderPlan] = ()) -> None:
        self._plans: tuple[ProviderPlan, ...] = tuple(plans)

        by_id: dict[str, ProviderPlan] = {}
        rows: dict[tuple[str, str, HouseholdType], PlanMatrixRow] = {}
        for plan in self._plans:
            if plan.id in by_id:
                msg = f"Duplicate plan id in catalog: {plan.id!r}"
                raise ValueError(msg)
            by_id[plan.id] = plan
            for row in plan.plan_matrix:
                rows.setdefault((plan.id, row.age_bracket, row.household_type), row)

        self._by_id = MappingProxyType(by_id)
        self._rows = MappingProxyType(rows)

    def __iter__(self) -> Iterator[ProviderPlan]:
        return iter(self._plans)

    def __len__(self) -> int:
        return len(self._plans)

    def __repr__(self) -> str:
        return f"PlanCatalog({len(self._plans)} plans)"

    def get(self, plan_id: str) -> ProviderPlan | None:
        return self._by_id.get(plan_id)

    def row(self, plan_id: str, age_bracket: str, household_type: HouseholdType | str) -> PlanMatrixRow | None:
        """Indexed matrix lookup; unknown household labels never match."""
        try:
            household = HouseholdType(household_type)
        except ValueError:
            return None
        return self._rows.get((plan_id, age_bracket, household))

    def providers(self) -> list[str]:
        """Distinct provider names in catalog order."""
        return list(dict.fromkeys(p.provider_name for p in self._plans))

    def plans_for_provider(self, provider_name: str) -> list[ProviderPlan]:
        return [p for p in self._plans if p.provider_name == provider_name]


class CatalogStore:
    """Holds the current catalog; reloads replace the reference, never the contents.

    Readers should take ``store.current`` once per request and use that value
    for the whole computation.
    """

    def __init__(self, catalog: PlanCatalog) -> None:
        self._catalog = catalog

    @property
    def current(self) -> PlanCatalog:
        return self._catalog

    def swap(self, catalog: PlanCatalog) -> PlanCatalog:
        """Install a new catalog and return the previous one."""
        previous, self._catalog = self._catalog, catalog
        return previous
