"""Eligibility filter — questionnaire × catalog → plans the user qualifies for.

Pure orchestrator over the catalog value it is given: no I/O, no mutation.
Result order is catalog order.
"""

from __future__ import annotations

import logging

from healthshare.catalog.catalog import PlanCatalog
from healthshare.eligibility.age_brackets import get_age_bracket
from healthshare.eligibility.household import resolve_household_type, row_candidates
from healthshare.eligibility.plan_costs import filter_costs_by_iua
from healthshare.models.enums import HouseholdType
from healthshare.schemas.catalog import PlanMatrixRow, ProviderPlan
from healthshare.schemas.questionnaire import QuestionnaireResponse
from healthshare.schemas.recommendation import EligiblePlan

logger = logging.getLogger(__name__)


class PlanMatchingService:
    """Filters a catalog down to the plans a questionnaire qualifies for."""

    def __init__(self, catalog: PlanCatalog) -> None:
        self.catalog = catalog

    def _matrix_row(self, plan: ProviderPlan, age_bracket: str, household_type: HouseholdType) -> PlanMatrixRow | None:
        for candidate in row_candidates(household_type):
            row = self.catalog.row(plan.id, age_bracket, candidate)
            if row is not None:
                return row
        return None

    def _match_plan(
        self,
        plan: ProviderPlan,
        questionnaire: QuestionnaireResponse,
        household_type: HouseholdType,
    ) -> EligiblePlan | None:
        age_bracket = get_age_bracket(questionnaire.age, plan.age_rules)
        if age_bracket is None:
            return None

        row = self._matrix_row(plan, age_bracket, household_type)
        if row is None:
            return None

        # Strict: no nearest-tier fallback when the preferred IUA is not offered
        prices = filter_costs_by_iua(row.costs, questionnaire.iua_preference)
        if not prices:
            return None

        return EligiblePlan(plan=plan, eligible_prices=prices)

    def find_eligible_plans(self, questionnaire: QuestionnaireResponse) -> list[EligiblePlan]:
        """Evaluate every plan in the catalog against the questionnaire.

        An empty list means nothing matched; it is not an error.
        """
        household_type = resolve_household_type(questionnaire)
        if household_type is None:
            logger.debug(
                "No household type for coverage_type=%r household_size=%r",
                questionnaire.coverage_type, questionnaire.household_size,
            )
            return []

        eligible: list[EligiblePlan] = []
        for plan in self.catalog:
            match = self._match_plan(plan, questionnaire, household_type)
            if match is not None:
                eligible.append(match)

        logger.debug(
            "Eligibility: %d/%d plans for age=%d household=%s iua=%s",
            len(eligible), len(self.catalog), questionnaire.age,
            household_type.value, questionnaire.iua_preference,
        )
        return eligible
