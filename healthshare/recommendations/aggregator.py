"""Recommendation aggregator — scored plans joined back to display fields.

Also hosts the end-to-end pipeline (match → score → aggregate) and the IUA
preference derivation the questionnaire endpoint applies.
"""

from __future__ import annotations

from healthshare.calculators.annual_cost import calculate_annual_cost, is_dpc_plan
from healthshare.catalog.catalog import PlanCatalog
from healthshare.eligibility.matching import PlanMatchingService
from healthshare.models.enums import ExpensePreference
from healthshare.recommendations.notes import coverage_notes
from healthshare.schemas.questionnaire import QuestionnaireResponse
from healthshare.schemas.recommendation import Recommendation, ScoredRecommendation
from healthshare.scoring.engine import PlanScoringService

DEFAULT_IUA_PREFERENCE = "1000"
HIGH_CAPACITY_IUA = "5000"


def _estimated_annual_cost(
    scored: ScoredRecommendation,
    questionnaire: QuestionnaireResponse | None,
) -> float | None:
    if not scored.eligible_prices:
        return None
    cost = scored.eligible_prices[0]
    return calculate_annual_cost(
        cost.monthly_premium,
        cost.initial_unshared_amount,
        questionnaire.visit_frequency if questionnaire else None,
        questionnaire.coverage_type if questionnaire else None,
        is_dpc_plan=is_dpc_plan(scored.plan),
    )


def build_recommendations(
    scored: list[ScoredRecommendation],
    questionnaire: QuestionnaireResponse | None = None,
) -> list[Recommendation]:
    """Join scored plans to provider/plan names and coverage details.

    Rankings are 1-based and follow the input order.
    """
    recommendations: list[Recommendation] = []
    for ranking, item in enumerate(scored, start=1):
        plan = item.plan
        recommendations.append(Recommendation(
            id=plan.id,
            provider_name=plan.provider_name,
            plan_name=plan.plan_name,
            ranking=ranking,
            score=item.score,
            factors=item.factors,
            explanation=item.explanation,
            eligible_prices=item.eligible_prices,
            estimated_annual_cost=_estimated_annual_cost(item, questionnaire),
            max_coverage=plan.max_coverage,
            maternity_waiting_period_months=plan.maternity.waiting_period_months,
            pre_existing_waiting_period_months=plan.pre_existing_conditions.waiting_period_months,
            notes=coverage_notes(plan, questionnaire) if questionnaire else [],
        ))
    return recommendations


def derive_iua_preference(questionnaire: QuestionnaireResponse) -> str:
    """Pick the IUA tier to filter on from the user's financial capacity.

    Capacity up to $1,000 is used as-is (so a $500 capacity surfaces $500-only
    plans). Above that, lower_monthly users get the $5,000 tier and everyone
    else the $1,000 tier. Missing or non-numeric capacity means $1,000.
    """
    capacity = questionnaire.financial_capacity_amount
    if capacity is None:
        return DEFAULT_IUA_PREFERENCE
    if capacity > 1000:
        if questionnaire.expense_preference == ExpensePreference.LOWER_MONTHLY:
            return HIGH_CAPACITY_IUA
        return DEFAULT_IUA_PREFERENCE
    return questionnaire.financial_capacity


def with_iua_preference(questionnaire: QuestionnaireResponse) -> QuestionnaireResponse:
    """Copy of the questionnaire with an IUA preference filled in when missing."""
    if questionnaire.iua_preference is not None:
        return questionnaire
    return questionnaire.model_copy(update={"iua_preference": derive_iua_preference(questionnaire)})


def recommend(catalog: PlanCatalog, questionnaire: QuestionnaireResponse) -> list[Recommendation]:
    """Run matching, scoring and aggregation for one questionnaire."""
    eligible = PlanMatchingService(catalog).find_eligible_plans(questionnaire)
    if not eligible:
        return []
    scored = PlanScoringService().score_plans(eligible, questionnaire)
    return build_recommendations(scored, questionnaire)
