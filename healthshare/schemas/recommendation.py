"""Derived records produced per request by the matching, scoring and aggregation stages.

Never persisted. Serialized names (``eligiblePrices``, ``score``, ``factors``,
``explanation``) are consumed by the presentation layer and must stay stable.
"""

from __future__ import annotations

from pydantic import Field

from healthshare.schemas.base import CamelModel
from healthshare.schemas.catalog import CostOption, ProviderPlan


class EligiblePlan(CamelModel):
    """A plan whose matrix resolved for the user, with the prices they can pick."""

    plan: ProviderPlan
    eligible_prices: list[CostOption]


class ScoringFactor(CamelModel):
    """One sub-score of the suitability score."""

    factor: str
    score: float
    explanation: str


class ScoredRecommendation(EligiblePlan):
    """Eligible plan with its 0-100 composite score."""

    score: float
    factors: list[ScoringFactor] = Field(default_factory=list)
    explanation: list[str] = Field(default_factory=list)


class Recommendation(CamelModel):
    """Scored plan joined back to its display fields."""

    id: str
    provider_name: str
    plan_name: str
    ranking: int
    score: float
    factors: list[ScoringFactor] = Field(default_factory=list)
    explanation: list[str] = Field(default_factory=list)
    eligible_prices: list[CostOption] = Field(default_factory=list)
    estimated_annual_cost: float | None = None

    max_coverage: str | None = None
    maternity_waiting_period_months: int | None = None
    pre_existing_waiting_period_months: int | None = None
    notes: list[str] = Field(default_factory=list)


class RecommendationsResponse(CamelModel):
    recommendations: list[Recommendation]


class PlanComparisonRow(CamelModel):
    """One cost option of one plan, priced for a side-by-side comparison."""

    plan_id: str
    provider_name: str
    plan_name: str
    monthly_premium: float
    initial_unshared_amount: float
    annual_cost: float
