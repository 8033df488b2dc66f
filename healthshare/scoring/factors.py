"""Scoring factor rules — each maps one cost option to a 0–100 sub-score.

Step functions, evaluated top to bottom:

  Monthly Cost               <200 → 100, <400 → 80, <600 → 60, <800 → 40, else 20
  Initial Unshared Amount    lower_monthly:  IUA > 2500 → 100, else 60
                             higher_monthly: IUA < 2500 → 100, else 60
                             otherwise 80
  Expected Annual Costs      premium × 12 + expected out-of-pocket
                             <5000 → 100, <10000 → 80, <15000 → 60, else 40
"""

from __future__ import annotations

from healthshare.models.enums import AnnualHealthcareSpend, ExpensePreference
from healthshare.schemas.catalog import CostOption
from healthshare.schemas.questionnaire import QuestionnaireResponse
from healthshare.schemas.recommendation import ScoringFactor

MONTHLY_COST = "Monthly Cost"
INITIAL_UNSHARED_AMOUNT = "Initial Unshared Amount"
EXPECTED_ANNUAL_COSTS = "Expected Annual Costs"

PREMIUM_THRESHOLDS: tuple[tuple[float, float], ...] = (
    (200, 100),
    (400, 80),
    (600, 60),
    (800, 40),
)
PREMIUM_FLOOR_SCORE = 20

ANNUAL_COST_THRESHOLDS: tuple[tuple[float, float], ...] = (
    (5000, 100),
    (10000, 80),
    (15000, 60),
)
ANNUAL_COST_FLOOR_SCORE = 40

IUA_PIVOT = 2500
IUA_ALIGNED_SCORE = 100
IUA_MISALIGNED_SCORE = 60
IUA_NEUTRAL_SCORE = 80

EXPECTED_OUT_OF_POCKET: dict[AnnualHealthcareSpend, int] = {
    AnnualHealthcareSpend.LESS_1000: 500,
    AnnualHealthcareSpend.BETWEEN_1000_5000: 3000,
    AnnualHealthcareSpend.MORE_5000: 7500,
}
DEFAULT_OUT_OF_POCKET = 500


def _step_score(value: float, thresholds: tuple[tuple[float, float], ...], floor: float) -> float:
    for limit, score in thresholds:
        if value < limit:
            return score
    return floor


def _fmt_usd(amount: float) -> str:
    return f"${amount:,.0f}" if float(amount).is_integer() else f"${amount:,.2f}"


def expected_out_of_pocket(annual_healthcare_spend: str | None) -> int:
    """Expected yearly spend for a questionnaire bucket; unknown buckets count as the lowest."""
    try:
        return EXPECTED_OUT_OF_POCKET[AnnualHealthcareSpend(annual_healthcare_spend)]
    except ValueError:
        return DEFAULT_OUT_OF_POCKET


def monthly_premium_factor(cost: CostOption) -> ScoringFactor:
    score = _step_score(cost.monthly_premium, PREMIUM_THRESHOLDS, PREMIUM_FLOOR_SCORE)
    return ScoringFactor(
        factor=MONTHLY_COST,
        score=score,
        explanation=f"Monthly premium: {_fmt_usd(cost.monthly_premium)}",
    )


def iua_alignment_factor(cost: CostOption, expense_preference: str | None) -> ScoringFactor:
    """Reward the IUA side of the premium/IUA trade-off the user asked for."""
    iua = cost.initial_unshared_amount

    if expense_preference == ExpensePreference.LOWER_MONTHLY:
        score = IUA_ALIGNED_SCORE if iua > IUA_PIVOT else IUA_MISALIGNED_SCORE
        reason = "a higher IUA keeps monthly payments down"
    elif expense_preference == ExpensePreference.HIGHER_MONTHLY:
        score = IUA_ALIGNED_SCORE if iua < IUA_PIVOT else IUA_MISALIGNED_SCORE
        reason = "a lower IUA limits what you pay per incident"
    else:
        score = IUA_NEUTRAL_SCORE
        reason = "no monthly/IUA preference given"

    return ScoringFactor(
        factor=INITIAL_UNSHARED_AMOUNT,
        score=score,
        explanation=f"Initial unshared amount: {_fmt_usd(iua)} ({reason})",
    )


def annual_cost_factor(cost: CostOption, annual_healthcare_spend: str | None) -> ScoringFactor:
    total = cost.monthly_premium * 12 + expected_out_of_pocket(annual_healthcare_spend)
    score = _step_score(total, ANNUAL_COST_THRESHOLDS, ANNUAL_COST_FLOOR_SCORE)
    return ScoringFactor(
        factor=EXPECTED_ANNUAL_COSTS,
        score=score,
        explanation=f"Total annual cost: {_fmt_usd(total)} based on your expected healthcare usage",
    )


def score_factors(cost: CostOption, questionnaire: QuestionnaireResponse) -> list[ScoringFactor]:
    """All sub-scores for one cost option, in computation order."""
    return [
        monthly_premium_factor(cost),
        iua_alignment_factor(cost, questionnaire.expense_preference),
        annual_cost_factor(cost, questionnaire.annual_healthcare_spend),
    ]
