"""Plan scoring engine — eligible plans → scored recommendations, best first."""

from __future__ import annotations

import logging
from statistics import fmean

from healthshare.schemas.questionnaire import QuestionnaireResponse
from healthshare.schemas.recommendation import EligiblePlan, ScoredRecommendation
from healthshare.scoring.factors import score_factors

logger = logging.getLogger(__name__)


class PlanScoringService:
    """Scores eligible plans on premium, IUA alignment and expected annual cost.

    The total is the unweighted mean of the sub-scores, computed from each
    plan's first eligible cost option.

    Usage:
        scorer = PlanScoringService()
        ranked = scorer.score_plans(eligible, questionnaire)
        # ranked[0].score -> 93.33
    """

    def score_plan(self, eligible: EligiblePlan, questionnaire: QuestionnaireResponse) -> ScoredRecommendation:
        factors = score_factors(eligible.eligible_prices[0], questionnaire)
        return ScoredRecommendation(
            plan=eligible.plan,
            eligible_prices=eligible.eligible_prices,
            score=fmean(f.score for f in factors),
            factors=factors,
            explanation=[f.explanation for f in factors],
        )

    def score_plans(
        self,
        eligible_plans: list[EligiblePlan],
        questionnaire: QuestionnaireResponse,
    ) -> list[ScoredRecommendation]:
        """Score every plan and sort by score, highest first.

        The sort is stable: plans with equal scores keep their input order.
        """
        scored: list[ScoredRecommendation] = []
        for eligible in eligible_plans:
            if not eligible.eligible_prices:
                logger.warning("Plan %s has no eligible prices, skipping", eligible.plan.id)
                continue
            result = self.score_plan(eligible, questionnaire)
            logger.debug(
                "Score %s: %s total=%.2f",
                eligible.plan.id,
                " ".join(f"{f.factor}={f.score:.0f}" for f in result.factors),
                result.score,
            )
            scored.append(result)

        return sorted(scored, key=lambda s: -s.score)
