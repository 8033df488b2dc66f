"""Scoring engine — multi-factor 0–100 suitability score per eligible plan."""

from healthshare.scoring.engine import PlanScoringService
from healthshare.scoring.factors import (
    annual_cost_factor,
    expected_out_of_pocket,
    iua_alignment_factor,
    monthly_premium_factor,
    score_factors,
)

__all__ = [
    "PlanScoringService",
    "score_factors",
    "monthly_premium_factor",
    "iua_alignment_factor",
    "annual_cost_factor",
    "expected_out_of_pocket",
]
