"""Recommendation aggregation — display join, coverage notes, end-to-end pipeline."""

from healthshare.recommendations.aggregator import (
    build_recommendations,
    derive_iua_preference,
    recommend,
    with_iua_preference,
)
from healthshare.recommendations.notes import coverage_notes

__all__ = [
    "build_recommendations",
    "coverage_notes",
    "derive_iua_preference",
    "recommend",
    "with_iua_preference",
]
