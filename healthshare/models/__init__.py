"""Domain enums for the healthshare matcher."""

from __future__ import annotations

from healthshare.models.enums import (
    AnnualHealthcareSpend,
    CoverageType,
    ExpensePreference,
    HouseholdType,
    StandardAgeBracket,
    VisitFrequency,
)

__all__ = [
    "AnnualHealthcareSpend",
    "CoverageType",
    "ExpensePreference",
    "HouseholdType",
    "StandardAgeBracket",
    "VisitFrequency",
]
