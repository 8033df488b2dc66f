"""Domain enums shared by the catalog schemas, the questionnaire and the engine.

All enums use the str mixin so values serialize to JSON unchanged.
"""

from __future__ import annotations

from enum import Enum


class StandardAgeBracket(str, Enum):
    """The four-bucket pricing scheme most providers publish."""

    AGE_18_29 = "18-29"
    AGE_30_39 = "30-39"
    AGE_40_49 = "40-49"
    AGE_50_64 = "50-64"


class HouseholdType(str, Enum):
    """Who is covered under a membership — second key of the plan matrix."""

    MEMBER_ONLY = "Member Only"
    MEMBER_SPOUSE = "Member & Spouse"
    MEMBER_CHILDREN = "Member & Child(ren)"
    MEMBER_FAMILY = "Member & Family"
    MEMBER_FAMILY_5_PLUS = "Member & Family (5+)"


class CoverageType(str, Enum):
    """Coverage selection as asked by the questionnaire."""

    JUST_ME = "just_me"
    ME_SPOUSE = "me_spouse"
    ME_KIDS = "me_kids"
    FAMILY = "family"


class VisitFrequency(str, Enum):
    """Expected doctor visits outside of emergencies."""

    JUST_CHECKUPS = "just_checkups"
    FEW_MONTHS = "few_months"
    MONTHLY_PLUS = "monthly_plus"


class ExpensePreference(str, Enum):
    """Trade-off between monthly premium and initial unshared amount."""

    LOWER_MONTHLY = "lower_monthly"
    BALANCED = "balanced"
    HIGHER_MONTHLY = "higher_monthly"


class AnnualHealthcareSpend(str, Enum):
    """Self-reported yearly out-of-pocket healthcare spend bucket."""

    LESS_1000 = "less_1000"
    BETWEEN_1000_5000 = "1000_5000"
    MORE_5000 = "more_5000"
