"""Questionnaire → HouseholdType, the second key of every plan matrix.

Rule:
- ``coverage_type`` wins when present (unknown values resolve to None);
- otherwise ``household_size``: 1 → Member Only, 2 → Member & Spouse,
  3–4 → Member & Child(ren), 5+ → Member & Family (5+);
- neither answered → Member Only.

Plans that publish no dedicated 5+ row are priced on their Member & Family row.
"""

from __future__ import annotations

from healthshare.models.enums import CoverageType, HouseholdType
from healthshare.schemas.questionnaire import QuestionnaireResponse

COVERAGE_TYPE_MAP: dict[CoverageType, HouseholdType] = {
    CoverageType.JUST_ME: HouseholdType.MEMBER_ONLY,
    CoverageType.ME_SPOUSE: HouseholdType.MEMBER_SPOUSE,
    CoverageType.ME_KIDS: HouseholdType.MEMBER_CHILDREN,
    CoverageType.FAMILY: HouseholdType.MEMBER_FAMILY,
}

# Matrix rows to try, in order, for a resolved household type.
_ROW_FALLBACKS: dict[HouseholdType, tuple[HouseholdType, ...]] = {
    HouseholdType.MEMBER_FAMILY_5_PLUS: (HouseholdType.MEMBER_FAMILY_5_PLUS, HouseholdType.MEMBER_FAMILY),
}


def household_type_from_coverage(coverage_type: str) -> HouseholdType | None:
    try:
        return COVERAGE_TYPE_MAP[CoverageType(coverage_type)]
    except ValueError:
        return None


def household_type_from_size(household_size: int) -> HouseholdType | None:
    if household_size < 1:
        return None
    if household_size == 1:
        return HouseholdType.MEMBER_ONLY
    if household_size == 2:
        return HouseholdType.MEMBER_SPOUSE
    if household_size <= 4:
        return HouseholdType.MEMBER_CHILDREN
    return HouseholdType.MEMBER_FAMILY_5_PLUS


def resolve_household_type(questionnaire: QuestionnaireResponse) -> HouseholdType | None:
    """Resolve the user's household type; None means no plan can match."""
    if questionnaire.coverage_type:
        return household_type_from_coverage(questionnaire.coverage_type)
    if questionnaire.household_size is not None:
        return household_type_from_size(questionnaire.household_size)
    return HouseholdType.MEMBER_ONLY


def coerce_household_type(value: HouseholdType | CoverageType | str | int) -> HouseholdType | None:
    """Accept a matrix label, a coverage answer or a household size."""
    if isinstance(value, HouseholdType):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return household_type_from_size(value)
    try:
        return HouseholdType(value)
    except ValueError:
        return household_type_from_coverage(value)


def row_candidates(household_type: HouseholdType) -> tuple[HouseholdType, ...]:
    """Household labels to look up, most specific first."""
    return _ROW_FALLBACKS.get(household_type, (household_type,))
