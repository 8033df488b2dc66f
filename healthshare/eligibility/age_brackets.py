"""Age → pricing bracket resolution.

Pure functions. A ``None`` bracket is not an error: it means the plan's age
rules do not cover this age, and the plan is simply not eligible.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from healthshare.models.enums import StandardAgeBracket
from healthshare.schemas.catalog import AgeRules, CustomAgeRules, StandardAgeRules

# Inclusive bounds of the standard scheme, in ascending order.
STANDARD_BRACKETS: tuple[tuple[int, int, StandardAgeBracket], ...] = (
    (18, 29, StandardAgeBracket.AGE_18_29),
    (30, 39, StandardAgeBracket.AGE_30_39),
    (40, 49, StandardAgeBracket.AGE_40_49),
    (50, 64, StandardAgeBracket.AGE_50_64),
)

_BRACKET_RE = re.compile(r"^(\d+)-(\d+)$")
_WILDCARD_BRACKETS = frozenset({"all", "any"})


def get_standard_age_bracket(age: int) -> str | None:
    """Map an age onto the standard 4-bucket scheme (18–64 inclusive)."""
    for low, high, bracket in STANDARD_BRACKETS:
        if low <= age <= high:
            return bracket.value
    return None


def get_age_bracket(age: int, age_rules: AgeRules) -> str | None:
    """Resolve the bracket label a plan prices this age on.

    Custom ranges are scanned in declaration order; the first inclusive match wins.
    """
    match age_rules:
        case StandardAgeRules():
            return get_standard_age_bracket(age)
        case CustomAgeRules(custom_brackets=brackets):
            for age_range in brackets.ranges:
                if age_range.min <= age <= age_range.max:
                    return age_range.bracket
            return None
        case _:
            return None


def is_age_in_bracket(age: int, bracket: str) -> bool:
    """Check an age against a bracket label such as ``"30-49"``.

    ``"all"`` and ``"any"`` match every age; labels not in ``N-M`` form never match.
    """
    if bracket in _WILDCARD_BRACKETS:
        return True
    m = _BRACKET_RE.match(bracket)
    if not m:
        return False
    return int(m.group(1)) <= age <= int(m.group(2))


def find_matching_age_brackets(age: int, brackets: Iterable[str]) -> list[str]:
    """All labels in ``brackets`` that contain ``age``, input order preserved."""
    return [b for b in brackets if is_age_in_bracket(age, b)]
