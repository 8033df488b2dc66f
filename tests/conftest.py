"""Shared fixtures: a small hand-built catalog and questionnaire factory."""

from __future__ import annotations

import pytest

from healthshare.catalog import PlanCatalog, parse_catalog
from healthshare.schemas.questionnaire import QuestionnaireResponse


def _row(bracket: str, household: str, *costs: tuple[float, float]) -> dict:
    return {
        "ageBracket": bracket,
        "householdType": household,
        "costs": [{"monthlyPremium": p, "initialUnsharedAmount": iua} for p, iua in costs],
    }


ALPHA = {
    "id": "alpha-standard",
    "providerName": "Alpha Share",
    "planName": "Standard",
    "ageRules": {"type": "standard"},
    "maxCoverage": "$1,000,000 per incident",
    "maternity": {"covered": True, "waitingPeriodMonths": 6},
    "preExistingConditions": {"waitingPeriodMonths": 12},
    "planMatrix": [
        _row("18-29", "Member Only", (180, 1000), (150, 2500)),
        _row("30-39", "Member Only", (251, 1000), (201, 2500), (150, 5000)),
        _row("30-39", "Member & Spouse", (450, 1000), (380, 2500)),
        _row("30-39", "Member & Family", (640, 1000), (520, 2500), (430, 5000)),
        _row("50-64", "Member Only", (520, 1000), (410, 2500)),
    ],
}

BETA = {
    "id": "beta-crowd",
    "providerName": "Beta Crowd",
    "planName": "Membership",
    "ageRules": {
        "type": "custom",
        "customBrackets": {"ranges": [
            {"min": 18, "max": 54, "bracket": "18-54"},
            {"min": 55, "max": 64, "bracket": "55-64"},
        ]},
    },
    "planMatrix": [
        _row("18-54", "Member Only", (195, 500)),
        _row("18-54", "Member & Family", (640, 500)),
        _row("55-64", "Member Only", (335, 500)),
    ],
}

GAMMA = {
    "id": "gamma-dpc",
    "providerName": "Gamma Health",
    "planName": "Access +DPC",
    "ageRules": {
        "type": "custom",
        "customBrackets": {"ranges": [
            {"min": 18, "max": 39, "bracket": "18-39"},
            {"min": 40, "max": 64, "bracket": "40-64"},
        ]},
    },
    "maternity": {"covered": False},
    "preExistingConditions": {"waitingPeriodMonths": 24},
    "planMatrix": [
        _row("18-39", "Member Only", (220, 1000), (160, 5000)),
        _row("18-39", "Member & Family", (700, 1000)),
        _row("18-39", "Member & Family (5+)", (900, 1000)),
    ],
}


@pytest.fixture()
def plan_records() -> list[dict]:
    return [ALPHA, BETA, GAMMA]


@pytest.fixture()
def catalog(plan_records) -> PlanCatalog:
    return parse_catalog(plan_records)


@pytest.fixture()
def alpha(catalog):
    return catalog.get("alpha-standard")


@pytest.fixture()
def beta(catalog):
    return catalog.get("beta-crowd")


@pytest.fixture()
def gamma(catalog):
    return catalog.get("gamma-dpc")


@pytest.fixture()
def make_questionnaire():
    """Factory: questionnaire for a 35-year-old single member, overridable."""

    def _make(**overrides) -> QuestionnaireResponse:
        data = {"age": 35, "coverage_type": "just_me"}
        data.update(overrides)
        return QuestionnaireResponse(**data)

    return _make
