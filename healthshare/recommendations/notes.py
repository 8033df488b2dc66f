"""Coverage notes attached to each recommendation.

Reads the plan's coverage attributes against the health answers of the
questionnaire and produces short, user-facing notes (maternity, pre-existing
conditions, bundled primary care).
"""

from __future__ import annotations

from healthshare.calculators.annual_cost import is_dpc_plan
from healthshare.schemas.catalog import ProviderPlan
from healthshare.schemas.questionnaire import QuestionnaireResponse


def coverage_notes(plan: ProviderPlan, questionnaire: QuestionnaireResponse) -> list[str]:
    """Generate coverage notes for one plan, in a fixed order."""
    notes: list[str] = []

    # 1. Maternity — pregnant now or planning
    _note_maternity(plan, questionnaire, notes)

    # 2. Pre-existing conditions waiting period
    _note_pre_existing(plan, questionnaire, notes)

    # 3. Direct/virtual primary care bundled in the premium
    if is_dpc_plan(plan):
        notes.append("Includes direct or virtual primary care; routine visits are covered by the membership.")

    return notes


def _note_maternity(plan: ProviderPlan, questionnaire: QuestionnaireResponse, notes: list[str]) -> None:
    if not questionnaire.expects_pregnancy:
        return

    maternity = plan.maternity
    if not maternity.covered:
        notes.append(f"{plan.plan_name} does not include sharing for maternity expenses.")
        return

    if maternity.waiting_period_months:
        notes.append(
            f"Maternity expenses are shareable after a {maternity.waiting_period_months}-month waiting period."
        )
    else:
        notes.append("Maternity expenses are shareable from the start of membership.")


def _note_pre_existing(plan: ProviderPlan, questionnaire: QuestionnaireResponse, notes: list[str]) -> None:
    if not questionnaire.pre_existing:
        return

    months = plan.pre_existing_conditions.waiting_period_months
    if months:
        notes.append(f"Pre-existing conditions have a {months}-month waiting period before sharing.")
    else:
        notes.append("Check the member guidelines for how pre-existing conditions are shared.")
