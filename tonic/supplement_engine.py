# supplement_engine.py
from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from tonic.catalog import Catalog
from tonic.data_model import InteractionWarning, Plan, PlanItem, SupplementDefinition, UserProfile
from tonic.diversity_selector import select_supplements
from tonic.dosage_calculator import resolve_dosage
from tonic.drug_interaction_checker import live_interaction_warnings, medication_interaction_keys
from tonic.explanation_utils import (
    build_dosage_rationale,
    build_interaction_note,
    build_what_to_look_for,
    build_why_included,
)
from tonic.goal_scorer import matched_goals, score_candidates
from tonic.plan_summary import build_plan_summary
from tonic.safety_checks import filter_candidates
from tonic.tiering import assign_tier, tier_score

logger = logging.getLogger("uvicorn.error")


class PlanningError(Exception):
    pass


def order_plan_items(items: List[PlanItem]) -> List[PlanItem]:
    """Tier first, then time of day; sort_order rewritten 0..n-1."""
    ordered = sorted(items, key=lambda i: (i.tier.sort_order, i.timing.sort_order))
    for index, item in enumerate(ordered):
        item.sort_order = index
    return ordered


class RecommendationEngine:
    """
    Turns a UserProfile into a Plan using a shared, read-only Catalog.

    Pure computation: no I/O, no randomness, and the profile is never
    modified, so the same profile and catalog always give the same plan.
    """

    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    # --- Generation ---

    def generate_plan(self, user: UserProfile) -> Plan:
        goals = user.goal_keys
        scores = score_candidates(goals, self.catalog)
        logger.debug(f"Scored {len(scores)} candidates for goals {goals}")

        diet_names = self.catalog.diet_additions(user.diet_type)
        keys = medication_interaction_keys(user, self.catalog)
        screened = filter_candidates(set(scores) | set(diet_names), keys, user.allergies, user, self.catalog)

        selected = select_supplements(scores, screened.excluded, self.catalog, user)
        names = [s.name for s in selected]
        logger.debug(f"Selected supplements: {names}")

        items = [
            self._build_item(
                supp,
                user,
                plan_names=names,
                warnings=screened.warnings.get(supp.id, []),
                sort_order=index,
            )
            for index, supp in enumerate(selected)
        ]
        items = order_plan_items(items)
        return Plan(items=items, summary=build_plan_summary(user, items), user_id=user.user_id)

    def build_plan_supplement(
        self,
        supplement: SupplementDefinition,
        user: UserProfile,
        existing_items: Iterable[PlanItem],
    ) -> PlanItem:
        """
        Plan item for a manual add. Same dosage, tier and narrative rules as
        generate_plan, but no filtering: every interaction with the user's
        medications is attached as a warning instead.
        """
        existing = list(existing_items or [])
        names = [i.name for i in existing] + [supplement.name]
        return self._build_item(
            supplement,
            user,
            plan_names=names,
            warnings=live_interaction_warnings(supplement, user, self.catalog),
            sort_order=len(existing),
        )

    # --- Plan edits ---

    def add_supplement(self, supplement: SupplementDefinition, user: UserProfile, plan: Plan) -> PlanItem:
        current = plan.item_named(supplement.name)
        if current is not None:
            return current
        item = self.build_plan_supplement(supplement, user, plan.items)
        plan.items.append(item)
        plan.summary = build_plan_summary(user, plan.items)
        return item

    def add_supplement_by_name(self, name: str, user: UserProfile, plan: Plan) -> PlanItem:
        supplement = self.catalog.supplement(name)
        if supplement is None:
            raise PlanningError(f"Unknown supplement: {name}")
        return self.add_supplement(supplement, user, plan)

    def remove_supplement(self, plan: Plan, name: str, user: Optional[UserProfile] = None) -> PlanItem:
        item = plan.item_named(name)
        if item is None:
            raise PlanningError(f"{name} is not in this plan")
        plan.items.remove(item)
        for index, remaining in enumerate(plan.items):
            remaining.sort_order = index
        if user is not None:
            plan.summary = build_plan_summary(user, plan.items)
        return item

    def set_included(
        self, plan: Plan, name: str, included: bool, user: Optional[UserProfile] = None
    ) -> PlanItem:
        item = plan.item_named(name)
        if item is None:
            raise PlanningError(f"{name} is not in this plan")
        item.is_included = bool(included)
        if user is not None:
            plan.summary = build_plan_summary(user, plan.items)
        return item

    # --- Item construction ---

    def _build_item(
        self,
        supplement: SupplementDefinition,
        user: UserProfile,
        plan_names: List[str],
        warnings: List[InteractionWarning],
        sort_order: int,
    ) -> PlanItem:
        goals = user.goal_keys
        dosage, dosage_text, timing = resolve_dosage(supplement, user)
        matched = matched_goals(supplement.name, goals, self.catalog)
        score = tier_score(supplement.name, goals, self.catalog)

        return PlanItem(
            supplement_id=supplement.id,
            name=supplement.name,
            dosage=dosage_text,
            dosage_mg=dosage,
            timing=timing,
            category=supplement.category.value,
            sort_order=sort_order,
            matched_goals=matched,
            tier_score=score,
            tier=assign_tier(score),
            why_included=build_why_included(supplement.name, matched, user, self.catalog),
            dosage_rationale=build_dosage_rationale(supplement, user),
            expected_timeline=supplement.expected_timeline,
            what_to_look_for=build_what_to_look_for(supplement, user),
            form_and_bioavailability=supplement.form_and_bioavailability,
            interaction_note=build_interaction_note(supplement, user, plan_names, warnings, self.catalog),
            evidence_level=supplement.evidence_level.label,
            interaction_warnings=list(warnings),
            research_note=supplement.notes or None,
        )
