# safety_checks.py

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Set

from tonic.catalog import Catalog
from tonic.data_model import DecisionKind, InteractionWarning, UserProfile

logger = logging.getLogger("uvicorn.error")


@dataclass
class FilterResult:
    excluded: Set[str] = field(default_factory=set)
    # supplement id → warnings for candidates kept despite a non-fatal interaction
    warnings: Dict[str, List[InteractionWarning]] = field(default_factory=dict)
    # supplement name → interaction records that forced removal
    removals: Dict[str, List[InteractionWarning]] = field(default_factory=dict)
    reasons: Dict[str, List[str]] = field(default_factory=dict)

    def exclude(self, name: str, reason: str) -> None:
        self.excluded.add(name)
        self.reasons.setdefault(name, []).append(reason)


def allergy_excluded_names(allergies: Iterable[str], catalog: Catalog) -> Dict[str, str]:
    """Supplement name → allergy keyword that excludes it (case-insensitive substring match)."""
    hits: Dict[str, str] = {}
    lowered = [a.lower() for a in allergies or [] if a]
    for keyword in sorted(catalog.allergy_exclusions):
        if any(keyword in allergy for allergy in lowered):
            for name in catalog.allergy_exclusions[keyword]:
                hits.setdefault(name, keyword)
    return hits


def filter_candidates(
    candidate_names: Iterable[str],
    interaction_keys: Set[str],
    allergies: Iterable[str],
    user: UserProfile,
    catalog: Catalog,
) -> FilterResult:
    """
    Decide, per candidate, between clear / keep-with-warnings / remove.

    Order: medication interactions (remove on major/contraindicated, otherwise
    warn), absolute contraindications, allergy keywords, pregnancy/breastfeeding.
    """
    result = FilterResult()
    candidates = sorted(set(candidate_names or []))

    # A. Medication interactions
    if interaction_keys:
        for name in candidates:
            supp = catalog.supplement(name)
            if supp is None:
                continue
            decision = catalog.check_interactions(supp.id, interaction_keys)
            if decision.kind == DecisionKind.REMOVE:
                result.removals[name] = decision.interactions
                drugs = ", ".join(sorted({w.label for w in decision.interactions}))
                result.exclude(name, f"interacts with {drugs}")
            elif decision.kind == DecisionKind.KEEP_WITH_WARNINGS:
                result.warnings[supp.id] = decision.interactions

    # B. Absolute contraindications
    for contraindication in catalog.absolute_contraindications():
        result.exclude(contraindication.supplement_name, f"contraindicated: {contraindication.condition}")

    # C. Allergies
    for name, keyword in sorted(allergy_excluded_names(allergies, catalog).items()):
        result.exclude(name, f"{keyword} allergy")

    # D. Pregnancy / breastfeeding
    if user.is_pregnant_or_breastfeeding:
        for name in sorted(catalog.pregnancy_exclusions):
            result.exclude(name, "not recommended during pregnancy or breastfeeding")

    # an excluded candidate never reaches the plan, so its warnings are dropped
    for name in result.excluded:
        supp = catalog.supplement(name)
        if supp is not None:
            result.warnings.pop(supp.id, None)

    if result.excluded:
        logger.debug(f"Excluded supplements: {dict(sorted(result.reasons.items()))}")
    return result
