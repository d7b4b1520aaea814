# diversity_selector.py

from typing import Dict, List, Set

from tonic.catalog import Catalog
from tonic.data_model import SupplementDefinition, UserProfile
from tonic.goal_scorer import rank_candidates

MAX_PLAN_SIZE = 7
MAX_PER_CATEGORY = 2


def select_supplements(
    scores: Dict[str, int],
    excluded: Set[str],
    catalog: Catalog,
    user: UserProfile,
) -> List[SupplementDefinition]:
    """
    Highest-scoring candidates up to MAX_PLAN_SIZE, at most MAX_PER_CATEGORY per
    category. Diet-mandated additions are appended afterwards and are exempt
    from both limits.
    """
    selected: List[SupplementDefinition] = []
    per_category: Dict[str, int] = {}

    for name, _score in rank_candidates(scores):
        if len(selected) >= MAX_PLAN_SIZE:
            break
        if name in excluded:
            continue
        supp = catalog.supplement(name)
        if supp is None:
            continue
        if per_category.get(supp.category, 0) >= MAX_PER_CATEGORY:
            continue
        selected.append(supp)
        per_category[supp.category] = per_category.get(supp.category, 0) + 1

    for name in catalog.diet_additions(user.diet_type):
        if name in excluded or any(s.name == name for s in selected):
            continue
        supp = catalog.supplement(name)
        if supp is not None:
            selected.append(supp)

    return selected
