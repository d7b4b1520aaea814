# goal_scorer.py

from typing import Dict, Iterable, List, Tuple

from tonic.catalog import Catalog


def score_candidates(goals: Iterable[str], catalog: Catalog) -> Dict[str, int]:
    """
    Supplement name → summed evidence weight across the user's goals.
    A supplement relevant to three goals outranks one relevant to a single goal
    at the same per-goal weight.
    """
    scores: Dict[str, int] = {}
    for goal in sorted(set(goals or [])):
        for entry in catalog.goal_mappings(goal):
            scores[entry.name] = scores.get(entry.name, 0) + entry.weight
    return scores


def rank_candidates(scores: Dict[str, int]) -> List[Tuple[str, int]]:
    """Score descending, then name ascending so ties are reproducible."""
    return sorted(scores.items(), key=lambda kv: (-kv[1], kv[0]))


def matched_goals(name: str, goals: Iterable[str], catalog: Catalog) -> List[str]:
    """User goals this supplement is mapped to, strongest evidence first."""
    goals = list(goals or [])
    hits = [(catalog.weight(name, g), g) for g in goals if catalog.weight(name, g) > 0]
    order = {g: i for i, g in enumerate(goals)}
    hits.sort(key=lambda wg: (-wg[0], order[wg[1]]))
    return [g for _, g in hits]
