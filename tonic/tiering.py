# tiering.py

from typing import Iterable

from tonic.catalog import Catalog
from tonic.data_model import Tier

CORE_THRESHOLD = 5
TARGETED_THRESHOLD = 3


def tier_score(name: str, goals: Iterable[str], catalog: Catalog) -> int:
    """Sum of this supplement's weights over the goals the user actually picked."""
    return sum(catalog.weight(name, goal) for goal in set(goals or []))


def assign_tier(score: int) -> Tier:
    if score >= CORE_THRESHOLD:
        return Tier.CORE
    if score >= TARGETED_THRESHOLD:
        return Tier.TARGETED
    return Tier.SUPPORTING
