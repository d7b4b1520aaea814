# drug_interaction_checker.py

from typing import List, Set

from tonic.catalog import Catalog
from tonic.data_model import InteractionWarning, SupplementDefinition, UserProfile


def medication_interaction_keys(user: UserProfile, catalog: Catalog) -> Set[str]:
    """Interaction keys for everything in the user's medication list."""
    return catalog.collect_interaction_keys(user.medications or [])


def live_interaction_warnings(
    supplement: SupplementDefinition,
    user: UserProfile,
    catalog: Catalog,
) -> List[InteractionWarning]:
    """
    Every interaction between this supplement and the user's medications, keep
    and remove severities alike. Used for manual adds, which skip the automatic
    filter but still have to show what it would have flagged.
    """
    keys = medication_interaction_keys(user, catalog)
    if not keys:
        return []
    return catalog.check_interactions(supplement.id, keys).interactions
