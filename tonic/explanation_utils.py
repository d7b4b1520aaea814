# explanation_utils.py
"""
Per-item narrative text: why a supplement is in the plan, how the dose was
chosen, what to look for, and how it interacts with the rest of the plan and
the user's medications.

Every function here is total. Missing catalog data produces generic text
rather than an exception.
"""

import re
from typing import Dict, Iterable, List, Optional

from tonic.catalog import Catalog
from tonic.data_model import (
    HealthGoal,
    InteractionAction,
    InteractionWarning,
    Sex,
    SupplementDefinition,
    UserProfile,
)
from tonic.dosage_calculator import (
    HIGH_WEIGHT_LBS,
    IRON,
    IRON_RDA_FEMALE,
    IRON_RDA_MALE,
    SENIOR_AGE,
    SENIOR_REDUCED,
    VITAMIN_D,
    VITAMIN_D_HIGH_DOSE,
)

WHAT_TO_LOOK_FOR_SLOTS = ("caffeine_note", "stress_note", "exercise_note")
_SLOT_PATTERN = re.compile(r"\{([a-z_]+)\}")

_GOAL_COUNT_CONNECTORS = {
    1: "one of your top goals",
    2: "two of your top goals",
    3: "three of your top goals",
}

_ACTION_SENTENCES = {
    InteractionAction.SEPARATE_TIMING: "Take this at least 4 hours apart from your {drug} medication: {mechanism}.",
    InteractionAction.MONITOR: "Watch for changes alongside your {drug} medication: {mechanism}.",
    InteractionAction.ADJUST_DOSE: "Ask your doctor whether your {drug} dose needs adjusting: {mechanism}.",
    InteractionAction.OTHER: "Check with your doctor before combining this with your {drug} medication: {mechanism}.",
}

NO_CONFLICTS = "No known conflicts with your current medications."
NO_MEDICATIONS = "No medications reported, so no interaction concerns were found."


def join_phrases(parts: List[str]) -> str:
    """'a', 'a and b', 'a, b, and c'."""
    parts = [p for p in parts if p]
    if not parts:
        return ""
    if len(parts) == 1:
        return parts[0]
    if len(parts) == 2:
        return f"{parts[0]} and {parts[1]}"
    return ", ".join(parts[:-1]) + f", and {parts[-1]}"


def goal_count_connector(count: int) -> str:
    return _GOAL_COUNT_CONNECTORS.get(count, "several of your top goals")


def goal_descriptor(goal: str) -> str:
    try:
        return HealthGoal(goal).descriptor
    except ValueError:
        return goal.replace("_", " ")


def _diet_sentence(name: str, user: UserProfile, catalog: Catalog) -> Optional[str]:
    if not catalog.is_diet_addition(name, user.diet_type):
        return None
    diet = user.diet_type.value
    reason = catalog.diet_addition_reason(name) or f"it is hard to get enough from a {diet} diet"
    return f"Because you follow a {diet} diet, this covers a common gap: {reason}."


def build_why_included(name: str, matched: List[str], user: UserProfile, catalog: Catalog) -> str:
    """
    Opening clause from the phrase table, then the matched goals (strongest
    first) and a goal-count connector. Diet-mandated items with no goal match
    explain the diet instead.
    """
    diet_line = _diet_sentence(name, user, catalog)

    if not matched:
        if diet_line:
            return f"{name} was added for your {user.diet_type.value} diet. {diet_line}"
        return f"{name} was included based on your overall health profile."

    phrase = catalog.why_phrase(name)
    opening = f"{name} {phrase}." if phrase else f"{name} was selected for its targeted benefits."
    goals = join_phrases([goal_descriptor(g) for g in matched])
    text = f"{opening} It targets {goals}, {goal_count_connector(len(matched))}."
    if diet_line:
        text = f"{text} {diet_line}"
    return text


def build_dosage_rationale(supplement: SupplementDefinition, user: UserProfile) -> str:
    """Catalog rationale plus one sentence per personalization rule that fired."""
    sentences = [supplement.dosage_rationale] if supplement.dosage_rationale else []

    if user.weight_lbs is not None and user.weight_lbs > HIGH_WEIGHT_LBS and supplement.name == VITAMIN_D:
        sentences.append(
            f"Your dose is raised to {int(VITAMIN_D_HIGH_DOSE)} IU because vitamin D needs scale with body weight."
        )

    if supplement.name == IRON:
        if user.sex == Sex.FEMALE:
            sentences.append(
                f"Women need more iron ({int(IRON_RDA_FEMALE)}mg) to replace monthly losses, so your dose is set to match."
            )
        elif user.sex == Sex.MALE:
            sentences.append(
                f"Men need far less iron ({int(IRON_RDA_MALE)}mg), so your dose is kept low to avoid excess storage."
            )

    if user.age is not None and user.age > SENIOR_AGE and supplement.name in SENIOR_REDUCED:
        sentences.append("Your dose is reduced by 25% as a precaution for adults over 65.")

    if not sentences:
        return f"{supplement.common_dosage_range} is the commonly studied daily range."
    return " ".join(sentences)


def what_to_look_for_slots(user: UserProfile) -> Dict[str, str]:
    return {
        "caffeine_note": ", especially alongside your daily caffeine" if user.has_caffeine_intake else "",
        "stress_note": ", which matters given your current stress levels" if user.is_high_stress else "",
        "exercise_note": ", particularly on training days" if user.is_active else "",
    }


def render_template(template: str, slots: Dict[str, str]) -> str:
    """
    Fill {caffeine_note} / {stress_note} / {exercise_note}. Any other brace
    text is left as written.
    """
    def fill(match):
        key = match.group(1)
        if key not in WHAT_TO_LOOK_FOR_SLOTS:
            return match.group(0)
        return slots.get(key, "")

    return _SLOT_PATTERN.sub(fill, template or "")


def build_what_to_look_for(supplement: SupplementDefinition, user: UserProfile) -> str:
    return render_template(supplement.what_to_look_for, what_to_look_for_slots(user))


def interaction_sentence(warning: InteractionWarning) -> str:
    return _ACTION_SENTENCES[warning.action].format(drug=warning.label, mechanism=warning.mechanism)


def build_interaction_note(
    supplement: SupplementDefinition,
    user: UserProfile,
    plan_names: Iterable[str],
    warnings: Optional[List[InteractionWarning]],
    catalog: Catalog,
) -> str:
    """
    Synergies first (caffeine from the profile, or partners elsewhere in the
    plan), then one sentence per medication interaction. Without attached
    warnings the catalog is queried directly.
    """
    sentences: List[str] = []
    others = {n for n in plan_names or [] if n != supplement.name}

    for synergy in catalog.synergies(supplement.name):
        if synergy.partner.lower() == "caffeine":
            if user.has_caffeine_intake:
                sentences.append(f"Pairs well with your daily caffeine ({synergy.mechanism}).")
        elif synergy.partner in others:
            sentences.append(f"Pairs well with {synergy.partner} in your plan ({synergy.mechanism}).")

    if not warnings:
        keys = catalog.collect_interaction_keys(user.medications or [])
        warnings = catalog.check_interactions(supplement.id, keys).interactions if keys else []

    if warnings:
        sentences.extend(interaction_sentence(w) for w in warnings)
    elif user.medications:
        sentences.append(NO_CONFLICTS)
    else:
        sentences.append(NO_MEDICATIONS)

    return " ".join(sentences)
