# plan_summary.py
"""
Plan-level summary: a core sentence, a lifestyle sentence and a tip.

Lifestyle and tip sentences come from ordered rule lists where the first
matching rule wins. Each rule has a topic; the tip chain skips any topic the
lifestyle sentence already used.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Set, Tuple

from tonic.data_model import (
    AlcoholIntake,
    ExerciseFrequency,
    PlanItem,
    SupplementCategory,
    SupplementTiming,
    UserProfile,
)
from tonic.explanation_utils import goal_descriptor, join_phrases

RECOVERY_AIDS = ("Creatine Monohydrate", "Magnesium Glycinate", "Tart Cherry Extract", "Omega-3 (EPA/DHA)")
DIET_GAP_FILLERS = ("Vitamin B Complex", "Vitamin D3 + K2")

_TRAINING_FREQUENCY = {
    ExerciseFrequency.THREE_TO_FOUR: "3-4 times a week",
    ExerciseFrequency.FIVE_PLUS: "5+ times a week",
}


@dataclass(frozen=True)
class SummaryContext:
    user: UserProfile
    items: Tuple[PlanItem, ...]

    @property
    def names(self) -> List[str]:
        return [item.name for item in self.items]

    def has(self, name: str) -> bool:
        return name in self.names

    def present(self, names: Iterable[str]) -> List[str]:
        return [n for n in names if self.has(n)]

    def in_category(self, category: SupplementCategory) -> List[str]:
        return [item.name for item in self.items if item.category == category.value]


@dataclass(frozen=True)
class SummaryRule:
    topic: str
    applies: Callable[[SummaryContext], bool]
    render: Callable[[SummaryContext], str]


def first_matching_rule(
    rules: List[SummaryRule],
    ctx: SummaryContext,
    used_topics: Set[str],
) -> Optional[Tuple[str, str]]:
    """(topic, sentence) of the first rule that applies and whose topic is unused."""
    for rule in rules:
        if rule.topic in used_topics:
            continue
        if rule.applies(ctx):
            return rule.topic, rule.render(ctx)
    return None


# --- Lifestyle rules ---

LIFESTYLE_RULES: List[SummaryRule] = [
    SummaryRule(
        topic="caffeine",
        applies=lambda ctx: ctx.user.has_caffeine_intake and ctx.has("L-Theanine"),
        render=lambda ctx: (
            "Since you drink caffeine daily, L-Theanine pairs with it for calm, focused energy without the jitters."
        ),
    ),
    SummaryRule(
        topic="stress",
        applies=lambda ctx: ctx.user.is_high_stress and bool(ctx.in_category(SupplementCategory.ADAPTOGEN)),
        render=lambda ctx: (
            f"With your stress running high, {join_phrases(ctx.in_category(SupplementCategory.ADAPTOGEN))} "
            "will help your body adapt and recover."
        ),
    ),
    SummaryRule(
        topic="training",
        applies=lambda ctx: ctx.user.is_active and bool(ctx.present(RECOVERY_AIDS)),
        render=lambda ctx: (
            f"Because you train {_TRAINING_FREQUENCY.get(ctx.user.exercise_frequency, 'regularly')}, "
            f"{join_phrases(ctx.present(RECOVERY_AIDS))} will support recovery between sessions."
        ),
    ),
    SummaryRule(
        topic="diet",
        applies=lambda ctx: ctx.user.is_plant_based and bool(ctx.present(DIET_GAP_FILLERS)),
        render=lambda ctx: (
            f"Your {ctx.user.diet_type.value} diet makes B12 and vitamin D harder to get, "
            f"so {join_phrases(ctx.present(DIET_GAP_FILLERS))} fill those gaps."
        ),
    ),
    SummaryRule(
        topic="sleep",
        applies=lambda ctx: ctx.user.has_low_sleep_baseline and ctx.has("Magnesium Glycinate"),
        render=lambda ctx: (
            "With your sleep rated low, evening Magnesium Glycinate is the foundation for deeper rest."
        ),
    ),
]


# --- Tip rules ---

TIP_RULES: List[SummaryRule] = [
    SummaryRule(
        topic="caffeine",
        applies=lambda ctx: ctx.user.has_caffeine_intake,
        render=lambda ctx: "Tip: keep caffeine before 2pm so it does not undercut your sleep.",
    ),
    SummaryRule(
        topic="alcohol",
        applies=lambda ctx: ctx.user.alcohol_weekly in (AlcoholIntake.FOUR_TO_SEVEN, AlcoholIntake.EIGHT_PLUS),
        render=lambda ctx: "Tip: alcohol drains magnesium and B vitamins, so stay consistent on nights you drink.",
    ),
    SummaryRule(
        topic="sleep",
        applies=lambda ctx: any(
            item.timing in (SupplementTiming.EVENING, SupplementTiming.BEDTIME) for item in ctx.items
        ),
        render=lambda ctx: "Tip: keep your evening supplements by your toothbrush so they become part of winding down.",
    ),
    SummaryRule(
        topic="training",
        applies=lambda ctx: ctx.user.is_active,
        render=lambda ctx: "Tip: on training days, take your recovery supplements within a few hours of your workout.",
    ),
    SummaryRule(
        topic="diet",
        applies=lambda ctx: ctx.user.is_plant_based,
        render=lambda ctx: "Tip: on a plant-based diet, take vitamin D3 with a meal that includes some fat.",
    ),
    SummaryRule(
        topic="consistency",
        applies=lambda ctx: True,
        render=lambda ctx: "Tip: take your supplements at the same times each day; consistency beats perfect timing.",
    ),
]


def build_core_sentence(ctx: SummaryContext) -> Optional[str]:
    """Top one or two items by tier score against the user's first two goals."""
    if not ctx.items:
        return None
    ranked = sorted(enumerate(ctx.items), key=lambda pair: (-pair[1].tier_score, pair[0]))
    leads = join_phrases([item.name for _, item in ranked[:2]])
    goals = [goal_descriptor(g) for g in ctx.user.goal_keys[:2]]
    if not goals:
        return f"Your plan is built around {leads}."
    return f"Your plan is built around {leads} to support {join_phrases(goals)}."


def build_plan_summary(user: UserProfile, items: Iterable[PlanItem]) -> str:
    ctx = SummaryContext(user=user, items=tuple(i for i in items if i.is_included))
    if not ctx.items:
        return ""
    used_topics: Set[str] = set()
    sentences = [build_core_sentence(ctx)]

    lifestyle = first_matching_rule(LIFESTYLE_RULES, ctx, used_topics)
    if lifestyle:
        used_topics.add(lifestyle[0])
        sentences.append(lifestyle[1])

    tip = first_matching_rule(TIP_RULES, ctx, used_topics)
    if tip:
        sentences.append(tip[1])

    return " ".join(s for s in sentences if s)
