from tonic.data_model import DietType, PlanItem, StressLevel, SupplementTiming, Tier
from tonic.plan_summary import (
    LIFESTYLE_RULES,
    TIP_RULES,
    SummaryContext,
    build_core_sentence,
    build_plan_summary,
    first_matching_rule,
)


def item(name, category="vitamin", timing=SupplementTiming.MORNING, score=0, included=True):
    return PlanItem(
        supplement_id=None,
        name=name,
        dosage="",
        dosage_mg=0,
        timing=timing,
        category=category,
        tier_score=score,
        tier=Tier.SUPPORTING,
        is_included=included,
    )


def test_empty_plan_has_empty_summary(make_profile):
    assert build_plan_summary(make_profile(health_goals=["sleep"]), []) == ""


def test_core_sentence_names_top_items_and_goals(make_profile):
    # goals are read in canonical order, not selection order
    user = make_profile(health_goals=["focus", "stress_anxiety", "sleep"])
    ctx = SummaryContext(user=user, items=(
        item("Zinc", score=1),
        item("L-Theanine", "amino_acid", score=6),
        item("Magnesium Glycinate", "mineral", score=6),
    ))
    assert build_core_sentence(ctx) == (
        "Your plan is built around L-Theanine and Magnesium Glycinate "
        "to support better sleep and stress & anxiety relief."
    )


def test_caffeine_pairing_wins_lifestyle_and_is_not_repeated_as_tip(make_profile):
    user = make_profile(health_goals=["focus"], coffee_cups_daily=2, stress_level=StressLevel.HIGH)
    items = [item("L-Theanine", "amino_acid", score=2), item("Rhodiola Rosea", "adaptogen", score=2)]
    summary = build_plan_summary(user, items)

    assert "L-Theanine pairs with it" in summary
    assert "keep caffeine before 2pm" not in summary
    assert "adapt and recover" not in summary


def test_rule_chain_skips_used_topics(make_profile):
    user = make_profile(coffee_cups_daily=1)
    ctx = SummaryContext(user=user, items=(item("Zinc"),))
    assert first_matching_rule(TIP_RULES, ctx, set())[0] == "caffeine"
    assert first_matching_rule(TIP_RULES, ctx, {"caffeine"})[0] == "consistency"


def test_no_lifestyle_rule_matches(make_profile):
    ctx = SummaryContext(user=make_profile(), items=(item("Zinc"),))
    assert first_matching_rule(LIFESTYLE_RULES, ctx, set()) is None


def test_plant_based_summary_mentions_diet(make_profile):
    user = make_profile(health_goals=["gut_health"], diet_type=DietType.VEGAN)
    items = [item("Probiotics", "probiotic", score=3), item("Vitamin B Complex"), item("Vitamin D3 + K2")]
    summary = build_plan_summary(user, items)
    assert "vegan diet" in summary


def test_excluded_items_are_ignored(make_profile):
    user = make_profile(health_goals=["sleep"], coffee_cups_daily=1)
    items = [item("Magnesium Glycinate", "mineral", score=3), item("L-Theanine", "amino_acid", score=2, included=False)]
    summary = build_plan_summary(user, items)
    assert "L-Theanine" not in summary


def test_evening_items_trigger_routine_tip(make_profile):
    user = make_profile(health_goals=["sleep"])
    items = [item("Magnesium Glycinate", "mineral", timing=SupplementTiming.EVENING, score=3)]
    assert "toothbrush" in build_plan_summary(user, items)
