import copy
from collections import Counter

import pytest

from tonic.data_model import DietType, ExerciseFrequency, HealthGoal, Sex, StressLevel, SupplementTiming, Tier
from tonic.diversity_selector import MAX_PER_CATEGORY, MAX_PLAN_SIZE
from tonic.serialization import plan_to_dict
from tonic.supplement_engine import PlanningError


# --- End-to-end scenarios ---

def test_sleep_and_stress_gets_core_evening_magnesium(engine, make_profile):
    plan = engine.generate_plan(make_profile(health_goals=["sleep", "stress_anxiety"]))
    mag = plan.item_named("Magnesium Glycinate")
    assert mag is not None
    assert mag.tier == Tier.CORE
    assert mag.timing == SupplementTiming.EVENING
    assert plan.items[0].name == "Magnesium Glycinate"


def test_fish_allergy_blocks_omega3(engine, make_profile):
    plan = engine.generate_plan(make_profile(health_goals=["focus"], allergies=["fish"]))
    assert "Omega-3 (EPA/DHA)" not in plan.names()
    assert plan.items


def test_pregnancy_blocks_ashwagandha(engine, make_profile):
    plan = engine.generate_plan(make_profile(health_goals=["stress_anxiety"], is_pregnant=True))
    assert "Ashwagandha KSM-66" not in plan.names()
    assert "Berberine" not in plan.names()


def test_vegan_diet_additions_reference_the_diet(engine, make_profile):
    plan = engine.generate_plan(make_profile(health_goals=["gut_health"], diet_type=DietType.VEGAN))
    for name in ("Vitamin B Complex", "Vitamin D3 + K2"):
        added = plan.item_named(name)
        assert added is not None
        assert "vegan" in added.why_included
    assert "vegan" in plan.summary or "diet" in plan.summary


def test_senior_rhodiola_dose(engine, make_profile, catalog):
    plan = engine.generate_plan(make_profile(health_goals=["energy"], age=70))
    rhodiola = plan.item_named("Rhodiola Rosea")
    assert rhodiola.dosage_mg == pytest.approx(0.75 * catalog.supplement("Rhodiola Rosea").recommended_dosage_mg)


def test_female_iron_dose(engine, make_profile):
    plan = engine.generate_plan(make_profile(health_goals=["energy"], sex=Sex.FEMALE))
    iron = plan.item_named("Iron")
    assert iron.dosage_mg == 27
    assert iron.dosage == "27mg"


# --- Properties ---

PROFILES = [
    dict(health_goals=["sleep", "stress_anxiety"]),
    dict(health_goals=[g.value for g in HealthGoal]),
    dict(health_goals=[g.value for g in HealthGoal], diet_type=DietType.VEGETARIAN),
    dict(health_goals=["focus", "heart_health", "longevity"], medications=["Warfarin", "Zoloft"]),
    dict(health_goals=["energy", "immune_support"], medications=["Levothyroxine", "Prednisone"], allergies=["shellfish"]),
    dict(health_goals=["muscle_recovery", "energy"], exercise_frequency=ExerciseFrequency.FIVE_PLUS,
         coffee_cups_daily=3, stress_level=StressLevel.VERY_HIGH, is_breastfeeding=True),
]


@pytest.mark.parametrize("fields", PROFILES)
def test_generation_is_deterministic(engine, make_profile, fields):
    first = plan_to_dict(engine.generate_plan(make_profile(**fields)))
    second = plan_to_dict(engine.generate_plan(make_profile(**fields)))
    assert first == second


@pytest.mark.parametrize("fields", PROFILES)
def test_size_and_category_bounds(engine, make_profile, catalog, fields):
    user = make_profile(**fields)
    plan = engine.generate_plan(user)
    diet_added = set(catalog.diet_additions(user.diet_type))
    automatic = [i for i in plan.items if i.name not in diet_added]

    assert len(automatic) <= MAX_PLAN_SIZE
    assert max(Counter(i.category for i in automatic).values()) <= MAX_PER_CATEGORY


@pytest.mark.parametrize("fields", PROFILES)
def test_tier_monotonicity(engine, make_profile, fields):
    plan = engine.generate_plan(make_profile(**fields))
    for a in plan.items:
        for b in plan.items:
            if a.tier_score > b.tier_score:
                assert a.tier.sort_order <= b.tier.sort_order


@pytest.mark.parametrize("fields", PROFILES)
def test_exclusions_hold(engine, make_profile, catalog, fields):
    user = make_profile(**fields)
    plan = engine.generate_plan(user)
    keys = catalog.collect_interaction_keys(user.medications)

    for item in plan.items:
        decision = catalog.check_interactions(item.supplement_id, keys)
        assert decision.kind != "remove"
        if decision.kind == "keep_with_warnings":
            assert item.interaction_warnings
    if any("fish" in a for a in user.allergies):
        assert "Omega-3 (EPA/DHA)" not in plan.names()
    if user.is_pregnant_or_breastfeeding:
        assert not set(plan.names()) & catalog.pregnancy_exclusions


@pytest.mark.parametrize("fields", PROFILES)
def test_ordering_and_sort_order(engine, make_profile, fields):
    plan = engine.generate_plan(make_profile(**fields))
    keys = [(i.tier.sort_order, i.timing.sort_order) for i in plan.items]
    assert keys == sorted(keys)
    assert [i.sort_order for i in plan.items] == list(range(len(plan.items)))


def test_profile_is_not_mutated(engine, make_profile):
    user = make_profile(health_goals=["energy", "sleep", "energy"], medications=["Warfarin"], allergies=["fish"])
    before = copy.deepcopy(user)
    engine.generate_plan(user)
    assert user == before


def test_zero_goals_gives_well_formed_plan(engine, make_profile):
    plan = engine.generate_plan(make_profile())
    assert plan.items == []
    assert plan.summary == ""

    vegan = engine.generate_plan(make_profile(diet_type=DietType.VEGAN))
    assert sorted(vegan.names()) == ["Vitamin B Complex", "Vitamin D3 + K2"]
    assert all(i.tier == Tier.SUPPORTING for i in vegan.items)


def test_items_carry_full_narrative(engine, make_profile):
    plan = engine.generate_plan(make_profile(health_goals=["focus"], coffee_cups_daily=2))
    theanine = plan.item_named("L-Theanine")
    assert theanine.why_included.startswith("L-Theanine promotes calm focus")
    assert theanine.evidence_level == "Clinical Research"
    assert theanine.expected_timeline
    assert theanine.form_and_bioavailability
    assert theanine.research_note
    assert "caffeine" in theanine.interaction_note
    assert "{" not in theanine.what_to_look_for
    assert "L-Theanine" in plan.summary


# --- Manual adds and plan edits ---

def test_manual_add_bypasses_filter_but_keeps_warnings(engine, make_profile, catalog):
    user = make_profile(health_goals=["focus"], medications=["Warfarin"])
    plan = engine.generate_plan(user)
    assert "Omega-3 (EPA/DHA)" not in plan.names()

    omega = catalog.supplement("Omega-3 (EPA/DHA)")
    item = engine.build_plan_supplement(omega, user, plan.items)
    expected = catalog.check_interactions(omega.id, catalog.collect_interaction_keys(user.medications))

    assert item.sort_order == len(plan.items)
    assert item.interaction_warnings == expected.interactions
    assert {w.drug_or_class for w in item.interaction_warnings} == {"warfarin", "blood_thinner"}
    assert "warfarin" in item.interaction_note


def test_manual_add_uses_same_dosage_and_tier_rules(engine, make_profile, catalog):
    user = make_profile(health_goals=["energy"], sex=Sex.FEMALE)
    generated = engine.generate_plan(user).item_named("Iron")
    manual = engine.build_plan_supplement(catalog.supplement("Iron"), user, [])
    assert (manual.dosage, manual.tier, manual.tier_score) == (generated.dosage, generated.tier, generated.tier_score)


def test_add_supplement_appends_once(engine, make_profile, catalog):
    user = make_profile(health_goals=["sleep"])
    plan = engine.generate_plan(user)
    count = len(plan.items)

    added = engine.add_supplement_by_name("Creatine Monohydrate", user, plan)
    assert plan.items[-1] is added
    assert len(plan.items) == count + 1

    again = engine.add_supplement(catalog.supplement("Creatine Monohydrate"), user, plan)
    assert again is added
    assert len(plan.items) == count + 1


def test_add_unknown_supplement_raises(engine, make_profile):
    user = make_profile(health_goals=["sleep"])
    plan = engine.generate_plan(user)
    with pytest.raises(PlanningError):
        engine.add_supplement_by_name("Snake Oil", user, plan)


def test_remove_and_toggle(engine, make_profile):
    user = make_profile(health_goals=["sleep", "stress_anxiety"])
    plan = engine.generate_plan(user)

    toggled = engine.set_included(plan, "Melatonin", False)
    assert toggled.is_included is False
    assert "Melatonin" not in [i.name for i in plan.included_items()]

    engine.remove_supplement(plan, "Melatonin", user)
    assert "Melatonin" not in plan.names()
    assert [i.sort_order for i in plan.items] == list(range(len(plan.items)))

    with pytest.raises(PlanningError):
        engine.remove_supplement(plan, "Melatonin")
    with pytest.raises(PlanningError):
        engine.set_included(plan, "Melatonin", True)


def test_plain_string_vocabularies_are_accepted(engine, make_profile):
    as_strings = make_profile(health_goals=["gut_health"], diet_type="vegan", sex="female",
                              stress_level="high", exercise_frequency="3-4_weekly", alcohol_weekly="1-3_drinks")
    as_enums = make_profile(health_goals=["gut_health"], diet_type=DietType.VEGAN, sex=Sex.FEMALE,
                            stress_level=StressLevel.HIGH, exercise_frequency=ExerciseFrequency.THREE_TO_FOUR,
                            alcohol_weekly="1-3_drinks")
    assert as_strings.diet_type is DietType.VEGAN
    assert plan_to_dict(engine.generate_plan(as_strings)) == plan_to_dict(engine.generate_plan(as_enums))


def test_unknown_vocabulary_value_is_rejected(make_profile):
    with pytest.raises(ValueError):
        make_profile(diet_type="carnivore")


def test_toggle_with_profile_refreshes_summary(engine, make_profile):
    user = make_profile(health_goals=["sleep", "stress_anxiety"])
    plan = engine.generate_plan(user)
    assert plan.summary.startswith("Your plan is built around Magnesium Glycinate")

    engine.set_included(plan, "Magnesium Glycinate", False, user)
    assert not plan.summary.startswith("Your plan is built around Magnesium Glycinate")

    engine.set_included(plan, "Magnesium Glycinate", True, user)
    assert plan.summary.startswith("Your plan is built around Magnesium Glycinate")
