import pytest

from tonic.data_model import AlcoholIntake, DietType, HealthGoal, Sex, StressLevel
from tonic.serialization import plan_from_dict, plan_to_dict, profile_from_dict, profile_to_dict


def test_plan_json_survives_a_round_trip(engine, make_profile):
    plan = engine.generate_plan(make_profile(health_goals=["focus"], medications=["Zoloft"]))
    data = plan_to_dict(plan)
    assert plan_to_dict(plan_from_dict(data)) == data


def test_missing_plan_is_empty():
    assert plan_from_dict(None).items == []


def test_profile_defaults_for_unknown_vocabulary():
    user = profile_from_dict({
        "sex": "robot",
        "diet_type": "carnivore",
        "stress_level": "extreme",
        "alcohol_weekly": None,
        "health_goals": ["sleep"],
    })
    assert user.sex == Sex.PREFER_NOT_TO_SAY
    assert user.diet_type == DietType.OMNIVORE
    assert user.stress_level == StressLevel.MODERATE
    assert user.alcohol_weekly == AlcoholIntake.NONE
    assert user.age == 30
    assert user.health_goals == [HealthGoal.SLEEP]


def test_unknown_goal_is_rejected():
    with pytest.raises(ValueError):
        profile_from_dict({"health_goals": ["flying"]})


def test_profile_dict_uses_canonical_goal_order(make_profile):
    user = make_profile(health_goals=["longevity", "energy", "energy"], sex=Sex.FEMALE)
    data = profile_to_dict(user)
    assert data["health_goals"] == ["energy", "longevity"]
    assert profile_from_dict(data).goal_keys == user.goal_keys
