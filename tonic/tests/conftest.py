import os

import pytest

# the HTTP app builds its catalog at import time; keep tests on the bundled tables
os.environ["TONIC_CATALOG_SOURCE"] = "static"

from tonic.catalog import Catalog, build_static_catalog
from tonic.data_model import (
    Contraindication,
    ContraindicationSeverity,
    GoalSupplementEntry,
    SupplementCategory,
    SupplementDefinition,
    SupplementTiming,
    UserProfile,
)
from tonic.supplement_engine import RecommendationEngine


@pytest.fixture(scope="session")
def catalog():
    return build_static_catalog()


@pytest.fixture
def engine(catalog):
    return RecommendationEngine(catalog)


@pytest.fixture
def make_profile():
    def _make(**overrides):
        fields = dict(user_id="test_user", age=35, health_goals=[])
        fields.update(overrides)
        return UserProfile(**fields)
    return _make


def fixture_supplement(name, category="vitamin", timing="morning", dose=100.0, **extra):
    return SupplementDefinition(
        id=f"id-{name.lower().replace(' ', '-')}",
        name=name,
        category=SupplementCategory(category),
        common_dosage_range=f"{int(dose)}mg",
        recommended_dosage_mg=dose,
        recommended_timing=SupplementTiming(timing),
        **extra,
    )


@pytest.fixture
def fixture_catalog():
    """
    Small hand-built catalog: eleven "energy" candidates, three of them in
    each of the vitamin and mineral categories, one absolute contraindication
    (India) and a vegan addition.
    """
    supplements = [
        fixture_supplement("Alpha", "vitamin"),
        fixture_supplement("Bravo", "vitamin"),
        fixture_supplement("Charlie", "vitamin"),
        fixture_supplement("Delta", "mineral"),
        fixture_supplement("Echo", "mineral"),
        fixture_supplement("Foxtrot", "mineral"),
        fixture_supplement("Golf", "adaptogen"),
        fixture_supplement("Hotel", "adaptogen"),
        fixture_supplement("India", "mushroom"),
        fixture_supplement("Juliet", "botanical"),
        fixture_supplement("Kilo", "hormone"),
        fixture_supplement("Vegan Vitamin", "vitamin"),
    ]
    goal_entries = [
        GoalSupplementEntry("energy", "Alpha", 3),
        GoalSupplementEntry("energy", "Bravo", 3),
        GoalSupplementEntry("energy", "Charlie", 3),
        GoalSupplementEntry("energy", "Delta", 2),
        GoalSupplementEntry("energy", "Echo", 2),
        GoalSupplementEntry("energy", "Foxtrot", 2),
        GoalSupplementEntry("energy", "Golf", 2),
        GoalSupplementEntry("energy", "Hotel", 1),
        GoalSupplementEntry("energy", "India", 1),
        GoalSupplementEntry("energy", "Juliet", 1),
        GoalSupplementEntry("energy", "Kilo", 1),
        GoalSupplementEntry("sleep", "Kilo", 3),
    ]
    return Catalog(
        supplements=supplements,
        goal_entries=goal_entries,
        contraindications=[
            Contraindication("India", "any", ContraindicationSeverity.ABSOLUTE, "withdrawn from sale"),
        ],
        diet_additions={"vegan": ["Vegan Vitamin"]},
    )


@pytest.fixture
def make_supplement():
    return fixture_supplement
