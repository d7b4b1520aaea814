import pytest

from tonic.catalog import Catalog, CatalogError, catalog_to_snapshot
from tonic.data_model import DecisionKind, EvidenceLevel, GoalSupplementEntry, InteractionSeverity, SupplementTiming


def test_static_catalog_lookups(catalog):
    assert len(catalog.all_supplements()) == 20
    mag = catalog.supplement("Magnesium Glycinate")
    assert mag is not None
    assert catalog.supplement_by_id(mag.id) is mag
    assert catalog.supplement("Unobtainium") is None


def test_goal_weights(catalog):
    sleep = catalog.goal_mappings("sleep")
    assert sleep[0].name == "Magnesium Glycinate"
    assert sleep[0].weight == 3
    assert catalog.weight("Magnesium Glycinate", "stress_anxiety") == 3
    assert catalog.weight("Magnesium Glycinate", "not_a_goal") == 0
    assert catalog.goal_mappings("not_a_goal") == ()


@pytest.mark.parametrize("meds, expected", [
    (["Warfarin"], {"warfarin", "blood_thinner"}),
    (["coumadin"], {"warfarin", "blood_thinner"}),
    (["Lisinopril 10mg"], {"blood_pressure"}),
    (["blood thinner"], {"blood_thinner"}),
    (["Metformin", "Zoloft"], {"metformin", "diabetes", "ssri"}),
    (["unknownium"], set()),
    ([], set()),
])
def test_collect_interaction_keys(catalog, meds, expected):
    assert catalog.collect_interaction_keys(meds) == expected


def test_check_interactions_classifies_by_severity(catalog):
    omega = catalog.supplement("Omega-3 (EPA/DHA)")

    removed = catalog.check_interactions(omega.id, {"warfarin"})
    assert removed.kind == DecisionKind.REMOVE
    assert removed.interactions[0].severity == InteractionSeverity.MAJOR

    kept = catalog.check_interactions(omega.id, {"ssri"})
    assert kept.kind == DecisionKind.KEEP_WITH_WARNINGS
    assert [w.drug_or_class for w in kept.interactions] == ["ssri"]

    # every matching record is reported, not just the fatal one
    both = catalog.check_interactions(omega.id, {"warfarin", "ssri"})
    assert both.kind == DecisionKind.REMOVE
    assert {w.drug_or_class for w in both.interactions} == {"warfarin", "ssri"}


def test_check_interactions_clear(catalog):
    biotin = catalog.supplement("Biotin")
    assert catalog.check_interactions(biotin.id, {"warfarin"}).kind == DecisionKind.CLEAR
    assert catalog.check_interactions("no-such-id", {"warfarin"}).kind == DecisionKind.CLEAR


def test_medication_search(catalog):
    assert catalog.search_medications("") == []
    assert catalog.search_medications("sert")[0].name == "Sertraline"
    # brand names are searchable too
    assert "Atorvastatin" in [m.name for m in catalog.search_medications("lipitor")]
    assert catalog.medication(" Zoloft ").name == "Sertraline"
    assert catalog.medication("unobtainium") is None


def test_categories(catalog):
    grouped = catalog.supplements_by_category()
    assert list(grouped)[0] == "mineral"
    assert sum(len(v) for v in grouped.values()) == 20
    assert catalog.category_label("fatty_acid") == "Fatty Acids"
    assert catalog.category_label("botanical") == "Botanical"


def test_catalog_rejects_unknown_goal(make_supplement):
    with pytest.raises(CatalogError):
        Catalog(
            supplements=[make_supplement("Alpha")],
            goal_entries=[GoalSupplementEntry("telekinesis", "Alpha", 2)],
        )


def test_catalog_rejects_weight_out_of_range(make_supplement):
    with pytest.raises(CatalogError):
        Catalog(
            supplements=[make_supplement("Alpha")],
            goal_entries=[GoalSupplementEntry("energy", "Alpha", 4)],
        )


def test_catalog_rejects_duplicate_names(make_supplement):
    with pytest.raises(CatalogError):
        Catalog(supplements=[make_supplement("Alpha"), make_supplement("Alpha")], goal_entries=[])


def test_catalog_error_is_value_error():
    assert issubclass(CatalogError, ValueError)


def test_snapshot_rebuilds_equivalent_catalog(catalog):
    rebuilt = Catalog.from_snapshot(catalog_to_snapshot(catalog))

    assert [s.name for s in rebuilt.all_supplements()] == [s.name for s in catalog.all_supplements()]
    assert rebuilt.weight("CoQ10", "heart_health") == 3
    assert rebuilt.supplement("Probiotics").common_dosage_range == "10-50B CFU"
    assert rebuilt.supplement("Melatonin").evidence_level == catalog.supplement("Melatonin").evidence_level
    iron = rebuilt.supplement("Iron")
    assert rebuilt.check_interactions(iron.id, {"levothyroxine"}).kind == DecisionKind.REMOVE


def test_snapshot_with_bad_severity_is_rejected(catalog):
    snapshot = catalog_to_snapshot(catalog)
    snapshot["drug_interactions"][0]["severity"] = "catastrophic"
    with pytest.raises(CatalogError):
        Catalog.from_snapshot(snapshot)


def test_snapshot_without_supplements_is_rejected():
    with pytest.raises(CatalogError):
        Catalog.from_snapshot({"supplements": []})


def test_snapshot_with_unknown_timing_or_confidence_uses_defaults(catalog):
    snapshot = catalog_to_snapshot(catalog)
    for row in snapshot["supplements"]:
        if row["name"] == "Melatonin":
            row["time_of_day"] = "midnight"
            row["synthesis_confidence"] = "anecdotal"

    melatonin = Catalog.from_snapshot(snapshot).supplement("Melatonin")
    assert melatonin.recommended_timing == SupplementTiming.MORNING
    assert melatonin.evidence_level == EvidenceLevel.MODERATE
