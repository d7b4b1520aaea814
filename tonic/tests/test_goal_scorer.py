from tonic.goal_scorer import matched_goals, rank_candidates, score_candidates


def test_scores_are_summed_across_goals(catalog):
    scores = score_candidates(["sleep", "stress_anxiety"], catalog)
    assert scores["Magnesium Glycinate"] == 6
    assert scores["L-Theanine"] == 4
    assert scores["Ashwagandha KSM-66"] == 2
    assert scores["Tart Cherry Extract"] == 1


def test_no_goals_means_no_candidates(catalog):
    assert score_candidates([], catalog) == {}


def test_unknown_goal_contributes_nothing(catalog):
    assert score_candidates(["sleep", "telekinesis"], catalog) == score_candidates(["sleep"], catalog)


def test_ranking_breaks_ties_by_name():
    ranked = rank_candidates({"Zinc": 2, "Biotin": 2, "CoQ10": 3})
    assert ranked == [("CoQ10", 3), ("Biotin", 2), ("Zinc", 2)]


def test_matched_goals_strongest_first(catalog):
    # Omega-3 is weight 2 for muscle_recovery and 3 for focus
    assert matched_goals("Omega-3 (EPA/DHA)", ["focus", "muscle_recovery"], catalog) == ["focus", "muscle_recovery"]
    assert matched_goals("Omega-3 (EPA/DHA)", ["muscle_recovery", "focus"], catalog) == ["focus", "muscle_recovery"]
    assert matched_goals("Biotin", ["sleep"], catalog) == []
