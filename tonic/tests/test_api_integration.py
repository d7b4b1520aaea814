# tests/test_api_integration.py

from fastapi.testclient import TestClient

from tonic.api import app

client = TestClient(app)


def valid_user_input(**overrides):
    payload = {
        "user_id": "api_user",
        "age": 35,
        "biological_sex": "male",
        "health_goals": ["sleep", "Stress & Anxiety"],
        "diet_type": "omnivore",
        "exercise_frequency": "1-2_weekly",
        "coffee_cups_daily": 1,
        "stress_level": "high",
        "medications": [],
        "allergies": [],
    }
    payload.update(overrides)
    return payload


def test_root():
    response = client.get("/")
    assert response.status_code == 200
    assert "Tonic" in response.json()["message"]


def test_supplements_grouped_by_category():
    response = client.get("/supplements")
    assert response.status_code == 200
    categories = response.json()["categories"]
    assert sum(len(c["supplements"]) for c in categories) == 20
    minerals = next(c for c in categories if c["key"] == "mineral")
    assert minerals["label"]
    assert "Magnesium Glycinate" in [s["name"] for s in minerals["supplements"]]


def test_medication_search():
    response = client.get("/medications/search", params={"q": "warf"})
    assert response.status_code == 200
    results = response.json()["results"]
    assert results[0]["name"] == "Warfarin"

    assert client.get("/medications/search", params={"q": ""}).json()["results"] == []


def test_plan_for_sleep_and_stress():
    response = client.post("/plan", json=valid_user_input())
    assert response.status_code == 200
    data = response.json()
    assert data["user_id"] == "api_user"
    assert data["summary"]

    first = data["items"][0]
    assert first["name"] == "Magnesium Glycinate"
    assert first["tier"] == "core"
    assert first["timing"] == "evening"
    assert [i["sort_order"] for i in data["items"]] == list(range(len(data["items"])))


def test_plan_normalizes_sex_for_iron_dose():
    response = client.post("/plan", json=valid_user_input(biological_sex="F", health_goals=["energy"]))
    assert response.status_code == 200
    iron = next(i for i in response.json()["items"] if i["name"] == "Iron")
    assert iron["dosage"] == "27mg"


def test_plan_rejects_unknown_goal():
    response = client.post("/plan", json=valid_user_input(health_goals=["teleportation"]))
    assert response.status_code == 422


def test_plan_rejects_non_numeric_age():
    response = client.post("/plan", json=valid_user_input(age="abc"))
    assert response.status_code == 422


def test_add_unknown_supplement_returns_404():
    body = {"profile": valid_user_input(), "supplement_name": "Snake Oil"}
    response = client.post("/plan/add", json=body)
    assert response.status_code == 404


def test_add_supplement_to_existing_plan_keeps_warnings():
    profile = valid_user_input(health_goals=["focus"], medications=["Warfarin"])
    plan = client.post("/plan", json=profile).json()
    assert "Omega-3 (EPA/DHA)" not in [i["name"] for i in plan["items"]]

    body = {"profile": profile, "supplement_name": "Omega-3 (EPA/DHA)", "plan": plan}
    response = client.post("/plan/add", json=body)
    assert response.status_code == 200

    data = response.json()
    warnings = data["item"]["interaction_warnings"]
    assert {w["drug_or_class"] for w in warnings} == {"warfarin", "blood_thinner"}
    assert data["item"]["sort_order"] == len(plan["items"])
    assert data["plan"]["items"][-1]["name"] == "Omega-3 (EPA/DHA)"


def test_add_with_malformed_plan_returns_422():
    plan = client.post("/plan", json=valid_user_input()).json()
    plan["items"][0]["tier"] = "bogus"
    body = {"profile": valid_user_input(), "supplement_name": "Zinc", "plan": plan}
    assert client.post("/plan/add", json=body).status_code == 422

    body["plan"] = {"items": [{"dosage": "5g"}]}
    assert client.post("/plan/add", json=body).status_code == 422
