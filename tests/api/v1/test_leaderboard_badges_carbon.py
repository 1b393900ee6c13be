# tests/api/v1/test_leaderboard_badges_carbon.py
from starlette.testclient import TestClient

from tests.utils import factories


def test_leaderboard_orders_and_caps(client: TestClient, db):
    factories.create_user(db, email="zero@test.com", green_points=0)
    for i in range(12):
        factories.create_user(db, name=f"User {i}", email=f"u{i}@test.com", green_points=(i + 1) * 10)

    response = client.get("/api/v1/leaderboard")

    assert response.status_code == 200
    leaders = response.json()["leaders"]
    assert len(leaders) == 10
    assert [l["greenPoints"] for l in leaders] == sorted(
        [l["greenPoints"] for l in leaders], reverse=True
    )
    assert leaders[0]["greenPoints"] == 120
    assert all(l["greenPoints"] > 0 for l in leaders)
    assert set(leaders[0]) == {"id", "name", "greenPoints", "badges"}


def test_leaderboard_ties_go_to_earlier_member(client: TestClient, db):
    early = factories.create_user(db, email="early@test.com", green_points=50)
    late = factories.create_user(db, email="late@test.com", green_points=50)

    leaders = client.get("/api/v1/leaderboard").json()["leaders"]

    assert [l["id"] for l in leaders] == [early.id, late.id]


def test_leaderboard_empty(client: TestClient):
    assert client.get("/api/v1/leaderboard").json() == {"leaders": []}


def test_badge_catalog(client: TestClient):
    response = client.get("/api/v1/badges")

    badges = response.json()["badges"]
    assert [b["requiredPoints"] for b in badges] == [50, 100, 200, 500]
    assert badges[0] == {
        "name": "Eco Starter",
        "icon": "🌱",
        "requiredPoints": 50,
        "description": "Earn 50 green points to unlock this badge",
    }


def test_carbon_estimate_deterministic(client: TestClient):
    response = client.post(
        "/api/v1/carbon/estimate",
        json={"activityType": "recycling", "quantity": 4, "subType": "paper"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["carbonSavedKg"] == 14.0
    assert body["calculation"]["method"] == "deterministic"
    assert body["calculation"]["quantity"] == 4
    assert body["calculation"]["factor"]["paper"] == 3.5


def test_carbon_estimate_from_description(client: TestClient):
    response = client.post(
        "/api/v1/carbon/estimate",
        json={
            "activityType": "tree-planting",
            "description": "We planted 5 oaks",
            "useAI": True,
        },
    )

    body = response.json()
    assert body["carbonSavedKg"] == 108.85
    assert body["calculation"]["method"] == "ai-enhanced"
    assert body["calculation"]["quantity"] == 1


def test_carbon_estimate_unknown_type(client: TestClient):
    body = client.post("/api/v1/carbon/estimate", json={"activityType": "carpool"}).json()

    assert body["carbonSavedKg"] == 1.0
    assert body["calculation"]["factor"] is None
