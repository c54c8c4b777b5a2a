"""
Tests for the routing HTTP API.

The planner dependency is overridden with one built over temporary files.
"""

import pytest
from fastapi.testclient import TestClient

from src.airline_router.application import PlanMissions
from src.api.routes_api import app, get_planner


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def client(network_files):
    planner = PlanMissions.from_files(
        network_files["airports"], network_files["directions"], network_files["weather"]
    )
    app.dependency_overrides[get_planner] = lambda: planner
    yield TestClient(app)
    app.dependency_overrides.clear()


# =============================================================================
# TESTS
# =============================================================================


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["algorithm"] == "Weather-Weighted Dijkstra"


def test_airports(client):
    response = client.get("/airports")

    assert response.status_code == 200
    assert response.json() == ["A", "B", "C", "D", "E"]


def test_route_found(client):
    response = client.post("/route", json={"origin": "A", "destination": "C", "timestamp": 99})

    assert response.status_code == 200
    body = response.json()
    assert body["found"] is True
    assert body["status"] == "found"
    assert body["airports"] == ["A", "B", "C"]
    assert body["line"] == "A B C 822.38985"
    assert len(body["legs"]) == 2
    assert body["legs"][0]["weather_penalty"] == 1.0


def test_route_with_weather(client):
    response = client.post("/route", json={"origin": "A", "destination": "B", "timestamp": 100})

    leg = response.json()["legs"][0]
    assert leg["arrival_multiplier"] == pytest.approx(1.26)
    assert leg["weather_penalty"] == pytest.approx(1.26)


def test_no_route_is_not_an_error(client):
    response = client.post("/route", json={"origin": "C", "destination": "A", "timestamp": 0})

    assert response.status_code == 200
    assert response.json()["found"] is False
    assert response.json()["line"] == "no route"


def test_unknown_airport_is_404(client):
    response = client.post("/route", json={"origin": "A", "destination": "XYZ", "timestamp": 0})

    assert response.status_code == 404
    assert "XYZ" in response.json()["detail"]


def test_empty_code_is_rejected(client):
    response = client.post("/route", json={"origin": "", "destination": "A", "timestamp": 0})

    assert response.status_code == 422


def test_missions_batch(client):
    response = client.post(
        "/missions",
        json=[
            {"origin": "A", "destination": "C", "timestamp": 99},
            {"origin": "A", "destination": "XYZ", "timestamp": 99},
            {"origin": "B", "destination": "B", "timestamp": 99},
        ],
    )

    assert response.status_code == 200
    assert [item["line"] for item in response.json()] == [
        "A B C 822.38985",
        "invalid request",
        "B 0.00000",
    ]
    assert response.json()[1]["status"] == "invalid"


def test_unconfigured_planner_is_503(clean_env):
    get_planner.cache_clear()
    client = TestClient(app)

    response = client.get("/health")

    assert response.status_code == 503
