"""HTTP tests for the neighborhood, matching and preference routes."""

import random

import pytest
from fastapi.testclient import TestClient

from neighborfit.api.app import create_app
from neighborfit.api.schemas import NeighborhoodSchema, UserPreferencesSchema
from neighborfit.config import settings
from neighborfit.data.mock_neighborhoods import MockNeighborhoodSource
from neighborfit.data.preferences import InMemoryPreferenceStore


@pytest.fixture
def client():
    app = create_app(InMemoryPreferenceStore(), MockNeighborhoodSource(random.Random(42)))
    return TestClient(app)


@pytest.fixture
def neighborhood_payload(canonical_neighborhood):
    return NeighborhoodSchema.from_domain(canonical_neighborhood).model_dump(by_alias=True, mode="json")


@pytest.fixture
def preferences_payload(canonical_preferences):
    return UserPreferencesSchema.from_domain(canonical_preferences).model_dump(by_alias=True, mode="json")


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


class TestNeighborhoodRoutes:
    def test_list_around_point(self, client):
        resp = client.get("/api/neighborhoods", params={"lat": 40.7128, "lng": -74.006, "radius": 5})
        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        assert 3 <= len(body["data"]) <= 10
        assert body["message"] == f"Found {len(body['data'])} neighborhoods"
        assert "safetyScore" in body["data"][0]["safety"]
        assert body["timestamp"]

    def test_list_filters_apply(self, client):
        resp = client.get("/api/neighborhoods", params={"lat": 40.7, "lng": -74.0, "min_safety": 101})
        assert resp.status_code == 200
        assert resp.json()["data"] == []

    def test_missing_coordinates(self, client):
        resp = client.get("/api/neighborhoods", params={"lng": -74.0})
        assert resp.status_code == 400
        body = resp.json()
        assert body["success"] is False
        assert body["error"].startswith("Invalid input")

    def test_get_by_id(self, client):
        resp = client.get("/api/neighborhoods/neighborhood_40.7128_-74.0060")
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["id"] == "neighborhood_40.7128_-74.0060"
        assert data["location"]["latitude"] == pytest.approx(40.7128)

    def test_get_by_id_is_stable(self, client):
        first = client.get("/api/neighborhoods/neighborhood_34.0500_-118.2400").json()["data"]
        second = client.get("/api/neighborhoods/neighborhood_34.0500_-118.2400").json()["data"]
        assert first == second

    def test_get_bad_id(self, client):
        resp = client.get("/api/neighborhoods/not-an-id")
        assert resp.status_code == 400
        assert resp.json()["success"] is False

    def test_writes_not_implemented(self, client):
        assert client.post("/api/neighborhoods", json={}).status_code == 501
        assert client.put("/api/neighborhoods/neighborhood_1.0_1.0", json={}).status_code == 501
        resp = client.delete("/api/neighborhoods/neighborhood_1.0_1.0")
        assert resp.status_code == 501
        assert resp.json()["success"] is False


class TestMatchingRoute:
    def test_canonical_match(self, client, preferences_payload, neighborhood_payload):
        resp = client.post(
            "/api/matching",
            json={"preferences": preferences_payload, "neighborhoods": [neighborhood_payload]},
        )
        assert resp.status_code == 200
        [result] = resp.json()["data"]
        assert result["compatibilityScore"] == 74
        assert result["subScores"]["familyFriendly"] == 63
        assert result["matchReasons"] == [
            "Excellent safety ratings",
            "Abundant local amenities",
            "Highly walkable neighborhood",
        ]
        assert result["potentialConcerns"] == []

    def test_sort_and_limit(self, client, preferences_payload, neighborhood_payload):
        unsafe = {
            **neighborhood_payload,
            "id": "unsafe",
            "safety": {**neighborhood_payload["safety"], "safetyScore": 40, "crimeRate": 45},
        }
        resp = client.post(
            "/api/matching",
            json={
                "preferences": preferences_payload,
                "neighborhoods": [unsafe, neighborhood_payload],
                "sort": True,
                "limit": 1,
            },
        )
        data = resp.json()["data"]
        assert [r["neighborhood"]["id"] for r in data] == [neighborhood_payload["id"]]

    def test_unsorted_keeps_request_order(self, client, preferences_payload, neighborhood_payload):
        other = {**neighborhood_payload, "id": "second"}
        resp = client.post(
            "/api/matching",
            json={"preferences": preferences_payload, "neighborhoods": [neighborhood_payload, other]},
        )
        assert [r["neighborhood"]["id"] for r in resp.json()["data"]] == [neighborhood_payload["id"], "second"]

    def test_filters(self, client, preferences_payload, neighborhood_payload):
        resp = client.post(
            "/api/matching",
            json={
                "preferences": preferences_payload,
                "neighborhoods": [neighborhood_payload],
                "filters": {"minAmenities": 50},
            },
        )
        assert resp.json()["data"] == []

    def test_unknown_enum_rejected(self, client, preferences_payload, neighborhood_payload):
        preferences_payload["lifestyle"]["ageGroup"] = "teenager"
        resp = client.post(
            "/api/matching",
            json={"preferences": preferences_payload, "neighborhoods": [neighborhood_payload]},
        )
        assert resp.status_code == 400
        assert "ageGroup" in resp.json()["error"]

    def test_budget_min_above_max(self, client, preferences_payload, neighborhood_payload):
        preferences_payload["budget"] = {"min": 90_000, "max": 10_000}
        resp = client.post(
            "/api/matching",
            json={"preferences": preferences_payload, "neighborhoods": [neighborhood_payload]},
        )
        assert resp.status_code == 400
        assert "budget" in resp.json()["error"]


class TestPreferenceRoutes:
    def test_new_user_gets_defaults(self, client):
        resp = client.get("/api/preferences/u1")
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["id"] == "u1"
        assert data["budget"] == {"min": 50_000, "max": 150_000}
        assert data["priorities"]["familyFriendly"] == 5

    def test_default_user_route(self, client):
        data = client.get("/api/preferences").json()["data"]
        assert data["id"] == settings.default_user_id

    def test_partial_update(self, client):
        resp = client.post(
            "/api/preferences/u1",
            json={"priorities": {"nightlife": 0}, "lifestyle": {"ageGroup": "family"}},
        )
        assert resp.status_code == 200
        assert resp.json()["message"] == "Preferences saved successfully"
        data = client.get("/api/preferences/u1").json()["data"]
        assert data["priorities"]["nightlife"] == 0
        assert data["priorities"]["safety"] == 8
        assert data["lifestyle"]["ageGroup"] == "family"
        assert data["lifestyle"]["workStyle"] == "hybrid"

    def test_invalid_update_rejected(self, client):
        resp = client.post("/api/preferences/u1", json={"budget": {"min": 500, "max": 10}})
        assert resp.status_code == 400
        assert resp.json()["success"] is False

    def test_weight_out_of_range(self, client):
        resp = client.post("/api/preferences/u1", json={"priorities": {"safety": 11}})
        assert resp.status_code == 400

    def test_delete(self, client):
        client.get("/api/preferences/u1")
        resp = client.delete("/api/preferences/u1")
        assert resp.json()["data"] == {"deleted": True}
        assert resp.json()["message"] == "Preferences deleted successfully"
        resp = client.delete("/api/preferences/u1")
        assert resp.json()["data"] == {"deleted": False}
        assert resp.json()["message"] == "No preferences found to delete"
