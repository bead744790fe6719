"""Tests for the spawn location API."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from spawn_engine.api.main import app, get_allocator
from spawn_engine.core.allocator import SpawnAllocator
from spawn_engine.core.models import Coordinate, SpawnReservation
from spawn_engine.core.options import SpawnOptions
from spawn_engine.utils.random import SequenceRandom


@pytest.fixture
def client(store):
    allocator = SpawnAllocator(
        store, SpawnOptions(), rng_factory=lambda: SequenceRandom([0.5])
    )
    app.dependency_overrides[get_allocator] = lambda: allocator
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestCalculateSpawnLocation:
    """Test POST /spawn-locations/calculate."""

    def test_success_payload(self, client, store):
        response = client.post(
            "/spawn-locations/calculate",
            json={"playerId": "p1", "preferredRegion": "center", "groupWithFriends": False},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        data = body["data"]
        assert data["validFor"] == 300
        assert data["message"] == "Optimal spawn location calculated"

        location = data["spawnLocation"]
        for field in ("coordinates", "spawnLocationId", "populationDensity",
                      "safetyRating", "resourceAccessibility", "reason"):
            assert field in location
        assert location["coordinates"] == {"x": 0, "y": 0}
        assert location["reason"] == "Safe starter location"
        assert "reservation" not in data
        store.upsert_reservation.assert_awaited_once()

    def test_defaults_applied(self, client, store):
        response = client.post("/spawn-locations/calculate", json={"playerId": "p1"})

        assert response.status_code == 200
        store.query_active_base_coordinate.assert_not_awaited()

    @pytest.mark.parametrize("payload", [
        {},
        {"playerId": ""},
        {"playerId": "x" * 51},
        {"playerId": "p1", "preferredRegion": "up"},
        {"playerId": "p1", "friendIds": "f1"},
    ])
    def test_invalid_request(self, client, payload):
        response = client.post("/spawn-locations/calculate", json=payload)

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "VALIDATION_ERROR"

    def test_calculation_failure(self, client):
        with patch(
            "spawn_engine.core.allocator.CandidateGenerator.generate",
            side_effect=RuntimeError("boom"),
        ):
            response = client.post("/spawn-locations/calculate", json={"playerId": "p7"})

        assert response.status_code == 500
        error = response.json()["error"]
        assert error["code"] == "SPAWN_CALCULATION_ERROR"
        assert error["details"] == {"playerId": "p7", "error": "boom"}


class TestGetSpawnReservation:
    """Test GET /spawn-locations/{id}."""

    def test_not_found(self, client):
        response = client.get("/spawn-locations/spawn-1-missing")
        assert response.status_code == 404

    def test_found(self, client, store):
        store.get_reservation.return_value = SpawnReservation(
            spawn_location_id="spawn-1-abc",
            coordinates=Coordinate(x=-318, y=-273),
            reserved_by="p1",
            reserved_at=4_000_000_000,
            ttl=4_000_000_300,
        )
        response = client.get("/spawn-locations/spawn-1-abc")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["spawnLocationId"] == "spawn-1-abc"
        assert data["reservedBy"] == "p1"
        assert data["isAvailable"] == "false"
        assert data["coordinates"] == {"x": -318, "y": -273}

    def test_store_failure_uses_error_envelope(self, client, store):
        store.get_reservation.side_effect = RuntimeError("database is locked")
        response = client.get("/spawn-locations/spawn-1-abc")

        assert response.status_code == 500
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "SPAWN_LOOKUP_ERROR"
        assert body["error"]["details"] == {
            "spawnLocationId": "spawn-1-abc", "error": "database is locked"
        }


class TestServiceEndpoints:
    """Test root and health endpoints."""

    def test_root(self, client):
        assert client.get("/").json()["status"] == "running"

    @patch("spawn_engine.api.main.db")
    def test_health(self, mock_db, client):
        assert client.get("/health").json() == {"status": "healthy", "database": "connected"}
        mock_db.ping.assert_called_once()

    @patch("spawn_engine.api.main.db")
    def test_health_unhealthy(self, mock_db, client):
        mock_db.ping.side_effect = RuntimeError("connection refused")
        assert client.get("/health").status_code == 503
