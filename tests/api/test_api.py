"""Tests for the Safe-Zone FastAPI service.

The resolver is replaced with a mock so no upstream requests are made.
"""

from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from api.main import create_app
from safezone.core.alert import SOURCE_PRIMARY, SOURCE_STATIC_FALLBACK, build_alert_record
from safezone.core.config import Config
from safezone.core.evacuation import EvacuationCenter
from safezone.resolver import Resolution, ResolutionStep


@pytest.fixture
def resolver():
    resolver = Mock()
    resolver.resolve_with_trace.return_value = Resolution(
        record=build_alert_record(2, "2026-01-10", SOURCE_PRIMARY),
        step=ResolutionStep.SOURCE_SUCCESS,
        source_name="wovodat",
    )
    return resolver


@pytest.fixture
def client(resolver):
    config = Config(allowed_origins=["https://safezone.test"])
    return TestClient(create_app(config=config, resolver=resolver))


class TestAlertEndpoint:
    """Tests for GET /api/phivolcs."""

    def test_returns_alert_record(self, client, resolver):
        response = client.get("/api/phivolcs")

        assert response.status_code == 200
        assert response.json() == {
            "volcano": "Mayon Volcano",
            "alertLevel": 2,
            "description": "Moderate Unrest",
            "updatedAt": "2026-01-10",
            "source": SOURCE_PRIMARY,
            "cached": False,
        }
        resolver.resolve_with_trace.assert_called_once()

    def test_fallback_is_still_200(self, client, resolver):
        resolver.resolve_with_trace.return_value = Resolution(
            record=build_alert_record(3, "2026-01-15T06:00:00+00:00", SOURCE_STATIC_FALLBACK),
            step=ResolutionStep.STATIC_FALLBACK,
        )

        response = client.get("/api/phivolcs")

        assert response.status_code == 200
        assert response.json()["source"] == SOURCE_STATIC_FALLBACK
        assert response.json()["alertLevel"] == 3

    def test_cors_allows_configured_origin(self, client):
        response = client.get("/api/phivolcs", headers={"Origin": "https://safezone.test"})

        assert response.headers["access-control-allow-origin"] == "https://safezone.test"

    def test_cors_rejects_other_origin(self, client):
        response = client.get("/api/phivolcs", headers={"Origin": "https://evil.test"})

        assert "access-control-allow-origin" not in response.headers


class TestHazardEndpoint:
    """Tests for GET /api/hazard."""

    def test_point_inside_zone(self, client):
        response = client.get("/api/hazard", params={"lat": 13.26, "lng": 123.69})

        assert response.status_code == 200
        body = response.json()
        assert body["inside"] is True
        assert body["radius_km"] == 6.0
        assert body["summit"] == {"lat": 13.257, "lng": 123.685}
        assert body["location"] == {"lat": 13.26, "lng": 123.69}
        assert body["distance_km"] < 1

    def test_legazpi_is_outside_zone(self, client):
        response = client.get("/api/hazard", params={"lat": 13.1391, "lng": 123.7438})

        body = response.json()
        assert body["inside"] is False
        assert body["distance_km"] > 6.0

    def test_missing_coordinates(self, client):
        response = client.get("/api/hazard", params={"lat": 13.2})

        assert response.status_code == 422

    def test_out_of_range_latitude(self, client):
        response = client.get("/api/hazard", params={"lat": 95, "lng": 123.7})

        assert response.status_code == 422


class TestEvacuationCentersEndpoint:
    """Tests for GET /api/evacuation-centers."""

    def test_lists_centers_without_position(self, client):
        response = client.get("/api/evacuation-centers")

        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 4
        assert body["centers"][0]["id"] == "legazpi-sports"
        assert "distance_km" not in body["centers"][0]

    def test_ranks_centers_with_position(self, client):
        response = client.get("/api/evacuation-centers", params={"lat": 13.36, "lng": 123.73})

        body = response.json()
        assert body["nearest_id"] == "tabaco-evac"
        assert body["origin"] == {"lat": 13.36, "lng": 123.73}
        assert body["centers"][0]["is_nearest"] is True
        distances = [c["distance_km"] for c in body["centers"]]
        assert distances == sorted(distances)

    def test_only_one_coordinate(self, client):
        response = client.get("/api/evacuation-centers", params={"lng": 123.73})

        assert response.status_code == 400

    def test_no_configured_centers(self, resolver):
        config = Config(evacuation_centers=[])
        client = TestClient(create_app(config=config, resolver=resolver))

        body = client.get("/api/evacuation-centers", params={"lat": 13.2, "lng": 123.7}).json()

        assert body["centers"] == []
        assert body["nearest_id"] is None

    def test_custom_centers(self, resolver):
        centers = [EvacuationCenter(id="only", name="Only Site", latitude=13.0, longitude=123.5)]
        client = TestClient(create_app(config=Config(evacuation_centers=centers), resolver=resolver))

        body = client.get("/api/evacuation-centers").json()

        assert [c["id"] for c in body["centers"]] == ["only"]


class TestMiscEndpoints:
    """Tests for hotlines and health endpoints."""

    def test_hotlines(self, client):
        response = client.get("/api/hotlines")

        hotlines = response.json()["hotlines"]
        assert response.status_code == 200
        assert any(h["phone"] == "911" for h in hotlines)
        assert {"id", "name", "phone", "website", "note"} <= set(hotlines[0])

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}
