"""API tests for route metrics endpoints."""

from tests.fixtures.factories import create_activity_profile


def route_payload(points, elevations=None, **profile_overrides) -> dict:
    return {
        "points": points,
        "elevations": elevations or [],
        "profile": create_activity_profile(**profile_overrides).model_dump(),
    }


class TestRouteStats:
    """Tests for /api/route/stats endpoint."""

    async def test_stats(self, async_client, sample_route):
        """POST /api/route/stats returns display strings."""
        points, elevations = sample_route
        response = await async_client.post("/api/route/stats", json=route_payload(points, elevations))

        assert response.status_code == 200
        data = response.json()
        assert data["distance"].endswith(" km")
        assert data["elevation"] == "4 m"
        assert data["pace"] == "5:00 min/km"

    async def test_stats_cycling_in_miles(self, async_client, sample_route):
        """Cycling shows speed in the selected units."""
        points, _ = sample_route
        payload = route_payload(
            points, activity_type="cycling", pace_min=18, units="mi", pace_format="min/mi"
        )
        response = await async_client.post("/api/route/stats", json=payload)

        data = response.json()
        assert data["distance"].endswith(" mi")
        assert data["pace"] == "18 mph"

    async def test_stats_empty_route(self, async_client):
        """Empty routes report zero values."""
        response = await async_client.post("/api/route/stats", json=route_payload([]))

        assert response.status_code == 200
        assert response.json()["distance"] == "0.00 km"

    async def test_stats_invalid_profile(self, async_client, sample_route):
        """Out-of-range profile values are rejected by validation."""
        points, _ = sample_route
        payload = route_payload(points)
        payload["profile"]["pace_sec"] = 75

        response = await async_client.post("/api/route/stats", json=payload)

        assert response.status_code == 422


class TestRouteCharts:
    """Tests for /api/route/charts endpoint."""

    async def test_charts(self, async_client, sample_route):
        """POST /api/route/charts returns pace and heart rate series."""
        points, _ = sample_route
        response = await async_client.post("/api/route/charts", json=route_payload(points))

        assert response.status_code == 200
        data = response.json()
        assert len(data["pace"]["labels"]) == 20
        assert len(data["pace"]["data"]) == 20
        assert data["pace"]["label"] == "Pace (min/km)"
        assert data["heart_rate"]["label"] == "Heart Rate (bpm)"
        assert all(120 <= value <= 180 for value in data["heart_rate"]["data"])

    async def test_charts_cycling(self, async_client, sample_route):
        """Cycling charts plot speed."""
        points, _ = sample_route
        response = await async_client.post(
            "/api/route/charts", json=route_payload(points, activity_type="cycling", pace_min=25)
        )

        assert response.json()["pace"]["label"] == "Speed (km/h)"

    async def test_charts_need_two_points(self, async_client):
        """Single-point routes have no charts."""
        response = await async_client.post("/api/route/charts", json=route_payload([[52.0, 13.0]]))

        assert response.status_code == 422
