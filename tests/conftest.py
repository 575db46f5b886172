"""Pytest configuration and fixtures."""

import random

import pytest
from httpx import ASGITransport, AsyncClient

from track_studio.app import app
from tests.fixtures.data import SAMPLE_ELEVATIONS, SAMPLE_GPX_CONTENT, SAMPLE_ROUTE
from tests.fixtures.factories import create_activity_profile

# =============================================================================
# API Client Fixtures
# =============================================================================


@pytest.fixture
async def async_client():
    """Create an async test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


# =============================================================================
# Randomness Fixtures
# =============================================================================


@pytest.fixture
def rng():
    """Seeded random source for deterministic synthesis."""
    return random.Random(1234)


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def running_profile():
    """Running profile at 5:00 min/km starting 2024-05-01 07:30 UTC."""
    return create_activity_profile()


@pytest.fixture
def cycling_profile():
    """Cycling profile at 25 km/h."""
    return create_activity_profile(
        activity_type="cycling", pace_min=25, pace_sec=0, avg_heart_rate=140, name="Evening Ride"
    )


@pytest.fixture
def sample_route():
    """Short route with matching elevations."""
    return list(SAMPLE_ROUTE), list(SAMPLE_ELEVATIONS)


@pytest.fixture
def sample_gpx_content():
    """Garmin-style GPX document."""
    return SAMPLE_GPX_CONTENT

