"""
ParamBinder Backend — Test Configuration (conftest.py)
=======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures:
    ├── make_raw: Builds RawParameters from (name, value) pairs or a dict
    ├── binder: Fresh ParamBinder instance
    └── test_client: HTTPX AsyncClient for API endpoint testing
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["LOG_BOUND_VALUES"] = "true"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from app.schemas.binding import RawParameters
from app.services.param_binder import ParamBinder


@pytest.fixture
def make_raw():
    """
    Factory for RawParameters.

    Usage:
        raw = make_raw({"username": "kim"})
        raw = make_raw([("age", "1"), ("age", "2")])
    """
    def _make(data=None):
        if data is None:
            return RawParameters()
        if isinstance(data, dict):
            return RawParameters(data)
        return RawParameters.from_pairs(data)
    return _make


@pytest.fixture
def binder():
    """The binder is stateless; a fresh instance keeps tests independent anyway."""
    return ParamBinder()


@pytest_asyncio.fixture
async def test_client():
    """
    Provides an async HTTP test client for endpoint testing.

    How:     Uses ASGITransport to route requests directly to a fresh app.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from app.main import create_app
    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
