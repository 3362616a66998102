"""
ParamBinder Backend — Application Wiring Tests
===============================================

What:  Tests for the health route, middleware and settings validation.
"""

import logging

import pytest
from pydantic import ValidationError

from app import __version__
from app.config import Settings
from app.middleware.logging import level_for_status
from app.middleware.request_id import new_request_id


class TestHealth:

    @pytest.mark.asyncio
    async def test_health(self, test_client):
        response = await test_client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["version"] == __version__
        assert body["uptime_seconds"] >= 0


class TestRequestID:
    """X-Request-ID handling."""

    @pytest.mark.asyncio
    async def test_generated_when_absent(self, test_client):
        response = await test_client.get("/health")
        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_client_id_echoed(self, test_client):
        response = await test_client.get("/health", headers={"X-Request-ID": "trace-42"})
        assert response.headers["X-Request-ID"] == "trace-42"

    @pytest.mark.asyncio
    async def test_unsafe_client_id_replaced(self, test_client):
        """IDs with characters outside [A-Za-z0-9._-] are not trusted."""
        response = await test_client.get("/health", headers={"X-Request-ID": "a b;c"})
        assert response.headers["X-Request-ID"] != "a b;c"
        assert len(response.headers["X-Request-ID"]) == 8

    def test_new_ids_differ(self):
        assert new_request_id() != new_request_id()


class TestAccessLog:
    """Access log level follows the status class."""

    def test_levels(self):
        assert level_for_status(200) == logging.INFO
        assert level_for_status(400) == logging.WARNING
        assert level_for_status(500) == logging.ERROR

    @pytest.mark.asyncio
    async def test_binding_failure_logged_as_warning(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="parambinder.access")
        await test_client.get("/request-param-v3")
        records = [r for r in caplog.records if r.name == "parambinder.access"]
        assert len(records) == 1
        assert records[0].levelno == logging.WARNING
        assert records[0].status == 400

    @pytest.mark.asyncio
    async def test_health_not_logged(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="parambinder.access")
        await test_client.get("/health")
        assert not [r for r in caplog.records if r.name == "parambinder.access"]


class TestSettings:

    def test_log_level_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValidationError, match="Invalid log_level"):
            Settings(log_level="loud")

    def test_port_range(self):
        with pytest.raises(ValidationError):
            Settings(backend_port=80)

    def test_cors_origins_list(self):
        settings = Settings(cors_origins="http://a.test, http://b.test,")
        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]
