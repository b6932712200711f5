"""Unit tests for the health check routes."""

from http import HTTPStatus
from unittest.mock import patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.api.v1.routes.health import router


@pytest.fixture
def client() -> TestClient:
    """Test client with only the health router mounted."""
    test_app = FastAPI()
    test_app.include_router(router)
    return TestClient(test_app)


class TestHealthRoutes:
    """Test suite for the liveness and readiness probes."""

    @pytest.mark.unit
    def test_liveness_probe(self, client: TestClient) -> None:
        """Test that the liveness probe always reports alive."""
        # Act
        response = client.get("/liveness")

        # Assert
        assert response.status_code == HTTPStatus.OK
        body = response.json()
        assert body["status"] == "alive"
        assert body["service"] == "recipe-revision-service"
        assert "timestamp" in body

    @pytest.mark.unit
    def test_readiness_probe_healthy(self, client: TestClient) -> None:
        """Test that the readiness probe is ready when the database answers."""
        # Arrange
        with patch(
            "app.api.v1.routes.health.check_database_health",
            return_value=True,
        ) as mock_check:
            # Act
            response = client.get("/readiness")

        # Assert
        assert response.status_code == HTTPStatus.OK
        body = response.json()
        assert body["status"] == "ready"
        assert body["checks"]["database"]["status"] == "healthy"
        mock_check.assert_called_once_with()

    @pytest.mark.unit
    def test_readiness_probe_unhealthy(self, client: TestClient) -> None:
        """Test that the readiness probe returns 503 without a database."""
        # Arrange
        with patch(
            "app.api.v1.routes.health.check_database_health",
            return_value=False,
        ):
            # Act
            response = client.get("/readiness")

        # Assert
        assert response.status_code == HTTPStatus.SERVICE_UNAVAILABLE
        body = response.json()
        assert body["status"] == "not_ready"
        assert body["checks"]["database"]["status"] == "unhealthy"
