"""
Test suite for health check endpoints.

System role: Verification of health check HTTP API
"""

from unittest.mock import AsyncMock, MagicMock

from sqlalchemy.exc import OperationalError

from portfolio_assistant.api.deps import get_service_cache


class TestHealthEndpoints:
    """Test suite for GET /api/health."""

    def test_health_should_report_healthy(self, client) -> None:
        # Act
        response = client.get("/api/health")

        # Assert
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "message": "Server Healthy"}

    def test_db_health_should_report_ok(self, app, client) -> None:
        # Arrange
        session = AsyncMock()
        factory = MagicMock()
        factory.return_value.__aenter__.return_value = session
        app.dependency_overrides[get_service_cache] = lambda: MagicMock(session_factory=factory)

        # Act
        response = client.get("/api/health/db")

        # Assert
        assert response.status_code == 200
        session.execute.assert_awaited_once()

    def test_db_health_should_report_unreachable(self, app, client) -> None:
        # Arrange
        factory = MagicMock()
        factory.return_value.__aenter__.side_effect = OperationalError("SELECT 1", {}, Exception("down"))
        app.dependency_overrides[get_service_cache] = lambda: MagicMock(session_factory=factory)

        # Act
        response = client.get("/api/health/db")

        # Assert
        assert response.status_code == 503
        assert response.json()["status"] == "unhealthy"
