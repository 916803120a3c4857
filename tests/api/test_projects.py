"""
Test suite for the chat quick-prompt endpoint.

System role: Verification of project suggestion HTTP API
"""

from unittest.mock import AsyncMock, MagicMock, patch

from sqlalchemy.exc import OperationalError

from portfolio_assistant.api.deps import get_service_cache
from portfolio_assistant.boundary.db.CRUD import project_crud


def _cache_with_session(session) -> MagicMock:
    factory = MagicMock()
    factory.return_value.__aenter__.return_value = session
    return MagicMock(session_factory=factory)


class TestChatProjectsEndpoint:
    """Test suite for GET /api/chat/projects."""

    def test_should_return_titles_and_timestamp(self, app, client) -> None:
        # Arrange
        session = AsyncMock()
        app.dependency_overrides[get_service_cache] = lambda: _cache_with_session(session)
        titles = ["Modern Day Sniper", "Swyvvl", "River City Travel Ball"]

        # Act
        with patch.object(project_crud, "list_prompt_titles", AsyncMock(return_value=titles)) as lister:
            response = client.get("/api/chat/projects")

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["projects"] == titles
        assert body["lastUpdated"]
        lister.assert_awaited_once_with(session)

    def test_database_failure_should_return_500(self, app, client) -> None:
        """Test a database error gives a 500 with a message."""
        # Arrange
        session = AsyncMock()
        app.dependency_overrides[get_service_cache] = lambda: _cache_with_session(session)
        failure = OperationalError("SELECT title", {}, Exception("down"))

        # Act
        with patch.object(project_crud, "list_prompt_titles", AsyncMock(side_effect=failure)):
            response = client.get("/api/chat/projects")

        # Assert
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch projects"}
