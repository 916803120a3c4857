"""
API test fixtures.

Provides a FastAPI app with the real routers and mocked services injected
through dependency overrides.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from portfolio_assistant.api import api_router
from portfolio_assistant.api.deps import get_chat_service, get_session_store


@pytest.fixture
def mock_chat_service() -> MagicMock:
    """Provide mock ChatService."""
    service = MagicMock()
    service.process_chat = AsyncMock()
    return service


@pytest.fixture
def mock_session_store() -> AsyncMock:
    """Provide mock ConversationSessionStore."""
    return AsyncMock()


@pytest.fixture
def app(mock_chat_service, mock_session_store) -> FastAPI:
    """Create FastAPI test application with all API routes."""
    app = FastAPI()
    app.include_router(api_router, prefix="/api")
    app.dependency_overrides[get_chat_service] = lambda: mock_chat_service
    app.dependency_overrides[get_session_store] = lambda: mock_session_store
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Provide TestClient for the FastAPI app."""
    return TestClient(app)
