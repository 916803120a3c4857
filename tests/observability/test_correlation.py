"""
Test suite for correlation ID propagation.

Tests the context helpers, the log record filter and the correlation
middleware.

System role: Verification of request tracing
"""

import asyncio
import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from portfolio_assistant.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from portfolio_assistant.observability.logger import CorrelationIdFilter
from portfolio_assistant.observability.middleware import (
    CORRELATION_HEADER,
    CorrelationMiddleware,
)


@pytest.fixture
def app() -> FastAPI:
    """Create app echoing the correlation id seen by the handler."""
    app = FastAPI()
    app.add_middleware(CorrelationMiddleware)

    @app.get("/echo")
    async def echo() -> dict:
        return {"correlation_id": get_correlation_id()}

    return app


class TestCorrelationContext:
    """Test suite for correlation context helpers."""

    def test_set_should_generate_id_when_missing(self) -> None:
        # Act
        value = set_correlation_id()

        # Assert
        assert value
        assert get_correlation_id() == value
        clear_correlation_id()

    def test_set_should_keep_given_id(self) -> None:
        # Act
        set_correlation_id("req-123")

        # Assert
        assert get_correlation_id() == "req-123"
        clear_correlation_id()
        assert get_correlation_id() == ""

    @pytest.mark.asyncio
    async def test_spawned_task_should_inherit_id(self) -> None:
        """Test detached work logs with the dispatching request's id."""
        # Arrange
        set_correlation_id("req-456")

        async def read() -> str:
            return get_correlation_id()

        # Act
        seen = await asyncio.create_task(read())

        # Assert
        assert seen == "req-456"
        clear_correlation_id()


class TestCorrelationIdFilter:
    """Test suite for CorrelationIdFilter."""

    def test_should_attach_id_to_record(self) -> None:
        # Arrange
        record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)
        set_correlation_id("req-789")

        # Act
        CorrelationIdFilter().filter(record)

        # Assert
        assert record.correlation_id == "req-789"
        clear_correlation_id()

    def test_should_use_placeholder_without_id(self) -> None:
        # Arrange
        record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)

        # Act
        CorrelationIdFilter().filter(record)

        # Assert
        assert record.correlation_id == "-"


class TestCorrelationMiddleware:
    """Test suite for CorrelationMiddleware."""

    def test_should_reuse_incoming_header(self, app) -> None:
        # Act
        response = TestClient(app).get("/echo", headers={CORRELATION_HEADER: "abc"})

        # Assert
        assert response.json() == {"correlation_id": "abc"}
        assert response.headers[CORRELATION_HEADER] == "abc"

    def test_should_generate_header_when_missing(self, app) -> None:
        # Act
        response = TestClient(app).get("/echo")

        # Assert
        generated = response.headers[CORRELATION_HEADER]
        assert generated
        assert response.json() == {"correlation_id": generated}
