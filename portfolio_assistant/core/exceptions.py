"""
Exception hierarchy for the portfolio assistant.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class PortfolioAssistantError(Exception):
    """Base exception for all portfolio assistant errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(PortfolioAssistantError):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class RetrievalError(PortfolioAssistantError):
    """Raised when retrieval operations fail."""

    def __init__(
        self,
        message: str,
        query: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize retrieval error.

        Args:
            message: Error message
            query: Query text for the failed retrieval
            details: Additional context
        """
        details = details or {}
        if query:
            details["query"] = query[:100]
        super().__init__(message, details)


class RetrievalTimeoutError(RetrievalError):
    """Raised when query preparation exceeds its time budget."""

    def __init__(
        self,
        timeout_seconds: float,
        query: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        details["timeout_seconds"] = timeout_seconds
        super().__init__(
            f"Request timed out after {timeout_seconds:g}s", query, details
        )


class EmbeddingError(RetrievalError):
    """Raised when embedding generation fails."""

    pass


class VectorStoreError(RetrievalError):
    """Raised when similarity store operations fail."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize vector store error.

        Args:
            message: Error message
            operation: Operation that failed (hybrid_search, get_content_by_id)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details=details)


class LanguageModelError(PortfolioAssistantError):
    """Raised when the chat model fails to produce a completion."""

    pass
