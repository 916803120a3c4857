"""
Core business logic module.

Contains the exception hierarchy, intent detection, hybrid retrieval and
prompt construction. Submodules are imported directly; only exceptions are
re-exported here so boundary clients can import them without cycles.
"""

from portfolio_assistant.core.exceptions import (
    EmbeddingError,
    LanguageModelError,
    PortfolioAssistantError,
    RetrievalError,
    RetrievalTimeoutError,
    ValidationError,
    VectorStoreError,
)

__all__ = [
    "PortfolioAssistantError",
    "ValidationError",
    "RetrievalError",
    "RetrievalTimeoutError",
    "EmbeddingError",
    "VectorStoreError",
    "LanguageModelError",
]
