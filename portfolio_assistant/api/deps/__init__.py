"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    ServiceCache,
    get_chat_service,
    get_service_cache,
    get_session_store,
)

__all__ = [
    "ServiceCache",
    "get_chat_service",
    "get_service_cache",
    "get_session_store",
]
