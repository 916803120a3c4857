"""API routers."""

from .chat import router as chat_router
from .chat_stream import router as chat_stream_router
from .health import router as health_router
from .projects import router as projects_router
from .sessions import router as sessions_router

__all__ = [
    "chat_router",
    "chat_stream_router",
    "health_router",
    "projects_router",
    "sessions_router",
]
