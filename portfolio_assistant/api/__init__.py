"""
API routes module.

FastAPI routers for all HTTP endpoints.
"""

from fastapi import APIRouter

from .routers import (
    chat_router,
    chat_stream_router,
    health_router,
    projects_router,
    sessions_router,
)

api_router = APIRouter()

# Stream, session and project routes are registered before the bare POST /chat
api_router.include_router(health_router)
api_router.include_router(chat_stream_router)
api_router.include_router(sessions_router)
api_router.include_router(projects_router)
api_router.include_router(chat_router)

__all__ = ["api_router"]
