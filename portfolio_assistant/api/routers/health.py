"""
Health check API endpoints.

Routes: GET /health, GET /health/db

Dependencies: sqlalchemy, portfolio_assistant.api.deps
System role: Health check HTTP API
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from portfolio_assistant.api.deps import ServiceCache, get_service_cache

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic liveness check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/db", response_model=HealthResponse)
async def health_check_db(cache: ServiceCache = Depends(get_service_cache)):
    """Database connectivity check."""
    try:
        async with cache.session_factory() as session:
            await session.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.warning("Database health check failed", extra={"error_msg": str(e)})
        return JSONResponse(
            status_code=503,
            content=HealthResponse(status="unhealthy", message="Database unreachable").model_dump(),
        )
    return HealthResponse(status="healthy", message="Database connection OK")
