"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, portfolio_assistant.api, portfolio_assistant.observability, portfolio_assistant.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from portfolio_assistant.configs import get_settings
from portfolio_assistant.api import api_router
from portfolio_assistant.application.streaming import drain_background_tasks
from portfolio_assistant.boundary.db.connection import dispose_engine
from portfolio_assistant.observability.logger import configure_logging
from portfolio_assistant.observability.middleware import (
    RequestLoggingMiddleware,
    CorrelationMiddleware,
)

logger = logging.getLogger(__name__)

SHUTDOWN_DRAIN_SECONDS = 10.0


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging on startup. On shutdown, waits for detached
    persistence tasks before closing the connection pool.
    """
    # Startup
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(
        "Application startup: logging configured",
        extra={"environment": settings.environment},
    )

    yield

    # Shutdown
    logger.info("Application shutdown: draining background tasks")
    await drain_background_tasks(timeout=SHUTDOWN_DRAIN_SECONDS)
    await dispose_engine()
    logger.info("Application shutdown complete")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    settings = get_settings()

    app = FastAPI(
        title="Portfolio Assistant API",
        description="Portfolio chat assistant with hybrid retrieval and streamed answers",
        version="0.1.0",
        lifespan=lifespan,
        docs_url=None if settings.is_production else "/docs",
        redoc_url=None,
    )

    # Add observability middleware (added first = last to execute)
    app.add_middleware(CorrelationMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.assistant.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register API routes
    app.include_router(api_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "portfolio_assistant.main:app",
        host="localhost",
        port=8082,
        reload=True,
    )
