"""
Chat quick-prompt endpoint.

Routes: GET /chat/projects - Project titles for the chat widget's suggestions

Dependencies: sqlalchemy, portfolio_assistant.boundary.db.CRUD
System role: Project suggestion HTTP API
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from portfolio_assistant.api.deps import ServiceCache, get_service_cache
from portfolio_assistant.boundary.db.CRUD import project_crud
from portfolio_assistant.models.session import ChatProjectsResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["projects"])


@router.get("/projects", response_model=ChatProjectsResponse)
async def list_chat_projects(cache: ServiceCache = Depends(get_service_cache)):
    """
    List project titles, featured first, for chat quick prompts.

    Returns:
        ChatProjectsResponse: {projects, lastUpdated}
    """
    try:
        async with cache.session_factory() as session:
            titles = await project_crud.list_prompt_titles(session)
    except SQLAlchemyError as e:
        logger.error(f"{__name__}:list_chat_projects - FAILED - {type(e).__name__}: {e}")
        return JSONResponse(status_code=500, content={"error": "Failed to fetch projects"})

    return ChatProjectsResponse(projects=titles, last_updated=datetime.now(timezone.utc))
