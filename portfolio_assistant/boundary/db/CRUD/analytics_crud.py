"""
Chat analytics CRUD operations.

Dependencies: sqlalchemy, portfolio_assistant.boundary.db.models
System role: Analytics persistence
"""

from portfolio_assistant.boundary.db.CRUD.base_crud import BaseCRUD
from portfolio_assistant.boundary.db.models.analytics_model import ChatAnalyticsModel


class ChatAnalyticsCRUD(BaseCRUD[ChatAnalyticsModel]):
    """CRUD operations for ChatAnalyticsModel."""

    def __init__(self) -> None:
        super().__init__(ChatAnalyticsModel)


analytics_crud = ChatAnalyticsCRUD()
