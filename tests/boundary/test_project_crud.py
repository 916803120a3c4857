"""
Test suite for ProjectCRUD catalogue queries.

System role: Verification of project catalogue ordering
"""

import pytest

from portfolio_assistant.boundary.db.CRUD import project_crud


class TestProjectTitles:
    """Test suite for title listings."""

    @pytest.mark.asyncio
    async def test_prompt_titles_should_list_featured_first(self, session_factory, seeded_projects) -> None:
        # Act
        async with session_factory() as session:
            titles = await project_crud.list_prompt_titles(session)

        # Assert
        assert titles == ["Modern Day Sniper", "Swyvvl", "River City Travel Ball"]

    @pytest.mark.asyncio
    async def test_titles_should_be_alphabetical(self, session_factory, seeded_projects) -> None:
        # Act
        async with session_factory() as session:
            titles = await project_crud.list_titles(session)

        # Assert
        assert titles == ["Modern Day Sniper", "River City Travel Ball", "Swyvvl"]
