"""
Test suite for project intent detection.

Covers the layered classifier (direct, alias, general info, intent pattern,
vocabulary), fuzzy title matching, the title cache and the async detector.

System role: Verification of project intent detection
"""

from unittest.mock import AsyncMock

import pytest

from portfolio_assistant.core.project_matcher import (
    ProjectIntentDetector,
    ProjectTitleCache,
    build_general_info_patterns,
    calculate_similarity,
    classify_query,
    find_best_matching_project,
)
from portfolio_assistant.models.intent import MatchPattern


@pytest.fixture
def titles() -> list[str]:
    """Provide project titles in the order the catalogue loads them."""
    return [
        "Aletheia Digital Media",
        "Chiropractic Healthcare",
        "Modern Day Sniper",
        "Portfolio Website",
        "River City Travel Ball",
        "Swyvvl",
    ]


class TestClassifyQuery:
    """Test suite for classify_query layer ordering."""

    def test_direct_title_should_match_with_full_confidence(self, titles: list[str]) -> None:
        """Test a title contained in the query wins outright."""
        # Act
        intent = classify_query("Tell me about Modern Day Sniper", titles)

        # Assert
        assert intent.is_project_query is True
        assert intent.project_name == "Modern Day Sniper"
        assert intent.confidence == 1.0
        assert intent.match_pattern == MatchPattern.DIRECT_MATCH

    def test_alias_should_resolve_to_canonical_title(self, titles: list[str]) -> None:
        """Test a static alias maps to its project."""
        # Act
        intent = classify_query("What's MDS?", titles)

        # Assert
        assert intent.project_name == "Modern Day Sniper"
        assert intent.confidence == 0.9
        assert intent.match_pattern == MatchPattern.ALIAS_MATCH

    def test_alias_should_match_informal_spelling(self, titles: list[str]) -> None:
        """Test Swivel resolves to Swyvvl."""
        # Act
        intent = classify_query("Tell me about Swivel", titles)

        # Assert
        assert intent.is_project_query is True
        assert intent.project_name == "Swyvvl"
        assert intent.match_pattern == MatchPattern.ALIAS_MATCH

    def test_alias_should_not_match_inside_other_words(self, titles: list[str]) -> None:
        """Test the ADM alias does not fire on 'admin'."""
        # Act
        intent = classify_query("How do you handle admin dashboards?", titles)

        # Assert
        assert intent.project_name is None
        assert intent.match_pattern == MatchPattern.NONE

    def test_skills_question_should_be_general_info(self, titles: list[str]) -> None:
        """Test a technical-skills question is not a project query."""
        # Act
        intent = classify_query("What technical skills does Jordan have?", titles)

        # Assert
        assert intent.is_project_query is False
        assert intent.project_name is None
        assert intent.confidence == 0.9
        assert intent.match_pattern == MatchPattern.GENERAL_INFO

    def test_possessive_skills_question_should_be_general_info(self, titles: list[str]) -> None:
        """Test "What are Jordan's skills?" overrides the project patterns."""
        # Act
        intent = classify_query("What are Jordan's skills?", titles)

        # Assert
        assert intent.is_project_query is False
        assert intent.match_pattern == MatchPattern.GENERAL_INFO

    def test_owner_possessive_work_question_should_resolve_project(self) -> None:
        """Test "about Jordan's work with X" reaches the intent patterns."""
        # Act
        intent = classify_query(
            "What do you know about Jordan's work with Acme Lab?",
            ["Acme Labs"],
            aliases={},
        )

        # Assert
        assert intent.is_project_query is True
        assert intent.project_name == "Acme Labs"
        assert intent.match_pattern == MatchPattern.INTENT_PATTERN_MATCH

    def test_question_about_owner_should_be_general_info(self, titles: list[str]) -> None:
        # Act
        intent = classify_query("Tell me about Jordan.", titles)

        # Assert
        assert intent.is_project_query is False
        assert intent.match_pattern == MatchPattern.GENERAL_INFO

    def test_intent_pattern_should_fuzzy_match_title(self) -> None:
        """Test a near-miss name inside an intent phrase resolves fuzzily."""
        # Act
        intent = classify_query(
            "Tell me about the harbor light project",
            ["Harbor Lights"],
            aliases={},
        )

        # Assert
        assert intent.is_project_query is True
        assert intent.project_name == "Harbor Lights"
        assert intent.match_pattern == MatchPattern.INTENT_PATTERN_MATCH
        assert 0.6 < intent.confidence <= 1.0

    def test_intent_pattern_without_title_should_be_unresolved(self) -> None:
        """Test an intent phrase naming an unknown project."""
        # Act
        intent = classify_query(
            "Tell me about the lighthouse project",
            ["Harbor Lights"],
            aliases={},
        )

        # Assert
        assert intent.is_project_query is True
        assert intent.project_name is None
        assert intent.confidence == 0.5
        assert intent.match_pattern == MatchPattern.INTENT_WITHOUT_MATCH

    def test_non_project_candidate_should_be_ignored(self, titles: list[str]) -> None:
        """Test "yourself" is never treated as a project name."""
        # Act
        intent = classify_query("Tell me about yourself", titles)

        # Assert
        assert intent.is_project_query is False
        assert intent.match_pattern == MatchPattern.NONE

    def test_vocabulary_should_give_low_confidence_project_intent(self, titles: list[str]) -> None:
        """Test generic project vocabulary."""
        # Act
        intent = classify_query("Show me some of your work", titles)

        # Assert
        assert intent.is_project_query is True
        assert intent.project_name is None
        assert intent.confidence == 0.3
        assert intent.match_pattern == MatchPattern.GENERAL_PROJECT_INTENT

    def test_empty_query_should_give_default_intent(self, titles: list[str]) -> None:
        """Test blank input."""
        # Act
        intent = classify_query("   ", titles)

        # Assert
        assert intent.is_project_query is False
        assert intent.confidence == 0.0
        assert intent.match_pattern == MatchPattern.NONE

    def test_first_title_should_win_on_substring_overlap(self) -> None:
        """Test iteration order breaks ties between nested titles."""
        # Act
        intent = classify_query("tell me about design system", ["Design", "Design System"], aliases={})

        # Assert
        assert intent.project_name == "Design"

    def test_should_be_deterministic(self, titles: list[str]) -> None:
        """Test the same query classifies identically."""
        # Act
        first = classify_query("What is Portfolio Website?", titles)
        second = classify_query("What is Portfolio Website?", titles)

        # Assert
        assert first == second

    def test_owner_name_should_be_configurable(self) -> None:
        """Test general-info patterns follow the configured owner."""
        # Arrange
        patterns = build_general_info_patterns("Sam")

        # Act
        intent = classify_query("Who is Sam?", [], aliases={}, general_patterns=patterns)

        # Assert
        assert intent.match_pattern == MatchPattern.GENERAL_INFO


class TestSimilarity:
    """Test suite for fuzzy similarity helpers."""

    def test_exact_match_should_score_one(self) -> None:
        assert calculate_similarity("swyvvl", "swyvvl") == 1.0

    def test_containment_should_score_above_point_seven(self) -> None:
        """Test containment bonus scales with length ratio."""
        # Act
        score = calculate_similarity("sniper", "modern day sniper")

        # Assert
        assert score == pytest.approx(0.7 + 0.3 * 6 / 17)

    def test_best_match_should_skip_very_different_lengths(self) -> None:
        """Test titles far longer than the candidate are not considered."""
        # Act
        best = find_best_matching_project("mds", ["Modern Day Sniper"])

        # Assert
        assert best is None

    def test_best_match_should_pick_highest_score(self) -> None:
        # Act
        best = find_best_matching_project("river city travel", ["Portfolio Website", "River City Travel Ball"])

        # Assert
        assert best is not None
        assert best[0] == "River City Travel Ball"


class TestProjectTitleCache:
    """Test suite for ProjectTitleCache."""

    @pytest.mark.asyncio
    async def test_should_reuse_titles_within_ttl(self) -> None:
        """Test the loader runs once while entries are fresh."""
        # Arrange
        now = [100.0]
        loader = AsyncMock(return_value=["Swyvvl"])
        cache = ProjectTitleCache(loader, ttl_seconds=60, clock=lambda: now[0])

        # Act
        await cache.get_titles()
        now[0] += 30
        titles = await cache.get_titles()

        # Assert
        assert titles == ["Swyvvl"]
        loader.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_should_reload_after_ttl(self) -> None:
        # Arrange
        now = [100.0]
        loader = AsyncMock(side_effect=[["Swyvvl"], ["Swyvvl", "Modern Day Sniper"]])
        cache = ProjectTitleCache(loader, ttl_seconds=60, clock=lambda: now[0])

        # Act
        await cache.get_titles()
        now[0] += 61
        titles = await cache.get_titles()

        # Assert
        assert titles == ["Swyvvl", "Modern Day Sniper"]
        assert loader.await_count == 2

    @pytest.mark.asyncio
    async def test_failed_load_should_return_empty_list(self) -> None:
        """Test an unavailable catalogue degrades to no titles."""
        # Arrange
        loader = AsyncMock(side_effect=RuntimeError("database down"))
        cache = ProjectTitleCache(loader)

        # Act
        titles = await cache.get_titles()

        # Assert
        assert titles == []

    @pytest.mark.asyncio
    async def test_invalidate_should_force_reload(self) -> None:
        # Arrange
        loader = AsyncMock(return_value=["Swyvvl"])
        cache = ProjectTitleCache(loader, ttl_seconds=3600)

        # Act
        await cache.get_titles()
        cache.invalidate()
        await cache.get_titles()

        # Assert
        assert loader.await_count == 2


class TestProjectIntentDetector:
    """Test suite for ProjectIntentDetector."""

    @pytest.mark.asyncio
    async def test_detect_should_use_cached_titles(self, titles: list[str]) -> None:
        # Arrange
        cache = ProjectTitleCache(AsyncMock(return_value=titles))
        detector = ProjectIntentDetector(cache)

        # Act
        intent = await detector.detect("What did you do on River City Travel Ball?")

        # Assert
        assert intent.project_name == "River City Travel Ball"
        assert intent.match_pattern == MatchPattern.DIRECT_MATCH

    @pytest.mark.asyncio
    async def test_detect_should_fall_back_to_aliases_without_titles(self) -> None:
        """Test alias detection still works when titles cannot load."""
        # Arrange
        cache = ProjectTitleCache(AsyncMock(side_effect=RuntimeError("boom")))
        detector = ProjectIntentDetector(cache)

        # Act
        intent = await detector.detect("Tell me about RCTB")

        # Assert
        assert intent.project_name == "River City Travel Ball"
        assert intent.match_pattern == MatchPattern.ALIAS_MATCH
