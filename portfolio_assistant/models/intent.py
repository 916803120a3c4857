"""
Query intent models.

Result of classifying a raw visitor query against the known project catalogue.

Dependencies: pydantic
System role: Intent detector output contract
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class MatchPattern(str, Enum):
    """Which detection layer produced the intent."""

    DIRECT_MATCH = "direct_match"
    ALIAS_MATCH = "alias_match"
    INTENT_PATTERN_MATCH = "intent_pattern_match"
    INTENT_WITHOUT_MATCH = "intent_without_match"
    GENERAL_PROJECT_INTENT = "general_project_intent"
    GENERAL_INFO = "general_info"
    NONE = "none"


class Intent(BaseModel):
    """
    Classified query intent.

    Attributes:
        is_project_query: Whether the query targets portfolio projects
        project_name: Canonical project title when one was resolved
        confidence: Detector confidence in [0, 1]
        match_pattern: Detection layer that produced this result
    """

    model_config = ConfigDict(frozen=True)

    is_project_query: bool = False
    project_name: str | None = None
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    match_pattern: MatchPattern = MatchPattern.NONE

    @property
    def has_specific_project(self) -> bool:
        return self.is_project_query and bool(self.project_name)
