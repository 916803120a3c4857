"""
Project intent detection.

Rule-based classifier deciding whether a visitor query targets a specific
portfolio project. Layers run in strict priority order and the first one
that fires wins:

    1. direct title substring      -> confidence 1.0
    2. static alias                -> confidence 0.9
    3. general-information phrasing -> not a project query, confidence 0.9
    4. intent phrase + fuzzy title -> fuzzy similarity, or 0.5 unresolved
    5. project vocabulary          -> confidence 0.3
    6. nothing                     -> confidence 0

When one title is a substring of another, the first title in iteration
order wins. Titles are loaded alphabetically, so "Design" beats
"Design System" for a query containing "design system".

Dependencies: re, portfolio_assistant.models.intent
System role: Intent detector for hybrid search and the chat coordinator
"""

import logging
import re
import time
from collections.abc import Awaitable, Callable, Mapping, Sequence

from portfolio_assistant.models.intent import Intent, MatchPattern

logger = logging.getLogger(__name__)

DEFAULT_OWNER_NAME = "Jordan"

PROJECT_ALIASES: dict[str, list[str]] = {
    "Modern Day Sniper": ["MDS", "Modern Day", "Sniper"],
    "Aletheia Digital Media": ["Aletheia", "ADM", "Aletheia Media"],
    "Chiropractic Healthcare": ["Chiropractic", "Healthcare"],
    "Portfolio Website": ["Portfolio", "Personal Site", "Personal Website"],
    "River City Travel Ball": ["RCTB", "River City", "Travel Ball"],
    "Swyvvl": ["Swyvvl", "Swivel"],
}

PROJECT_VOCABULARY = (
    "project",
    "work",
    "portfolio",
    "case study",
    "designed",
    "developed",
    "created",
)

# Candidates that the free-text patterns capture but that are never project names
NON_PROJECT_CANDIDATES = frozenset(
    {"jordan", "you", "your", "me", "skills", "experience", "background", "yourself"}
)

FUZZY_MATCH_THRESHOLD = 0.6
MAX_LENGTH_DIFFERENCE = 0.5

_TECH = r"(?:tech(?:nical)?|programming|coding|development)"
_TECH_TOPICS = r"(?:skills|technologies|tools|stack|languages)"
_PROFILE_TOPICS = r"(?:skills|background|experience|education|design approach|approach)"

_END = r"(?:\?|$|\.)"

PROJECT_INTENT_PATTERNS: tuple[re.Pattern, ...] = tuple(
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"tell me about (?:the )?([a-z0-9\s\-]+?) project",
        r"what (?:is|was) (?:the )?([a-z0-9\s\-]+?) project",
        r"(?:explain|describe) (?:the )?([a-z0-9\s\-]+?) project",
        r"information (?:about|on) (?:the )?([a-z0-9\s\-]+?) project",
        r"(?:tell|what|know|hear)\s+(?:me|you|us)?\s*about\s+(?:\w+'?s?\s+|your\s+)?"
        r"(?:work|project|experience)\s+(?:on|with|at)\s+(.*?)" + _END,
        r"(?:can|could)\s+you\s+(?:tell|explain|describe|share)\s+(?:me\s+|us\s+)?about\s+(.*?)" + _END,
        r"(?:\w+|you)\s+(?:worked|work|created|designed|developed|built)\s+(?:on|for|with)\s+(.*?)" + _END,
        r"(?:what|how)\s+(?:is|was|about)\s+(.*?)" + _END,
        r"tell me about ([a-z0-9\s\-]+)",
    )
)


def build_general_info_patterns(owner_name: str = DEFAULT_OWNER_NAME) -> tuple[re.Pattern, ...]:
    """
    Compile the general-information override patterns for a site owner.

    Args:
        owner_name: First name visitors use for the site owner

    Returns:
        Compiled case-insensitive patterns
    """
    owner = re.escape(owner_name.lower())
    possessive = rf"(?:your|{owner}'?s)"
    patterns = (
        rf"what {_TECH} {_TECH_TOPICS}",
        rf"what (?:is|are) {possessive} {_TECH} {_TECH_TOPICS}",
        rf"tell me about {possessive} {_PROFILE_TOPICS}",
        rf"what (?:is|are) {possessive} {_PROFILE_TOPICS}",
        r"portfolio|resume|\bcv\b|qualifications|expertise|proficiency",
        rf"who is {owner}\b|about {owner}\b(?!['’])",
    )
    return tuple(re.compile(pattern, re.IGNORECASE) for pattern in patterns)


DEFAULT_GENERAL_INFO_PATTERNS = build_general_info_patterns()


def calculate_similarity(first: str, second: str) -> float:
    """
    Cheap fuzzy similarity between two lower-cased strings.

    Exact match scores 1.0 and containment scores 0.7 plus up to 0.3 by
    length ratio. Otherwise the score blends shared-word ratio (0.6) with
    same-position character matches (0.4). The positional ratio is not edit
    distance: a single inserted character shifts every later position.
    """
    if first == second:
        return 1.0

    if first in second or second in first:
        shorter = min(len(first), len(second))
        longer = max(len(first), len(second))
        return 0.7 + 0.3 * shorter / longer

    words_first = first.split()
    words_second = set(second.split())
    common = [word for word in words_first if word in words_second]
    word_ratio = len(common) / max(len(words_first), len(words_second), 1)

    matches = sum(1 for a, b in zip(first, second) if a == b)
    char_ratio = matches / max(len(first), len(second), 1)

    return 0.6 * word_ratio + 0.4 * char_ratio


def find_best_matching_project(
    candidate: str,
    titles: Sequence[str],
) -> tuple[str, float] | None:
    """
    Pick the title most similar to a free-text candidate.

    Titles whose length differs from the candidate by more than half the
    longer length are skipped.

    Returns:
        (title, similarity) for the best title, None when nothing scored
    """
    candidate_lower = candidate.lower()
    best: tuple[str, float] | None = None

    for title in titles:
        title_lower = title.lower()
        longest = max(len(title_lower), len(candidate_lower))
        if not longest:
            continue
        if abs(len(title_lower) - len(candidate_lower)) / longest > MAX_LENGTH_DIFFERENCE:
            continue

        similarity = calculate_similarity(candidate_lower, title_lower)
        if similarity > (best[1] if best else 0.0):
            best = (title, similarity)

    return best


def _clean_candidate(raw: str) -> str:
    candidate = raw.strip().strip("?.!,'\"").strip()
    if candidate.lower().startswith("the "):
        candidate = candidate[4:]
    if candidate.lower().endswith(" project"):
        candidate = candidate[: -len(" project")]
    return candidate.strip()


def _alias_in_query(alias: str, query_lower: str) -> bool:
    return re.search(rf"\b{re.escape(alias.lower())}\b", query_lower) is not None


def classify_query(
    query: str,
    titles: Sequence[str],
    aliases: Mapping[str, Sequence[str]] = PROJECT_ALIASES,
    general_patterns: Sequence[re.Pattern] = DEFAULT_GENERAL_INFO_PATTERNS,
) -> Intent:
    """
    Classify a query against known project titles.

    Pure and deterministic: the same query and titles always give the same
    Intent. Never raises.

    Args:
        query: Raw visitor query
        titles: Known project titles in iteration order
        aliases: Canonical title to informal aliases
        general_patterns: General-information override patterns

    Returns:
        Intent: Classification result
    """
    query_lower = (query or "").lower().strip()
    if not query_lower:
        return Intent()

    for title in titles:
        if title and title.lower() in query_lower:
            return Intent(
                is_project_query=True,
                project_name=title,
                confidence=1.0,
                match_pattern=MatchPattern.DIRECT_MATCH,
            )

    for project_name, project_aliases in aliases.items():
        if any(_alias_in_query(alias, query_lower) for alias in project_aliases):
            return Intent(
                is_project_query=True,
                project_name=project_name,
                confidence=0.9,
                match_pattern=MatchPattern.ALIAS_MATCH,
            )

    if any(pattern.search(query_lower) for pattern in general_patterns):
        return Intent(
            is_project_query=False,
            confidence=0.9,
            match_pattern=MatchPattern.GENERAL_INFO,
        )

    for pattern in PROJECT_INTENT_PATTERNS:
        match = pattern.search(query_lower)
        if not match or not match.group(1):
            continue
        candidate = _clean_candidate(match.group(1))
        if not candidate or candidate in NON_PROJECT_CANDIDATES:
            continue

        best = find_best_matching_project(candidate, titles)
        if best and best[1] > FUZZY_MATCH_THRESHOLD:
            return Intent(
                is_project_query=True,
                project_name=best[0],
                confidence=min(best[1], 1.0),
                match_pattern=MatchPattern.INTENT_PATTERN_MATCH,
            )
        return Intent(
            is_project_query=True,
            confidence=0.5,
            match_pattern=MatchPattern.INTENT_WITHOUT_MATCH,
        )

    if any(term in query_lower for term in PROJECT_VOCABULARY):
        return Intent(
            is_project_query=True,
            confidence=0.3,
            match_pattern=MatchPattern.GENERAL_PROJECT_INTENT,
        )

    return Intent()


class ProjectTitleCache:
    """
    Read-through cache of known project titles.

    Entries expire after `ttl_seconds`. Concurrent refreshes may race; the
    last write wins, which is harmless because every refresh reads the same
    source. A failed load returns an empty list and leaves the cache as is.
    """

    def __init__(
        self,
        loader: Callable[[], Awaitable[list[str]]],
        ttl_seconds: float = 3600.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._loader = loader
        self._ttl = ttl_seconds
        self._clock = clock
        self._titles: list[str] | None = None
        self._loaded_at = 0.0

    async def get_titles(self) -> list[str]:
        now = self._clock()
        if self._titles is not None and now - self._loaded_at < self._ttl:
            return self._titles

        try:
            titles = await self._loader()
        except Exception as e:
            logger.warning(
                "Failed to load project titles",
                extra={"error_type": type(e).__name__, "error_msg": str(e)},
            )
            return []

        self._titles = list(titles)
        self._loaded_at = now
        return self._titles

    def invalidate(self) -> None:
        self._titles = None
        self._loaded_at = 0.0


class ProjectIntentDetector:
    """Detects project intent using cached titles and static aliases."""

    def __init__(
        self,
        title_cache: ProjectTitleCache,
        owner_name: str = DEFAULT_OWNER_NAME,
        aliases: Mapping[str, Sequence[str]] | None = None,
    ) -> None:
        self._title_cache = title_cache
        self._aliases = PROJECT_ALIASES if aliases is None else aliases
        self._general_patterns = build_general_info_patterns(owner_name)

    async def detect(self, query: str) -> Intent:
        """
        Classify a query.

        Args:
            query: Raw visitor query

        Returns:
            Intent: Never raises; an unavailable title list degrades to
            alias and pattern layers only
        """
        titles = await self._title_cache.get_titles()
        intent = classify_query(query, titles, self._aliases, self._general_patterns)
        logger.info(
            "Project intent analysis",
            extra={
                "is_project_query": intent.is_project_query,
                "project_name": intent.project_name,
                "confidence": intent.confidence,
                "match_pattern": intent.match_pattern.value,
            },
        )
        return intent
