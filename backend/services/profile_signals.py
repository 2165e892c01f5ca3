"""Candidate-level signals not tied to the query: closeness, availability, cost tier."""

import re

from models.schemas.embeddings import PersonEmbedding, Requirements, Tier
from services.locale_normalizer import fold_text

DEFAULT_RELATIONSHIP_DEGREE = 5.0
HIGH_RELATIONSHIP_DEGREE = 8.0

AVAILABILITY_FLOOR = 0.5
AVAILABLE_SCORE = 0.8
BUSY_SCORE = 0.3
SEEKING_SCORE = 0.7
ENTREPRENEUR_SCORE = 0.6
DEFAULT_AVAILABILITY = 0.5

# Folded forms; "müsait" -> "musait", "boş" -> "bos"
AVAILABLE_KEYWORDS: tuple[str, ...] = ("musait", "available", "bos", "free", "acik", "hazir", "ready")
BUSY_KEYWORDS: tuple[str, ...] = ("mesgul", "busy", "dolu", "kapali", "yogun", "occupied")

_AVAILABLE_RE = re.compile(r"(?<![a-z0-9])(?:" + "|".join(AVAILABLE_KEYWORDS) + r")(?![a-z0-9])")
_BUSY_RE = re.compile(r"(?<![a-z0-9])(?:" + "|".join(BUSY_KEYWORDS) + r")(?![a-z0-9])")
_SEEKING_RE = re.compile(r"(?<![a-z0-9])(?:yeni|new)(?![a-z0-9])")

TIER_RANK: dict[str, int] = {"low": 0, "medium": 1, "high": 2}
BUDGET_PENALTY_PER_TIER = 0.5


def relationship_degree(person: PersonEmbedding) -> float:
    if person.relationship_degree is None:
        return DEFAULT_RELATIONSHIP_DEGREE
    return float(person.relationship_degree)


def estimate_availability(
    text: str,
    future_goals: str | None = None,
    business_ideas: str | None = None,
) -> float:
    """Heuristic 0-1 availability from profile wording.

    Explicit availability words win over busy words; someone looking for
    something new or carrying business ideas leans available.
    """
    folded = fold_text(text)
    if _AVAILABLE_RE.search(folded):
        return AVAILABLE_SCORE
    if _BUSY_RE.search(folded):
        return BUSY_SCORE
    if future_goals and _SEEKING_RE.search(fold_text(future_goals)):
        return SEEKING_SCORE
    if business_ideas and business_ideas.strip():
        return ENTREPRENEUR_SCORE
    return DEFAULT_AVAILABILITY


def availability_score(person: PersonEmbedding) -> float:
    if person.availability_score is not None:
        return float(person.availability_score)
    return estimate_availability(" ".join([person.text, *person.tags]))


def implied_cost_tier(person: PersonEmbedding) -> Tier:
    """Explicit tier, else inferred from closeness: close contacts cost less."""
    if person.cost_tier is not None:
        return person.cost_tier
    degree = relationship_degree(person)
    if degree >= 7:
        return "low"
    if degree >= 4:
        return "medium"
    return "high"


def budget_penalty(requirements: Requirements, person: PersonEmbedding) -> float:
    """Signed budget sub-score in [-1, 0]: -0.5 per tier above the query budget."""
    gap = TIER_RANK[implied_cost_tier(person)] - TIER_RANK[requirements.budget]
    if gap <= 0:
        return 0.0
    return -min(1.0, gap * BUDGET_PENALTY_PER_TIER)
