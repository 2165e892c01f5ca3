"""Requirement-term matching between query terms and candidate profile facets.

Combines:
1. Exact comparison on folded text (case, Turkish diacritics)
2. Containment ("react" vs "react native", "sql" vs "postgresql")
3. Term families that bridge English and Turkish wording
   ("software developer" vs "yazılım mühendisi")
4. Fuzzy matching for spelling variants
"""

import re
from collections.abc import Iterable

from rapidfuzz import fuzz

from services.locale_normalizer import fold_text

EXACT_MATCH = 1.0
PARTIAL_MATCH = 0.5
NO_MATCH = 0.0

FUZZY_THRESHOLD = 90
MIN_CONTAINMENT_LEN = 3

# Family markers are matched as whole words on folded text
TERM_FAMILIES: dict[str, tuple[str, ...]] = {
    "software": (
        "developer", "software", "yazilim", "programmer", "programlama", "kod",
        "frontend", "backend", "full stack", "fullstack",
        "javascript", "typescript", "react", "node", "node.js", "python", "java", "sql",
    ),
    "marketing": (
        "marketing", "pazarlama", "social media", "sosyal medya", "advertising", "reklam",
    ),
    "management": (
        "manager", "management", "mudur", "yonetici", "yonetim", "project management",
    ),
    "design": (
        "design", "designer", "tasarim", "tasarimci", "ui", "ux", "graphic", "grafik", "figma",
    ),
    "finance": (
        "finance", "finans", "accounting", "muhasebe", "tax", "vergi",
    ),
    "legal": (
        "legal", "hukuk", "law", "lawyer", "avukat", "contract", "sozlesme",
    ),
    "ai": (
        "ai", "yapay zeka", "machine learning", "ml", "data science", "veri bilimi",
    ),
}

_FAMILY_PATTERNS: dict[str, re.Pattern[str]] = {
    family: re.compile(
        r"(?<![a-z0-9])(?:" + "|".join(re.escape(m) for m in markers) + r")(?![a-z0-9])"
    )
    for family, markers in TERM_FAMILIES.items()
}


def term_key(term: str | None) -> str:
    """Folded comparison key for a term."""
    return fold_text(term)


def families_of(term: str) -> frozenset[str]:
    """Return the families a term belongs to (by whole-word markers)."""
    key = term_key(term)
    if not key:
        return frozenset()
    return frozenset(f for f, pattern in _FAMILY_PATTERNS.items() if pattern.search(key))


def match_strength(query_term: str, candidate_term: str) -> float:
    """How well a candidate term satisfies a query term: 1.0, 0.5 or 0.0."""
    q = term_key(query_term)
    c = term_key(candidate_term)
    if not q or not c:
        return NO_MATCH
    if q == c:
        return EXACT_MATCH

    if min(len(q), len(c)) >= MIN_CONTAINMENT_LEN and (q in c or c in q):
        return PARTIAL_MATCH

    if families_of(q) & families_of(c):
        return PARTIAL_MATCH

    # Don't fuzzy match very short terms
    if min(len(q), len(c)) >= MIN_CONTAINMENT_LEN and fuzz.ratio(q, c) >= FUZZY_THRESHOLD:
        return PARTIAL_MATCH

    return NO_MATCH


def best_match(query_term: str, candidate_terms: Iterable[str]) -> float:
    """Best match strength of a query term against any candidate term."""
    best = NO_MATCH
    for term in candidate_terms:
        best = max(best, match_strength(query_term, term))
        if best == EXACT_MATCH:
            break
    return best


def has_exact(query_terms: Iterable[str], candidate_terms: Iterable[str]) -> bool:
    """True if any query term equals any candidate term after folding."""
    candidate_keys = {term_key(t) for t in candidate_terms} - {""}
    return any(term_key(q) in candidate_keys for q in query_terms)


def unique_terms(terms: Iterable[str]) -> list[str]:
    """Deduplicate by folded key, keeping the first spelling and input order."""
    seen: set[str] = set()
    result: list[str] = []
    for term in terms:
        key = term_key(term)
        if key and key not in seen:
            seen.add(key)
            result.append(term)
    return result
