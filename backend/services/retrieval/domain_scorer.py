"""Domain signal: exact, near or related match of domain labels."""

from rapidfuzz import fuzz

from models.schemas.embeddings import GENERAL_DOMAIN
from models.schemas.signals import DomainSignal
from services.locale_normalizer import fold_text

EXACT_SCORE = 1.0
NEAR_SCORE = 0.8
RELATED_SCORE = 0.5
NEAR_THRESHOLD = 90

# English and Turkish labels for the same domain
DOMAIN_ALIASES: dict[str, str] = {
    "technology": "teknoloji",
    "tech": "teknoloji",
    "software": "teknoloji",
    "yazilim": "teknoloji",
    "marketing": "pazarlama",
    "finance": "finans",
    "accounting": "finans",
    "design": "tasarim",
    "legal": "hukuk",
    "law": "hukuk",
    "health": "saglik",
    "healthcare": "saglik",
    "education": "egitim",
    "general": GENERAL_DOMAIN,
}

RELATED_DOMAINS: frozenset[frozenset[str]] = frozenset({
    frozenset({"teknoloji", "tasarim"}),
    frozenset({"pazarlama", "tasarim"}),
    frozenset({"finans", "hukuk"}),
    frozenset({"teknoloji", "egitim"}),
    frozenset({"saglik", "egitim"}),
})


def canonical_domain(label: str | None) -> str:
    key = fold_text(label)
    return DOMAIN_ALIASES.get(key, key)


def score_domain(query_domain: str | None, person_domain: str | None) -> DomainSignal:
    query_key = canonical_domain(query_domain)
    person_key = canonical_domain(person_domain)

    if not query_key or not person_key:
        side = "query" if not query_key else "candidate"
        return DomainSignal(score=0.0, notes=[f"{side} has no domain label"])

    if query_key == person_key:
        return DomainSignal(score=EXACT_SCORE, match_type="exact")

    if fuzz.ratio(query_key, person_key) >= NEAR_THRESHOLD:
        return DomainSignal(score=NEAR_SCORE, match_type="near")

    if GENERAL_DOMAIN in (query_key, person_key):
        return DomainSignal(score=RELATED_SCORE, match_type="general")

    if frozenset({query_key, person_key}) in RELATED_DOMAINS:
        return DomainSignal(score=RELATED_SCORE, match_type="related")

    return DomainSignal(score=0.0, match_type="none")
