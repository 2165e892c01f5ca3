"""Keyword signal: requirement-term overlap with the candidate's facets.

Requirement terms are roles and skills together, deduplicated by folded key.
Roles are matched against candidate roles; skills against candidate skills,
expertise and services. A term asked for as both is matched against all of
them. Each term earns its best match credit (1.0 exact, 0.5 partial) and the
sum is divided by the number of terms, so a short requirement list is not
diluted by a large profile.
"""

from models.schemas.embeddings import PersonEmbedding, QueryEmbedding
from models.schemas.signals import KeywordSignal
from services.term_matcher import NO_MATCH, best_match, term_key, unique_terms

# Score when the query carries no role or skill requirements
NEUTRAL_KEYWORD_SCORE = 0.5


def score_keyword(query: QueryEmbedding, person: PersonEmbedding) -> KeywordSignal:
    reqs = query.requirements
    terms = unique_terms([*reqs.roles, *reqs.skills])

    if not terms:
        return KeywordSignal(
            score=NEUTRAL_KEYWORD_SCORE,
            notes=["query has no role or skill requirements"],
        )

    role_keys = {term_key(r) for r in reqs.roles}
    skill_keys = {term_key(s) for s in reqs.skills}

    credit = 0.0
    matched: dict[str, list[str]] = {"roles": [], "skills": [], "expertise": [], "services": []}

    for term in terms:
        key = term_key(term)
        by_facet: dict[str, float] = {}
        if key in role_keys:
            by_facet["roles"] = best_match(term, person.roles)
        if key in skill_keys:
            by_facet["skills"] = best_match(term, person.skills)
            by_facet["expertise"] = best_match(term, person.expertise)
            by_facet["services"] = best_match(term, person.services)
        for facet, strength in by_facet.items():
            if strength > NO_MATCH:
                matched[facet].append(term)
        credit += max(by_facet.values())

    return KeywordSignal(
        score=round(credit / len(terms), 6),
        matched_roles=matched["roles"],
        matched_skills=matched["skills"],
        matched_expertise=matched["expertise"],
        matched_services=matched["services"],
        requirement_count=len(terms),
    )
