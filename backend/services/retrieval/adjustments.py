"""Penalty and boost rules applied on top of the weighted sub-scores.

Every rule is evaluated independently (no early exit); fired rules add their
configured magnitude (boosts) or subtract it (penalties).
"""

from pydantic import BaseModel

from models.schemas.embeddings import PersonEmbedding, QueryEmbedding
from models.schemas.retrieval_result import BoostFlags, PenaltyFlags
from models.schemas.scoring_config import ScoringConfig
from models.schemas.signals import DomainSignal, ProximitySignal
from services import profile_signals
from services.retrieval.domain_scorer import EXACT_SCORE as EXACT_DOMAIN_SCORE
from services.term_matcher import has_exact, term_key


class Adjustments(BaseModel):
    penalties: PenaltyFlags = PenaltyFlags()
    boosts: BoostFlags = BoostFlags()
    total: float = 0.0  # sum of fired boosts minus sum of fired penalties


def _missing_languages(query: QueryEmbedding, person: PersonEmbedding) -> list[str]:
    spoken = {term_key(lang) for lang in person.languages}
    return [lang for lang in query.requirements.languages if term_key(lang) and term_key(lang) not in spoken]


def evaluate_penalties(
    query: QueryEmbedding,
    person: PersonEmbedding,
    proximity: ProximitySignal,
) -> PenaltyFlags:
    reqs = query.requirements
    return PenaltyFlags(
        budget_mismatch=profile_signals.budget_penalty(reqs, person) < 0,
        location_mismatch=reqs.location == "local" and not proximity.has_location,
        availability_mismatch=(
            profile_signals.availability_score(person) < profile_signals.AVAILABILITY_FLOOR
        ),
        language_mismatch=bool(_missing_languages(query, person)),
    )


def evaluate_boosts(
    query: QueryEmbedding,
    person: PersonEmbedding,
    domain: DomainSignal,
) -> BoostFlags:
    reqs = query.requirements
    return BoostFlags(
        exact_role_match=has_exact(reqs.roles, person.roles),
        exact_skill_match=has_exact(reqs.skills, person.skills),
        high_relationship_degree=(
            profile_signals.relationship_degree(person) >= profile_signals.HIGH_RELATIONSHIP_DEGREE
        ),
        domain_expertise=domain.score >= EXACT_DOMAIN_SCORE and bool(person.expertise),
    )


def evaluate_adjustments(
    query: QueryEmbedding,
    person: PersonEmbedding,
    config: ScoringConfig,
    *,
    proximity: ProximitySignal,
    domain: DomainSignal,
) -> Adjustments:
    penalties = evaluate_penalties(query, person, proximity)
    boosts = evaluate_boosts(query, person, domain)

    total = 0.0
    for name, fired in boosts.model_dump().items():
        if fired:
            total += getattr(config.boosts, name)
    for name, fired in penalties.model_dump().items():
        if fired:
            total -= getattr(config.penalties, name)

    return Adjustments(penalties=penalties, boosts=boosts, total=total)
