"""Engine output: per-candidate explainable scores and the result envelope."""

from models.schemas.embeddings import CamelModel, QueryEmbedding
from models.schemas.scoring_config import ScoringConfig


class SubScores(CamelModel):
    semantic: float = 0.0  # 0-1
    keyword: float = 0.0  # 0-1
    proximity: float = 0.0  # 0-1
    domain: float = 0.0  # 0-1
    budget_penalty: float = 0.0  # -1-0


class Evidence(CamelModel):
    """Human-auditable justification for a candidate's score."""
    matched_roles: list[str] = []
    matched_skills: list[str] = []
    matched_expertise: list[str] = []
    matched_services: list[str] = []
    relationship_degree: float = 5.0
    availability_score: float = 0.5
    location_score: float = 0.5
    location_key: str | None = None
    distance_km: int | None = None
    distance_category: str = ""
    notes: list[str] = []  # degraded or missing signals


class PenaltyFlags(CamelModel):
    budget_mismatch: bool = False
    location_mismatch: bool = False
    availability_mismatch: bool = False
    language_mismatch: bool = False


class BoostFlags(CamelModel):
    exact_role_match: bool = False
    exact_skill_match: bool = False
    high_relationship_degree: bool = False
    domain_expertise: bool = False


class RetrievalScore(CamelModel):
    person_id: str
    total_score: float = 0.0  # unbounded: weighted sum plus additive adjustments
    sub_scores: SubScores = SubScores()
    evidence: Evidence = Evidence()
    penalties: PenaltyFlags = PenaltyFlags()
    boosts: BoostFlags = BoostFlags()


class RetrievalMetadata(CamelModel):
    total_people: int = 0
    filtered_people: int = 0
    retrieval_time_ms: float = 0.0
    semantic_search_used: bool = True


class HybridRetrievalResult(CamelModel):
    recommendations: list[RetrievalScore] = []  # total_score desc, semantic desc, id asc
    query: QueryEmbedding
    config: ScoringConfig
    metadata: RetrievalMetadata = RetrievalMetadata()
