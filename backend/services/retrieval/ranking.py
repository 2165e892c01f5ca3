"""Weighted total, hard thresholds and deterministic ordering."""

from models.schemas.retrieval_result import RetrievalScore, SubScores
from models.schemas.scoring_config import ScoringThresholds, ScoringWeights


def weighted_total(sub_scores: SubScores, weights: ScoringWeights, adjustment: float = 0.0) -> float:
    """Σ weight·sub-score plus the net boost/penalty adjustment. Not renormalized."""
    return (
        weights.semantic * sub_scores.semantic
        + weights.keyword * sub_scores.keyword
        + weights.proximity * sub_scores.proximity
        + weights.domain * sub_scores.domain
        + weights.budget_penalty * sub_scores.budget_penalty
        + adjustment
    )


def threshold_failure(
    sub_scores: SubScores,
    thresholds: ScoringThresholds,
    *,
    check_semantic: bool = True,
) -> str | None:
    """Return the first failed threshold as a message, or None if the candidate survives.

    Domain has no hard threshold. ``check_semantic`` is False for candidates
    without a real semantic comparison (degraded mode).
    """
    if check_semantic and sub_scores.semantic < thresholds.min_semantic_score:
        return f"semantic {sub_scores.semantic:.3f} < {thresholds.min_semantic_score}"
    if sub_scores.keyword < thresholds.min_keyword_score:
        return f"keyword {sub_scores.keyword:.3f} < {thresholds.min_keyword_score}"
    if sub_scores.proximity < thresholds.min_proximity_score:
        return f"proximity {sub_scores.proximity:.3f} < {thresholds.min_proximity_score}"
    return None


def rank(scores: list[RetrievalScore]) -> list[RetrievalScore]:
    """Sort by total desc, then semantic desc, then person id asc."""
    return sorted(
        scores,
        key=lambda s: (-s.total_score, -s.sub_scores.semantic, s.person_id),
    )
