"""Semantic signal: cosine similarity of query and candidate embeddings.

Degraded mode: when the query vector is empty (embedding provider
unavailable) or any candidate vector is missing/malformed, the affected
candidates score 0 and the batch reports ``semantic_search_used = False``.
"""

from models.schemas.embeddings import PersonEmbedding, QueryEmbedding
from services.similarity import batch_semantic_scores, is_usable_vector


class SemanticBatch:
    """Semantic scores for one candidate pool, computed up front in one matrix op."""

    def __init__(self, scores: dict[int, float], usable: set[int], query_available: bool) -> None:
        self._scores = scores
        self._usable = usable
        self.query_available = query_available

    def score(self, index: int) -> float:
        return self._scores.get(index, 0.0)

    def is_usable(self, index: int) -> bool:
        """True if this candidate had a real semantic comparison."""
        return self.query_available and index in self._usable

    @property
    def degraded_count(self) -> int:
        return len(self._scores) - len(self._usable) if self.query_available else len(self._scores)

    @property
    def semantic_search_used(self) -> bool:
        return self.query_available and self.degraded_count == 0


def score_semantic_batch(
    query: QueryEmbedding,
    candidates: list[PersonEmbedding],
    dim: int,
) -> SemanticBatch:
    """Compute clamped cosine scores for every candidate with a usable vector."""
    query_available = bool(query.embedding)
    scores = {i: 0.0 for i in range(len(candidates))}
    usable: set[int] = set()

    if not query_available:
        return SemanticBatch(scores, usable, query_available=False)

    for i, person in enumerate(candidates):
        if is_usable_vector(person.embedding, dim):
            usable.add(i)

    ordered = sorted(usable)
    values = batch_semantic_scores(query.embedding, [candidates[i].embedding for i in ordered])
    for i, value in zip(ordered, values):
        scores[i] = value

    return SemanticBatch(scores, usable, query_available=True)
