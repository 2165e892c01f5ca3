"""Hybrid candidate retrieval and ranking.

Scores a pool of person embeddings against a query with four independent
signals (semantic, keyword, proximity, domain), applies penalty/boost rules,
drops candidates under the hard thresholds and returns an explainable,
deterministically ordered result.
"""

from services.retrieval.engine import HybridRetrievalEngine, resolve_config, retrieve, validate_config
from services.retrieval.errors import ScoringConfigError

__all__ = [
    "HybridRetrievalEngine",
    "ScoringConfigError",
    "resolve_config",
    "retrieve",
    "validate_config",
]
