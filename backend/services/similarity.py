"""Cosine similarity between query and candidate embedding vectors."""

import numpy as np
from sklearn.metrics.pairwise import cosine_similarity as sklearn_cosine


def is_usable_vector(vector: list[float] | None, dim: int) -> bool:
    """True if the vector exists, has the engine's fixed length and is finite."""
    if vector is None or len(vector) != dim:
        return False
    try:
        arr = np.asarray(vector, dtype=np.float64)
    except (TypeError, ValueError):
        return False
    return bool(np.all(np.isfinite(arr)))


def cosine_similarity(vec_a: list[float], vec_b: list[float]) -> float:
    """Cosine similarity in [-1, 1]; 0.0 when either vector has zero norm."""
    if len(vec_a) != len(vec_b):
        raise ValueError("Embeddings must have the same dimension")
    if not vec_a:
        return 0.0

    a = np.asarray(vec_a, dtype=np.float64).reshape(1, -1)
    b = np.asarray(vec_b, dtype=np.float64).reshape(1, -1)
    if not np.any(a) or not np.any(b):
        return 0.0
    return float(sklearn_cosine(a, b)[0][0])


def semantic_score(vec_a: list[float], vec_b: list[float]) -> float:
    """Cosine similarity clamped to [0, 1]."""
    return min(1.0, max(0.0, cosine_similarity(vec_a, vec_b)))


def batch_semantic_scores(
    query_vector: list[float],
    candidate_vectors: list[list[float]],
) -> list[float]:
    """Score many candidate vectors against one query in a single matrix op.

    All vectors must already have the query's length. Zero-norm rows score 0.
    Returns scores clamped to [0, 1], in input order.
    """
    if not candidate_vectors:
        return []

    query = np.asarray(query_vector, dtype=np.float64).reshape(1, -1)
    matrix = np.asarray(candidate_vectors, dtype=np.float64)
    if not np.any(query):
        return [0.0] * len(candidate_vectors)

    sims = sklearn_cosine(matrix, query)[:, 0]
    return [float(s) for s in np.clip(sims, 0.0, 1.0)]
