"""Shared test configuration, pytest markers and builders for engine inputs."""

import pytest

from models.schemas.embeddings import PersonEmbedding, QueryEmbedding, Requirements
from models.schemas.scoring_config import ScoringConfig

# Small fixed vector length so fixtures stay readable
DIM = 4


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "scenario: end-to-end ranking scenarios over hand-built candidate pools"
    )


def make_query(
    embedding: list[float] | None = None,
    text: str = "",
    **requirements,
) -> QueryEmbedding:
    return QueryEmbedding(
        embedding=[1.0, 0.0, 0.0, 0.0] if embedding is None else embedding,
        text=text,
        requirements=Requirements(**requirements),
    )


def make_person(person_id: str, embedding: list[float] | None = None, **fields) -> PersonEmbedding:
    fields.setdefault("domain", "teknoloji")
    fields.setdefault("locations", ["Istanbul"])
    return PersonEmbedding(
        id=person_id,
        embedding=[1.0, 0.0, 0.0, 0.0] if embedding is None else embedding,
        **fields,
    )


def zero_adjustments_config(**weights) -> ScoringConfig:
    """Config with every boost/penalty disabled and no hard thresholds."""
    return ScoringConfig().with_overrides({
        "weights": weights,
        "thresholds": {"min_semantic_score": 0, "min_keyword_score": 0, "min_proximity_score": 0},
        "penalties": {k: 0 for k in ScoringConfig().penalties.model_dump()},
        "boosts": {k: 0 for k in ScoringConfig().boosts.model_dump()},
    })


@pytest.fixture
def engine():
    from services.retrieval import HybridRetrievalEngine

    return HybridRetrievalEngine(embedding_dim=DIM, max_workers=1)
