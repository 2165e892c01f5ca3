"""Pydantic contracts for the hybrid retrieval engine."""

from models.schemas.embeddings import PersonEmbedding, QueryEmbedding, Requirements
from models.schemas.scoring_config import (
    ScoringBoosts,
    ScoringConfig,
    ScoringPenalties,
    ScoringThresholds,
    ScoringWeights,
)
from models.schemas.retrieval_result import (
    BoostFlags,
    Evidence,
    HybridRetrievalResult,
    PenaltyFlags,
    RetrievalMetadata,
    RetrievalScore,
    SubScores,
)
from models.schemas.signals import DomainSignal, KeywordSignal, ProximitySignal

__all__ = [
    "PersonEmbedding",
    "QueryEmbedding",
    "Requirements",
    "ScoringBoosts",
    "ScoringConfig",
    "ScoringPenalties",
    "ScoringThresholds",
    "ScoringWeights",
    "BoostFlags",
    "Evidence",
    "HybridRetrievalResult",
    "PenaltyFlags",
    "RetrievalMetadata",
    "RetrievalScore",
    "SubScores",
    "DomainSignal",
    "KeywordSignal",
    "ProximitySignal",
]
