"""Hybrid retrieval engine: score, filter and rank a candidate pool.

Flow:
    query + config + candidates
      ├─ validate config and query vector       → ScoringConfigError on failure
      ├─ semantic batch (one matrix op)         → SemanticBatch
      ├─ per candidate (optionally fanned out over a thread pool):
      │     keyword / proximity / domain / budget  → SubScores + Evidence
      │     penalties + boosts                     → Adjustments
      │     hard thresholds                        → keep or drop
      └─ rank survivors (single barrier)        → HybridRetrievalResult

No step performs I/O or writes shared state, so an abandoned call leaves
nothing behind. Scores are unbounded: boosts and penalties are additive
on top of the weighted sum and are not renormalized.
"""

import logging
import math
import time
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Any, NamedTuple

from pydantic import ValidationError

from config import settings
from models.schemas.embeddings import PersonEmbedding, QueryEmbedding
from models.schemas.retrieval_result import (
    Evidence,
    HybridRetrievalResult,
    RetrievalMetadata,
    RetrievalScore,
    SubScores,
)
from models.schemas.scoring_config import ScoringConfig
from services import profile_signals
from services.retrieval.adjustments import evaluate_adjustments
from services.retrieval.domain_scorer import score_domain
from services.retrieval.errors import ScoringConfigError
from services.retrieval.keyword_scorer import score_keyword
from services.retrieval.proximity_scorer import score_proximity
from services.retrieval.ranking import rank, threshold_failure, weighted_total
from services.retrieval.semantic_scorer import SemanticBatch, score_semantic_batch

logger = logging.getLogger(__name__)

_NON_NEGATIVE_GROUPS = ("weights", "penalties", "boosts")


class _Outcome(NamedTuple):
    score: RetrievalScore
    failure: str | None
    location_unknown: bool


def validate_config(config: ScoringConfig) -> ScoringConfig:
    """Re-check a config (it may have been built with ``model_construct``)."""
    for group_name in ("weights", "thresholds", "penalties", "boosts"):
        group = getattr(config, group_name)
        for name, value in group.model_dump().items():
            if not isinstance(value, (int, float)) or not math.isfinite(value):
                raise ScoringConfigError(f"{group_name}.{name} must be a finite number, got {value!r}")
            if group_name in _NON_NEGATIVE_GROUPS and value < 0:
                raise ScoringConfigError(f"{group_name}.{name} must be non-negative, got {value!r}")
    return config


def resolve_config(
    config: ScoringConfig | dict[str, Any] | None,
    base: ScoringConfig | None = None,
) -> ScoringConfig:
    """Accept a full config, a partial override dict (merged onto ``base``) or None."""
    base = base or ScoringConfig()
    if config is None:
        return validate_config(base)
    if isinstance(config, ScoringConfig):
        return validate_config(config)
    try:
        return validate_config(base.with_overrides(config))
    except ValidationError as e:
        raise ScoringConfigError(f"Invalid scoring config: {e.error_count()} error(s): {e}") from e
    except ScoringConfigError:
        raise
    except ValueError as e:
        raise ScoringConfigError(str(e)) from e


def _score_candidate(
    index: int,
    *,
    query: QueryEmbedding,
    candidates: list[PersonEmbedding],
    semantic: SemanticBatch,
    config: ScoringConfig,
) -> _Outcome:
    person = candidates[index]

    keyword = score_keyword(query, person)
    proximity = score_proximity(query, person)
    domain = score_domain(query.requirements.domain, person.domain)

    sub_scores = SubScores(
        semantic=semantic.score(index),
        keyword=keyword.score,
        proximity=proximity.score,
        domain=domain.score,
        budget_penalty=profile_signals.budget_penalty(query.requirements, person),
    )
    adjustments = evaluate_adjustments(query, person, config, proximity=proximity, domain=domain)

    notes: list[str] = []
    if not semantic.query_available:
        notes.append("query embedding unavailable; semantic score set to 0")
    elif not semantic.is_usable(index):
        notes.append("candidate embedding missing or malformed; semantic score set to 0")
    notes.extend(keyword.notes)
    notes.extend(proximity.notes)
    notes.extend(domain.notes)

    evidence = Evidence(
        matched_roles=keyword.matched_roles,
        matched_skills=keyword.matched_skills,
        matched_expertise=keyword.matched_expertise,
        matched_services=keyword.matched_services,
        relationship_degree=profile_signals.relationship_degree(person),
        availability_score=profile_signals.availability_score(person),
        location_score=proximity.score,
        location_key=proximity.location_key,
        distance_km=proximity.distance_km,
        distance_category=proximity.category,
        notes=notes,
    )

    score = RetrievalScore(
        person_id=person.id,
        total_score=weighted_total(sub_scores, config.weights, adjustments.total),
        sub_scores=sub_scores,
        evidence=evidence,
        penalties=adjustments.penalties,
        boosts=adjustments.boosts,
    )
    failure = threshold_failure(
        sub_scores, config.thresholds, check_semantic=semantic.is_usable(index)
    )
    location_unknown = proximity.has_location and proximity.distance_km is None
    return _Outcome(score, failure, location_unknown)


class HybridRetrievalEngine:
    """Scores candidates against a query; the default config is shared read-only."""

    def __init__(
        self,
        config: ScoringConfig | None = None,
        *,
        embedding_dim: int | None = None,
        max_workers: int | None = None,
        parallel_threshold: int | None = None,
    ) -> None:
        self.config = resolve_config(config)
        self.embedding_dim = embedding_dim if embedding_dim is not None else settings.embedding_dim
        self.max_workers = max_workers if max_workers is not None else settings.retrieval_max_workers
        self.parallel_threshold = (
            parallel_threshold
            if parallel_threshold is not None
            else settings.retrieval_parallel_threshold
        )

    def validate_query(self, query: QueryEmbedding) -> None:
        """An empty vector is degraded mode; a wrong-length or non-finite one is rejected."""
        if not query.embedding:
            return
        if len(query.embedding) != self.embedding_dim:
            raise ScoringConfigError(
                f"Query embedding has {len(query.embedding)} dimensions, expected {self.embedding_dim}"
            )
        if not all(math.isfinite(v) for v in query.embedding):
            raise ScoringConfigError("Query embedding contains non-finite values")

    def retrieve(
        self,
        query: QueryEmbedding,
        candidates: Iterable[PersonEmbedding],
        config: ScoringConfig | dict[str, Any] | None = None,
    ) -> HybridRetrievalResult:
        start = time.perf_counter()
        config = resolve_config(config, base=self.config) if config is not None else self.config
        self.validate_query(query)
        pool = list(candidates)

        semantic = score_semantic_batch(query, pool, self.embedding_dim)
        outcomes = self._score_all(query, pool, semantic, config)

        survivors: list[RetrievalScore] = []
        unknown_locations = 0
        for outcome in outcomes:
            if outcome.location_unknown:
                unknown_locations += 1
            if outcome.failure is not None:
                logger.debug("Excluded %s: %s", outcome.score.person_id, outcome.failure)
                continue
            survivors.append(outcome.score)

        # Warn once per request, not once per candidate
        if not semantic.query_available and pool:
            logger.warning("Query embedding unavailable; ranking %d candidates without semantic scores", len(pool))
        elif semantic.degraded_count:
            logger.warning(
                "%d of %d candidates have no usable embedding; semantic search degraded",
                semantic.degraded_count,
                len(pool),
            )
        if unknown_locations:
            logger.info("%d candidates have locations outside the province table", unknown_locations)

        ranked = rank(survivors)
        elapsed_ms = (time.perf_counter() - start) * 1000

        logger.info(
            "Retrieved %d of %d candidates in %.1f ms (semantic=%s)",
            len(ranked),
            len(pool),
            elapsed_ms,
            semantic.semantic_search_used,
        )
        return HybridRetrievalResult(
            recommendations=ranked,
            query=query,
            config=config,
            metadata=RetrievalMetadata(
                total_people=len(pool),
                filtered_people=len(ranked),
                retrieval_time_ms=round(elapsed_ms, 3),
                semantic_search_used=semantic.semantic_search_used,
            ),
        )

    def _score_all(
        self,
        query: QueryEmbedding,
        pool: list[PersonEmbedding],
        semantic: SemanticBatch,
        config: ScoringConfig,
    ) -> list[_Outcome]:
        score_one = partial(
            _score_candidate, query=query, candidates=pool, semantic=semantic, config=config
        )
        indices = range(len(pool))
        if self.max_workers > 1 and len(pool) >= self.parallel_threshold:
            workers = min(self.max_workers, len(pool))
            with ThreadPoolExecutor(max_workers=workers) as executor:
                return list(executor.map(score_one, indices))
        return [score_one(i) for i in indices]


def retrieve(
    query: QueryEmbedding,
    candidates: Iterable[PersonEmbedding],
    config: ScoringConfig | dict[str, Any] | None = None,
) -> HybridRetrievalResult:
    """One-shot retrieval with settings-derived engine defaults."""
    return HybridRetrievalEngine().retrieve(query, candidates, config)
