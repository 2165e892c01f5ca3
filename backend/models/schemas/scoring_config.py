"""Scoring configuration: weights, hard thresholds, penalty and boost magnitudes.

Weights are relative multipliers and need not sum to 1. Every number must be
finite; weights and magnitudes must be non-negative (zero disables a signal).
The budget penalty weight is positive: the budget sub-score itself is <= 0.
"""

from typing import Any

from pydantic import ConfigDict, Field

from models.schemas.embeddings import CamelModel


class _ConfigGroup(CamelModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)


class ScoringWeights(_ConfigGroup):
    semantic: float = Field(0.45, ge=0)
    keyword: float = Field(0.20, ge=0)
    proximity: float = Field(0.20, ge=0)
    domain: float = Field(0.10, ge=0)
    budget_penalty: float = Field(0.05, ge=0)


class ScoringThresholds(_ConfigGroup):
    # Kept very low by default so almost every candidate survives
    min_semantic_score: float = 0.01
    min_keyword_score: float = 0.001
    min_proximity_score: float = 0.01


class ScoringPenalties(_ConfigGroup):
    budget_mismatch: float = Field(0.2, ge=0)
    location_mismatch: float = Field(0.15, ge=0)
    availability_mismatch: float = Field(0.1, ge=0)
    language_mismatch: float = Field(0.1, ge=0)


class ScoringBoosts(_ConfigGroup):
    exact_role_match: float = Field(0.3, ge=0)
    exact_skill_match: float = Field(0.2, ge=0)
    high_relationship_degree: float = Field(0.15, ge=0)
    domain_expertise: float = Field(0.1, ge=0)


class ScoringConfig(_ConfigGroup):
    """Read-only for the duration of a request; safe to share across requests."""
    weights: ScoringWeights = ScoringWeights()
    thresholds: ScoringThresholds = ScoringThresholds()
    penalties: ScoringPenalties = ScoringPenalties()
    boosts: ScoringBoosts = ScoringBoosts()

    def with_overrides(self, overrides: dict[str, Any] | None) -> "ScoringConfig":
        """Return a new config with a partial override deep-merged per group.

        Field names may be given in snake_case or camelCase. Unknown groups or
        fields raise ``ValueError``; the merged result is fully re-validated.
        """
        if not overrides:
            return self

        data = self.model_dump()
        for group, values in overrides.items():
            if group not in data:
                raise ValueError(f"Unknown scoring config group: {group}")
            if values is None:
                continue
            if not isinstance(values, dict):
                raise ValueError(f"Scoring config group '{group}' must be an object")
            group_model = type(getattr(self, group))
            names = {}
            for name, field in group_model.model_fields.items():
                names[name] = name
                if field.alias:
                    names[field.alias] = name
            for key, value in values.items():
                if key not in names:
                    raise ValueError(f"Unknown field '{key}' in scoring config group '{group}'")
                data[group][names[key]] = value

        return ScoringConfig.model_validate(data)
