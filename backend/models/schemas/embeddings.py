"""Retrieval inputs: the query embedding and the candidate person embeddings."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Tier = Literal["low", "medium", "high"]
LocationMode = Literal["local", "remote", "hybrid"]

GENERAL_DOMAIN = "genel"


class CamelModel(BaseModel):
    """Base for contracts that travel as camelCase JSON but are built in snake_case."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Requirements(CamelModel):
    """Structured requirements extracted from the query text."""
    model_config = ConfigDict(frozen=True)

    roles: list[str] = []
    skills: list[str] = []
    domain: str = GENERAL_DOMAIN
    budget: Tier = "medium"
    location: LocationMode = "hybrid"
    urgency: Tier = "medium"
    languages: list[str] = []  # languages the engagement requires; empty = any


class QueryEmbedding(CamelModel):
    """One retrieval request. An empty `embedding` means the provider was unavailable."""
    model_config = ConfigDict(frozen=True)

    embedding: list[float] = []
    text: str = ""
    requirements: Requirements = Requirements()


class PersonEmbedding(CamelModel):
    """A candidate profile as supplied by the storage layer (already access-filtered)."""
    id: str
    embedding: list[float] | None = None
    text: str = ""
    skills: list[str] = []
    services: list[str] = []
    expertise: list[str] = []
    tags: list[str] = []
    languages: list[str] = []
    locations: list[str] = []
    roles: list[str] = []
    domain: str = ""

    # Closeness to the network owner, 0-10. Missing means "average" (5).
    relationship_degree: float | None = Field(None, ge=0, le=10)
    # 0-1; estimated from the profile text when missing.
    availability_score: float | None = Field(None, ge=0, le=1)
    # Derived from relationship_degree when missing.
    cost_tier: Tier | None = None
