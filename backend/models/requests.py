from typing import Any

from pydantic import BaseModel, Field

from models.schemas.embeddings import PersonEmbedding, QueryEmbedding


class RetrieveRequest(BaseModel):
    query: QueryEmbedding
    candidates: list[PersonEmbedding] = Field(default_factory=list, description="Access-filtered candidate pool")
    config: dict[str, Any] | None = Field(
        None, description="Partial scoring config merged onto the defaults"
    )
