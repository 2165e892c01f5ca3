"""Shared dependencies for API routes."""

from services.retrieval import HybridRetrievalEngine

_engine: HybridRetrievalEngine | None = None


def get_engine() -> HybridRetrievalEngine:
    """Process-wide engine; its default config is read-only and shared across requests."""
    global _engine
    if _engine is None:
        _engine = HybridRetrievalEngine()
    return _engine
