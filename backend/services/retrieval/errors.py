"""Request-level failures. Degraded signals are not errors and never raise."""


class ScoringConfigError(ValueError):
    """Invalid scoring config or query vector; the whole request is rejected before scoring."""
