"""Per-signal scorer outputs: a bounded score plus the evidence behind it."""

from pydantic import BaseModel


class KeywordSignal(BaseModel):
    """Requirement-term overlap between the query and a candidate's facets."""
    score: float = 0.0  # 0.0-1.0, normalized by number of requirement terms
    matched_roles: list[str] = []
    matched_skills: list[str] = []
    matched_expertise: list[str] = []
    matched_services: list[str] = []
    requirement_count: int = 0
    notes: list[str] = []


class ProximitySignal(BaseModel):
    """Geographic closeness of the candidate to the reference point."""
    score: float = 0.5  # 0.0-1.0, 0.5 is neutral
    location_key: str | None = None
    distance_km: int | None = None
    category: str = ""  # "" when the location is unknown
    has_location: bool = False  # at least one location normalized to a key
    notes: list[str] = []


class DomainSignal(BaseModel):
    """Query domain vs. candidate domain label."""
    score: float = 0.0  # 1.0 exact, 0.8 near spelling, 0.5 related/general, 0.0 otherwise
    match_type: str = "none"  # exact, near, related, general, none
    notes: list[str] = []
