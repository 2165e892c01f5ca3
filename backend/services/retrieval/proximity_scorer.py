"""Proximity signal: distance category of the candidate's nearest known location."""

from models.schemas.embeddings import PersonEmbedding, QueryEmbedding
from models.schemas.signals import ProximitySignal
from services.geo_proximity import category_for_distance, distance_km
from services.locale_normalizer import normalize

CATEGORY_SCORES: dict[str, float] = {
    "çok yakın": 1.0,
    "yakın": 0.8,
    "orta": 0.6,
    "uzak": 0.4,
    "çok uzak": 0.2,
}
NEUTRAL_PROXIMITY = 0.5


def score_proximity(query: QueryEmbedding, person: PersonEmbedding) -> ProximitySignal:
    """Score in [0, 1]; nearest category highest.

    Remote engagements make distance irrelevant, so they always get the
    neutral score (distance is still reported as evidence). Unknown or
    missing locations are neutral too.
    """
    keys = [k for k in (normalize(loc) for loc in person.locations) if k]

    nearest_key: str | None = None
    nearest_km: int | None = None
    for key in keys:
        km = distance_km(key)
        if km is not None and (nearest_km is None or km < nearest_km):
            nearest_key, nearest_km = key, km

    notes: list[str] = []
    if nearest_km is None:
        category = ""
        score = NEUTRAL_PROXIMITY
        if keys:
            nearest_key = keys[0]
            notes.append(f"location '{keys[0]}' is not in the province table")
        else:
            notes.append("no location listed")
    else:
        category = category_for_distance(nearest_km)
        score = CATEGORY_SCORES[category]

    if query.requirements.location == "remote":
        score = NEUTRAL_PROXIMITY

    return ProximitySignal(
        score=score,
        location_key=nearest_key,
        distance_km=nearest_km,
        category=category,
        has_location=bool(keys),
        notes=notes,
    )
