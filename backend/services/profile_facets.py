"""Build engine inputs from contact records and raw query requirements.

The embedding vectors themselves come from an external provider; this module
produces the source text handed to that provider and the structured facets
the scorers read.
"""

import re
from typing import Any

from pydantic import BaseModel

from models.schemas.embeddings import GENERAL_DOMAIN, PersonEmbedding, QueryEmbedding, Requirements
from services.locale_normalizer import fold_text
from services.profile_signals import estimate_availability
from services.term_matcher import unique_terms


class ContactProfile(BaseModel):
    """A contact record as stored by the network application."""
    id: str
    first_name: str = ""
    last_name: str = ""
    profession: str = ""
    company: str = ""
    description: str = ""
    work_experience: str = ""
    future_goals: str = ""
    business_ideas: str = ""
    services: list[str] = []
    sectors: list[str] = []
    expertise: list[str] = []
    tags: list[str] = []
    languages: list[str] = []
    city: str = ""
    current_city: str = ""
    relationship_degree: float | None = None


# Checked in order; first hit wins
DOMAIN_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("teknoloji", ("developer", "engineer", "programmer", "yazilim", "muhendis")),
    ("pazarlama", ("marketing", "pazarlama")),
    ("finans", ("finance", "finans", "accounting", "muhasebe")),
)


def build_person_text(profile: ContactProfile) -> str:
    """Lower-cased text describing the contact, as sent to the embedding provider."""
    parts = [
        profile.first_name,
        profile.last_name,
        profile.profession,
        profile.description,
        *profile.services,
        *profile.tags,
        profile.city,
    ]
    return " ".join(p.strip() for p in parts if p and p.strip()).lower()


def infer_domain(text: str) -> str:
    folded = fold_text(text)
    for domain, keywords in DOMAIN_KEYWORDS:
        if any(re.search(rf"(?<![a-z0-9]){re.escape(k)}", folded) for k in keywords):
            return domain
    return GENERAL_DOMAIN


def estimate_profile_availability(profile: ContactProfile) -> float:
    text = " ".join([
        profile.first_name,
        profile.last_name,
        profile.profession,
        profile.company,
        profile.work_experience,
        profile.future_goals,
        profile.business_ideas,
        profile.description,
        *profile.services,
        *profile.sectors,
        *profile.expertise,
        *profile.tags,
    ])
    return estimate_availability(
        text,
        future_goals=profile.future_goals,
        business_ideas=profile.business_ideas,
    )


def build_person_embedding(
    profile: ContactProfile,
    embedding: list[float] | None = None,
) -> PersonEmbedding:
    """Map a contact record onto the engine's candidate contract."""
    text = build_person_text(profile)
    locations = unique_terms([profile.current_city, profile.city])
    return PersonEmbedding(
        id=profile.id,
        embedding=embedding,
        text=text,
        skills=list(profile.services),
        services=list(profile.services),
        expertise=list(profile.expertise or profile.tags),
        tags=list(profile.tags),
        languages=list(profile.languages),
        locations=locations,
        roles=[profile.profession] if profile.profession else [],
        domain=infer_domain(text),
        relationship_degree=profile.relationship_degree,
        availability_score=estimate_profile_availability(profile),
    )


def _requirement_list(requirements: dict[str, Any], *keys: str) -> list[str]:
    for key in keys:
        value = requirements.get(key)
        if value:
            return [str(v) for v in value]
    return []


def build_requirements(requirements: dict[str, Any]) -> Requirements:
    """Accept extractor output (``extractedRoles``/``extractedSkills``) or plain keys."""
    return Requirements(
        roles=_requirement_list(requirements, "extractedRoles", "roles"),
        skills=_requirement_list(requirements, "extractedSkills", "skills"),
        domain=requirements.get("domain") or GENERAL_DOMAIN,
        budget=requirements.get("budget") or "medium",
        location=requirements.get("location") or "hybrid",
        urgency=requirements.get("urgency") or "medium",
        languages=_requirement_list(requirements, "languages"),
    )


def build_query_text(query: str, requirements: Requirements) -> str:
    parts = [
        query,
        *requirements.roles,
        *requirements.skills,
        requirements.domain,
        requirements.budget,
        requirements.location,
        requirements.urgency,
    ]
    return " ".join(p.strip() for p in parts if p and p.strip()).lower()


def build_query_embedding(
    query: str,
    requirements: dict[str, Any],
    embedding: list[float] | None = None,
) -> QueryEmbedding:
    reqs = build_requirements(requirements)
    return QueryEmbedding(
        embedding=embedding or [],
        text=build_query_text(query, reqs),
        requirements=reqs,
    )
