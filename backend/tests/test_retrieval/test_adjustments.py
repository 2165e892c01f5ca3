"""Tests for penalty and boost rules."""

import pytest

from conftest import make_person, make_query
from models.schemas.scoring_config import ScoringConfig
from services.retrieval.adjustments import evaluate_adjustments, evaluate_boosts, evaluate_penalties
from services.retrieval.domain_scorer import score_domain
from services.retrieval.proximity_scorer import score_proximity


def _penalties(query, person):
    return evaluate_penalties(query, person, score_proximity(query, person))


def _boosts(query, person):
    return evaluate_boosts(query, person, score_domain(query.requirements.domain, person.domain))


class TestPenalties:
    def test_none_fire_for_plain_candidate(self):
        flags = _penalties(make_query(), make_person("p1"))
        assert not any(flags.model_dump().values())

    def test_budget_mismatch(self):
        query = make_query(budget="low")
        assert _penalties(query, make_person("p1", cost_tier="high")).budget_mismatch
        assert not _penalties(query, make_person("p2", cost_tier="low")).budget_mismatch

    def test_location_mismatch_only_for_local(self):
        person = make_person("p1", locations=[])
        assert _penalties(make_query(location="local"), person).location_mismatch
        assert not _penalties(make_query(location="remote"), person).location_mismatch
        assert not _penalties(make_query(location="local"), make_person("p2")).location_mismatch

    def test_availability_mismatch(self):
        assert _penalties(make_query(), make_person("p1", availability_score=0.3)).availability_mismatch
        assert not _penalties(make_query(), make_person("p2", availability_score=0.5)).availability_mismatch

    def test_availability_estimated_from_text(self):
        assert _penalties(make_query(), make_person("p1", text="şu an çok meşgul")).availability_mismatch

    def test_language_mismatch(self):
        query = make_query(languages=["English", "Türkçe"])
        assert _penalties(query, make_person("p1", languages=["english"])).language_mismatch
        assert not _penalties(query, make_person("p2", languages=["ENGLISH", "Turkce"])).language_mismatch
        assert not _penalties(make_query(), make_person("p3")).language_mismatch


class TestBoosts:
    def test_exact_role_and_skill(self):
        query = make_query(roles=["Software Developer"], skills=["React"])
        person = make_person("p1", roles=["software developer"], skills=["react"])
        flags = _boosts(query, person)
        assert flags.exact_role_match
        assert flags.exact_skill_match

    def test_partial_matches_do_not_boost(self):
        query = make_query(roles=["Developer"], skills=["React"])
        person = make_person("p1", roles=["Senior Developer"], skills=["React Native"])
        flags = _boosts(query, person)
        assert not flags.exact_role_match
        assert not flags.exact_skill_match

    @pytest.mark.parametrize("degree,expected", [(8, True), (10, True), (7.9, False), (None, False)])
    def test_high_relationship(self, degree, expected):
        person = make_person("p1", relationship_degree=degree)
        assert _boosts(make_query(), person).high_relationship_degree is expected

    def test_domain_expertise_needs_exact_domain_and_expertise(self):
        query = make_query(domain="teknoloji")
        assert _boosts(query, make_person("p1", expertise=["Cloud"])).domain_expertise
        assert not _boosts(query, make_person("p2")).domain_expertise
        assert not _boosts(query, make_person("p3", domain="tasarim", expertise=["UI"])).domain_expertise


class TestAdjustmentTotal:
    def test_all_rules_evaluated_and_summed(self):
        config = ScoringConfig()
        query = make_query(roles=["Developer"], location="local", budget="low")
        person = make_person("p1", roles=["Developer"], locations=[], cost_tier="high", relationship_degree=9)
        proximity = score_proximity(query, person)
        domain = score_domain(query.requirements.domain, person.domain)
        adj = evaluate_adjustments(query, person, config, proximity=proximity, domain=domain)

        assert adj.boosts.exact_role_match
        assert adj.boosts.high_relationship_degree
        assert adj.penalties.budget_mismatch
        assert adj.penalties.location_mismatch
        expected = 0.3 + 0.15 - 0.2 - 0.15
        assert adj.total == pytest.approx(expected)

    def test_zero_magnitudes_disable_rules(self):
        config = ScoringConfig().with_overrides({"boosts": {"exactRoleMatch": 0}})
        query = make_query(roles=["Developer"])
        person = make_person("p1", roles=["Developer"])
        adj = evaluate_adjustments(
            query,
            person,
            config,
            proximity=score_proximity(query, person),
            domain=score_domain(query.requirements.domain, person.domain),
        )
        assert adj.boosts.exact_role_match
        assert adj.total == 0.0
