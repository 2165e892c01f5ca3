from fastapi.testclient import TestClient

from config import settings
from main import app

client = TestClient(app)


def _vector(*head: float) -> list[float]:
    vec = [0.0] * settings.embedding_dim
    vec[: len(head)] = head
    return vec


def _payload(**overrides):
    payload = {
        "query": {
            "embedding": _vector(1.0),
            "text": "React developer in Istanbul",
            "requirements": {
                "roles": ["Developer"],
                "skills": ["React"],
                "domain": "teknoloji",
                "location": "local",
            },
        },
        "candidates": [
            {
                "id": "ayse",
                "embedding": _vector(1.0),
                "roles": ["Developer"],
                "skills": ["React"],
                "locations": ["İstanbul / Beşiktaş"],
                "domain": "teknoloji",
                "relationshipDegree": 9,
            },
            {
                "id": "mehmet",
                "embedding": _vector(0.6, 0.8),
                "skills": ["React Native"],
                "locations": ["Trabzon"],
                "domain": "tasarim",
            },
        ],
    }
    payload.update(overrides)
    return payload


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["embedding_dim"] == settings.embedding_dim


def test_retrieve_ranks_and_explains():
    response = client.post("/retrieve", json=_payload())
    assert response.status_code == 200
    data = response.json()

    assert [r["personId"] for r in data["recommendations"]] == ["ayse", "mehmet"]
    top = data["recommendations"][0]
    assert top["subScores"]["proximity"] == 1.0
    assert top["boosts"]["exactRoleMatch"] is True
    assert top["boosts"]["highRelationshipDegree"] is True
    assert top["evidence"]["matchedRoles"] == ["Developer"]
    assert top["evidence"]["locationKey"] == "istanbul"
    assert data["metadata"]["totalPeople"] == 2
    assert data["metadata"]["semanticSearchUsed"] is True
    assert data["config"]["weights"]["semantic"] == 0.45


def test_retrieve_applies_config_override():
    response = client.post(
        "/retrieve",
        json=_payload(config={"thresholds": {"minKeywordScore": 0.4}}),
    )
    assert response.status_code == 200
    data = response.json()
    assert [r["personId"] for r in data["recommendations"]] == ["ayse"]
    assert data["metadata"]["filteredPeople"] == 1
    assert data["config"]["thresholds"]["minKeywordScore"] == 0.4


def test_retrieve_without_query_vector_degrades():
    payload = _payload()
    payload["query"]["embedding"] = []
    response = client.post("/retrieve", json=payload)
    assert response.status_code == 200
    data = response.json()
    assert data["metadata"]["semanticSearchUsed"] is False
    assert all(r["subScores"]["semantic"] == 0.0 for r in data["recommendations"])


def test_retrieve_rejects_wrong_query_dimension():
    payload = _payload()
    payload["query"]["embedding"] = [1.0, 0.0, 0.0]
    response = client.post("/retrieve", json=payload)
    assert response.status_code == 400
    assert "dimensions" in response.json()["detail"]


def test_retrieve_rejects_negative_weight():
    response = client.post("/retrieve", json=_payload(config={"weights": {"semantic": -1}}))
    assert response.status_code == 400


def test_retrieve_rejects_unknown_config_group():
    response = client.post("/retrieve", json=_payload(config={"bonus": {"x": 1}}))
    assert response.status_code == 400


def test_retrieve_rejects_oversized_pool(monkeypatch):
    monkeypatch.setattr(settings, "max_candidates", 1)
    response = client.post("/retrieve", json=_payload())
    assert response.status_code == 400
    assert "Too many candidates" in response.json()["detail"]


def test_retrieve_validates_body():
    response = client.post("/retrieve", json={"candidates": []})
    assert response.status_code == 422
