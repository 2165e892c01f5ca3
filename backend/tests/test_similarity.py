import pytest

from services.similarity import (
    batch_semantic_scores,
    cosine_similarity,
    is_usable_vector,
    semantic_score,
)


def test_cosine_similarity_orthogonal():
    assert cosine_similarity([1, 0, 0, 0], [0, 1, 0, 0]) == pytest.approx(0.0)


def test_cosine_similarity_identical():
    assert cosine_similarity([1, 0, 0, 0], [1, 0, 0, 0]) == pytest.approx(1.0)


def test_cosine_similarity_opposite():
    assert cosine_similarity([1, 2, 3], [-1, -2, -3]) == pytest.approx(-1.0)


def test_cosine_similarity_zero_vector():
    assert cosine_similarity([0, 0, 0], [1, 2, 3]) == 0.0


def test_cosine_similarity_dimension_mismatch():
    with pytest.raises(ValueError):
        cosine_similarity([1, 0], [1, 0, 0])


def test_semantic_score_clamps_negative():
    assert semantic_score([1, 0], [-1, 0]) == 0.0


def test_batch_matches_single():
    query = [0.3, 0.1, 0.9, 0.2]
    vectors = [[0.3, 0.1, 0.9, 0.2], [0.9, 0.0, 0.1, 0.0], [-0.3, -0.1, -0.9, -0.2]]
    scores = batch_semantic_scores(query, vectors)
    assert len(scores) == 3
    assert scores[0] == pytest.approx(1.0)
    assert scores[1] == pytest.approx(semantic_score(query, vectors[1]))
    assert scores[2] == 0.0


def test_batch_empty_and_zero_query():
    assert batch_semantic_scores([1.0, 0.0], []) == []
    assert batch_semantic_scores([0.0, 0.0], [[1.0, 0.0]]) == [0.0]


def test_is_usable_vector():
    assert is_usable_vector([0.1, 0.2], 2)
    assert not is_usable_vector(None, 2)
    assert not is_usable_vector([0.1], 2)
    assert not is_usable_vector([0.1, float("nan")], 2)
    assert not is_usable_vector([0.1, float("inf")], 2)
