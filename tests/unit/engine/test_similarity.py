"""Tests for cosine similarity and best-candidate selection."""

from __future__ import annotations

import math

import pytest

from shapeshift.engine.similarity import best_match, cosine_similarity


class TestCosineSimilarity:
    def test_orthogonal_vectors_score_zero(self):
        assert cosine_similarity([1.0, 0.0, 0.0], [0.0, 1.0, 0.0]) == 0.0

    def test_identical_vectors_score_one(self):
        assert cosine_similarity([0.3, 0.4, 0.5], [0.3, 0.4, 0.5]) == pytest.approx(1.0)

    def test_opposite_vectors_score_minus_one(self):
        assert cosine_similarity([1.0, 2.0], [-1.0, -2.0]) == pytest.approx(-1.0)

    def test_is_scale_invariant(self):
        assert cosine_similarity([1.0, 1.0], [5.0, 5.0]) == pytest.approx(1.0)

    def test_is_symmetric(self):
        a, b = [0.9, 0.1, 0.0], [0.2, 0.5, 0.3]
        assert cosine_similarity(a, b) == pytest.approx(cosine_similarity(b, a))

    def test_zero_vector_scores_zero(self):
        assert cosine_similarity([0.0, 0.0], [1.0, 0.0]) == 0.0
        assert cosine_similarity([0.0, 0.0], [0.0, 0.0]) == 0.0
        assert not math.isnan(cosine_similarity([0.0], [0.0]))

    def test_nan_components_score_zero(self):
        assert cosine_similarity([math.nan, 1.0], [1.0, 1.0]) == 0.0

    def test_infinite_components_score_zero(self):
        assert cosine_similarity([math.inf, 1.0], [math.inf, 1.0]) == 0.0

    def test_length_mismatch_raises(self):
        with pytest.raises(ValueError):
            cosine_similarity([1.0, 0.0], [1.0, 0.0, 0.0])


class TestBestMatch:
    def test_returns_index_and_score_of_best(self):
        candidates = [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]]
        index, score = best_match([0.0, 1.0, 0.0], candidates)
        assert index == 1
        assert score == pytest.approx(1.0)

    def test_ties_resolve_to_first_candidate(self):
        candidates = [[0.0, 1.0], [1.0, 0.0], [2.0, 0.0]]
        assert best_match([1.0, 0.0], candidates)[0] == 1

    def test_nan_vectors_still_yield_a_candidate(self):
        assert best_match([math.nan, math.nan], [[1.0, 0.0], [0.0, 1.0]]) == (0, 0.0)

    def test_empty_candidates(self):
        assert best_match([1.0, 0.0], []) is None

