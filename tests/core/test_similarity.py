"""
Test suite for cosine similarity ranking.

System role: Verification of deterministic top-k retrieval
"""

import math

import pytest

from docqa.core.exceptions import ScoringError
from docqa.core.similarity import cosine_similarity, top_k
from docqa.models.embedding import Chunk


def _chunk(index: int, vector: list[float]) -> Chunk:
    return Chunk(chunk_index=index, text=f"chunk {index}", embedding=vector)


class TestCosineSimilarity:
    """Test suite for cosine_similarity."""

    def test_cosine_similarity_should_be_one_for_parallel_vectors(self) -> None:
        assert cosine_similarity([1.0, 2.0], [2.0, 4.0]) == pytest.approx(1.0)

    def test_cosine_similarity_should_be_zero_for_orthogonal_vectors(self) -> None:
        assert cosine_similarity([1.0, 0.0], [0.0, 1.0]) == pytest.approx(0.0)

    def test_cosine_similarity_should_score_zero_vector_as_zero(self) -> None:
        assert cosine_similarity([0.0, 0.0], [1.0, 1.0]) == 0.0

    def test_cosine_similarity_should_raise_on_dimension_mismatch(self) -> None:
        with pytest.raises(ScoringError) as exc_info:
            cosine_similarity([1.0, 2.0], [1.0, 2.0, 3.0])

        assert exc_info.value.details["query_dim"] == 2
        assert exc_info.value.details["candidate_dim"] == 3

    def test_cosine_similarity_should_raise_on_non_finite_values(self) -> None:
        with pytest.raises(ScoringError):
            cosine_similarity([1.0, math.nan], [1.0, 1.0])

    def test_cosine_similarity_should_return_plain_float(self) -> None:
        assert type(cosine_similarity([1.0, 2.0], [3.0, 4.0])) is float


class TestTopK:
    """Test suite for top_k."""

    def test_top_k_should_return_empty_for_empty_candidates(self) -> None:
        assert top_k([1.0, 0.0], []) == []

    def test_top_k_should_return_empty_for_missing_query_vector(self) -> None:
        candidates = [_chunk(0, [1.0, 0.0])]

        assert top_k(None, candidates) == []
        assert top_k([], candidates) == []

    def test_top_k_should_return_empty_for_non_positive_k(self) -> None:
        assert top_k([1.0, 0.0], [_chunk(0, [1.0, 0.0])], k=0) == []

    def test_top_k_should_sort_descending_by_score(self) -> None:
        # Arrange
        candidates = [
            _chunk(0, [0.0, 1.0]),
            _chunk(1, [1.0, 0.0]),
            _chunk(2, [1.0, 1.0]),
        ]

        # Act
        ranked = top_k([1.0, 0.0], candidates, k=3)

        # Assert
        assert [item.chunk.chunk_index for item in ranked] == [1, 2, 0]
        assert ranked[0].score >= ranked[1].score >= ranked[2].score

    def test_top_k_should_break_ties_by_ascending_chunk_index(self) -> None:
        # Arrange
        candidates = [
            _chunk(3, [1.0, 0.0]),
            _chunk(1, [2.0, 0.0]),
            _chunk(2, [0.5, 0.0]),
        ]

        # Act
        ranked = top_k([1.0, 0.0], candidates, k=3)

        # Assert
        assert [item.chunk.chunk_index for item in ranked] == [1, 2, 3]

    def test_top_k_should_return_at_most_k(self) -> None:
        candidates = [_chunk(i, [1.0, float(i)]) for i in range(10)]

        assert len(top_k([1.0, 1.0], candidates, k=3)) == 3
        assert len(top_k([1.0, 1.0], candidates[:2], k=3)) == 2

    def test_top_k_should_be_identical_across_repeated_calls(self) -> None:
        candidates = [_chunk(i, [math.sin(i), math.cos(i), 0.5]) for i in range(20)]

        first = top_k([0.3, 0.7, 0.1], candidates, k=5)
        second = top_k([0.3, 0.7, 0.1], candidates, k=5)

        assert [item.model_dump() for item in first] == [item.model_dump() for item in second]

    def test_top_k_should_fail_whole_call_on_bad_candidate(self) -> None:
        # Arrange
        candidates = [_chunk(0, [1.0, 0.0]), _chunk(1, [1.0, 0.0, 0.0])]

        # Act / Assert
        with pytest.raises(ScoringError) as exc_info:
            top_k([1.0, 0.0], candidates)

        assert exc_info.value.details["chunk_index"] == 1
