"""
Test suite for grounded prompt assembly.

System role: Verification of the generation prompt layout
"""

from docqa.core.prompt_builder import (
    CONTEXT_END_MARKER,
    CONTEXT_START_MARKER,
    NOT_FOUND_ANSWER,
    QUESTION_LABEL,
    build_prompt,
    format_context,
)
from docqa.models.embedding import Chunk, ScoredChunk


def _scored(index: int, text: str, score: float) -> ScoredChunk:
    return ScoredChunk(chunk=Chunk(chunk_index=index, text=text, embedding=[1.0]), score=score)


class TestFormatContext:
    """Test suite for format_context."""

    def test_format_context_should_number_chunks_in_rank_order(self) -> None:
        # Arrange
        ranked = [_scored(4, "Most relevant", 0.9), _scored(0, "Less relevant", 0.5)]

        # Act
        context = format_context(ranked)

        # Assert
        assert context == "[1]\nMost relevant\n\n[2]\nLess relevant"

    def test_format_context_should_be_empty_without_chunks(self) -> None:
        assert format_context([]) == ""


class TestBuildPrompt:
    """Test suite for build_prompt."""

    def test_build_prompt_should_place_context_between_markers(self) -> None:
        # Act
        prompt = build_prompt("What is the refund policy?", [_scored(0, "Refunds within 30 days", 1.0)])

        # Assert
        start = prompt.index(CONTEXT_START_MARKER)
        end = prompt.index(CONTEXT_END_MARKER)
        assert start < prompt.index("[1]\nRefunds within 30 days") < end
        assert prompt.index(QUESTION_LABEL) > end
        assert prompt.endswith("What is the refund policy?")

    def test_build_prompt_should_include_not_found_instruction(self) -> None:
        prompt = build_prompt("Anything?", [])

        assert NOT_FOUND_ANSWER in prompt
        assert NOT_FOUND_ANSWER == (
            "Answer not found in document. Please try with a different query."
        )

    def test_build_prompt_should_keep_braces_in_chunk_text(self) -> None:
        prompt = build_prompt("Q?", [_scored(0, "config = {key: value}", 1.0)])

        assert "config = {key: value}" in prompt
