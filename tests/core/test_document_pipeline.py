"""
Test suite for document ingestion tasks and the pipeline orchestrator.

Uses text files so no PDF fixtures are needed.

System role: Verification of parse -> chunk -> embed -> save
"""

from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from docqa.boundary.cache.embedding_store import EmbeddingStore
from docqa.core.document_processing import DocumentPipeline
from docqa.core.document_processing.tasks import EmbeddingTask, ParsingTask
from docqa.core.exceptions import (
    DocumentProcessingError,
    ParsingError,
    UpstreamProviderError,
)
from docqa.core.providers.fixed import FixedVectorEmbeddingProvider


@pytest.fixture
def policy_file(tmp_path: Path) -> Path:
    path = tmp_path / "policy.txt"
    path.write_text(
        "Refunds are accepted within 30 days. Shipping takes a week. "
        "Gift cards cannot be exchanged.",
        encoding="utf-8",
    )
    return path


class TestParsingTask:
    """Test suite for ParsingTask."""

    def test_parse_should_read_text_file(self, policy_file: Path) -> None:
        text = ParsingTask().parse(policy_file)

        assert "Refunds are accepted within 30 days" in text

    def test_parse_should_raise_for_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ParsingError, match="File not found"):
            ParsingTask().parse(tmp_path / "missing.pdf")

    def test_parse_should_raise_for_unsupported_extension(self, tmp_path: Path) -> None:
        # Arrange
        path = tmp_path / "sheet.xlsx"
        path.write_bytes(b"binary")

        # Act / Assert
        with pytest.raises(ParsingError) as exc_info:
            ParsingTask().parse(path)

        assert exc_info.value.details["file_type"] == ".xlsx"

    def test_parse_should_raise_for_empty_text(self, tmp_path: Path) -> None:
        path = tmp_path / "blank.txt"
        path.write_text("   \n  ", encoding="utf-8")

        with pytest.raises(ParsingError, match="no extractable text"):
            ParsingTask().parse(path)

    def test_parse_should_wrap_loader_failures(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.pdf"
        path.write_bytes(b"not a pdf at all")

        with pytest.raises(ParsingError):
            ParsingTask().parse(path)


class TestEmbeddingTask:
    """Test suite for EmbeddingTask."""

    @pytest.mark.asyncio
    async def test_embed_should_call_provider_once_per_chunk_in_order(self) -> None:
        # Arrange
        provider = AsyncMock()
        provider.embed = AsyncMock(side_effect=[[1.0], [2.0], [3.0]])
        task = EmbeddingTask(provider, timeout_seconds=1.0)

        # Act
        vectors = await task.embed(["a", "b", "c"])

        # Assert
        assert vectors == [[1.0], [2.0], [3.0]]
        assert [call.args[0] for call in provider.embed.await_args_list] == ["a", "b", "c"]

    @pytest.mark.asyncio
    async def test_embed_should_surface_provider_failure_with_stage(self) -> None:
        provider = AsyncMock()
        provider.embed = AsyncMock(side_effect=ConnectionError("down"))

        with pytest.raises(UpstreamProviderError) as exc_info:
            await EmbeddingTask(provider).embed(["a"])

        assert exc_info.value.stage == "chunk_embedding"


class TestDocumentPipeline:
    """Test suite for DocumentPipeline."""

    @pytest.mark.asyncio
    async def test_process_should_save_embedding_set(
        self, policy_file: Path, embedding_store: EmbeddingStore
    ) -> None:
        # Arrange
        provider = FixedVectorEmbeddingProvider()
        pipeline = DocumentPipeline(embedding_store, provider, chunk_size=40)
        size = policy_file.stat().st_size

        # Act
        result = await pipeline.process(policy_file, "policy.txt", size)

        # Assert
        assert result.reused is False
        assert result.embedding_doc_id == EmbeddingStore.compute_fingerprint("policy.txt", size)
        assert result.chunk_count == provider.calls
        saved = embedding_store.load(result.embedding_doc_id)
        assert saved is not None
        assert saved.total_embeddings == result.chunk_count

    @pytest.mark.asyncio
    async def test_process_should_reuse_existing_set_without_provider_calls(
        self, policy_file: Path, embedding_store: EmbeddingStore
    ) -> None:
        # Arrange
        provider = FixedVectorEmbeddingProvider()
        pipeline = DocumentPipeline(embedding_store, provider)
        size = policy_file.stat().st_size
        await pipeline.process(policy_file, "policy.txt", size)
        calls_after_first = provider.calls

        # Act
        result = await pipeline.process(policy_file, "policy.txt", size)

        # Assert
        assert result.reused is True
        assert provider.calls == calls_after_first

    @pytest.mark.asyncio
    async def test_process_should_treat_renamed_file_as_new_document(
        self, policy_file: Path, embedding_store: EmbeddingStore
    ) -> None:
        pipeline = DocumentPipeline(embedding_store, FixedVectorEmbeddingProvider())
        size = policy_file.stat().st_size

        first = await pipeline.process(policy_file, "policy.txt", size)
        second = await pipeline.process(policy_file, "policy-copy.txt", size)

        assert first.embedding_doc_id != second.embedding_doc_id
        assert second.reused is False

    @pytest.mark.asyncio
    async def test_process_should_not_save_when_embedding_fails(
        self, policy_file: Path, embedding_store: EmbeddingStore
    ) -> None:
        # Arrange
        provider = AsyncMock()
        provider.embed = AsyncMock(side_effect=RuntimeError("boom"))
        pipeline = DocumentPipeline(embedding_store, provider)

        # Act
        with pytest.raises(UpstreamProviderError):
            await pipeline.process(policy_file, "policy.txt", 10)

        # Assert
        assert embedding_store.list_ids() == []

    @pytest.mark.asyncio
    async def test_process_should_raise_when_text_yields_no_chunks(
        self, tmp_path: Path, embedding_store: EmbeddingStore
    ) -> None:
        path = tmp_path / "dots.txt"
        path.write_text("... !!! ???", encoding="utf-8")
        pipeline = DocumentPipeline(embedding_store, FixedVectorEmbeddingProvider())

        with pytest.raises(DocumentProcessingError, match="no chunks"):
            await pipeline.process(path, "dots.txt", 11)
