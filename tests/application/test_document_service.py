"""
Test suite for DocumentService.

Uses the real pipeline over text files with a deterministic provider, an
in-memory database and temp directories.

System role: Verification of document service orchestration layer
"""

import uuid
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from docqa.application.services.document_service import DocumentService
from docqa.boundary.cache.embedding_store import EmbeddingStore
from docqa.boundary.db.connection import Database
from docqa.boundary.db.CRUD.document_crud import document_crud
from docqa.core.document_processing import DocumentPipeline
from docqa.core.exceptions import NotFoundError, ParsingError, UpstreamProviderError, ValidationError
from docqa.core.providers.fixed import FixedVectorEmbeddingProvider

POLICY_TEXT = b"Refunds are accepted within 30 days. Shipping takes a week."


@pytest.fixture
def documents_dir(tmp_path: Path) -> Path:
    return tmp_path / "documents"


@pytest.fixture
def document_service(
    database: Database,
    embedding_store: EmbeddingStore,
    embedding_provider: FixedVectorEmbeddingProvider,
    documents_dir: Path,
) -> DocumentService:
    """Provide DocumentService with a real pipeline."""
    pipeline = DocumentPipeline(embedding_store, embedding_provider, chunk_size=40)
    return DocumentService(
        database, embedding_store, pipeline, documents_dir, max_upload_bytes=1024
    )


class TestDocumentServiceUpload:
    """Test suite for DocumentService.upload and ingest."""

    @pytest.mark.asyncio
    async def test_upload_should_store_file_and_record_processed_document(
        self, document_service: DocumentService, documents_dir: Path
    ) -> None:
        # Act
        document, result = await document_service.upload("policy.txt", POLICY_TEXT, "text/plain")

        # Assert
        assert document.original_name == "policy.txt"
        assert document.embedding_doc_id == result.embedding_doc_id
        assert document.total_embeddings == result.chunk_count > 0
        assert document.processed_at is not None
        assert Path(document.file_path).read_bytes() == POLICY_TEXT
        assert Path(document.file_path).parent == documents_dir

    @pytest.mark.asyncio
    async def test_upload_should_reuse_embeddings_for_identical_file(
        self,
        document_service: DocumentService,
        embedding_provider: FixedVectorEmbeddingProvider,
    ) -> None:
        first, _ = await document_service.upload("policy.txt", POLICY_TEXT)
        calls = embedding_provider.calls

        second, result = await document_service.upload("policy.txt", POLICY_TEXT)

        assert result.reused is True
        assert second.id != first.id
        assert second.embedding_doc_id == first.embedding_doc_id
        assert embedding_provider.calls == calls

    @pytest.mark.asyncio
    async def test_upload_should_reject_empty_and_oversized_files(
        self, document_service: DocumentService
    ) -> None:
        with pytest.raises(ValidationError):
            await document_service.upload("empty.txt", b"")

        with pytest.raises(ValidationError):
            await document_service.upload("big.txt", b"x" * 2048)

    @pytest.mark.asyncio
    async def test_upload_should_remove_file_and_skip_row_when_parsing_fails(
        self,
        document_service: DocumentService,
        documents_dir: Path,
        database: Database,
    ) -> None:
        # Act
        with pytest.raises(ParsingError):
            await document_service.upload("notes.docx", b"binary content")

        # Assert
        assert list(documents_dir.iterdir()) == []
        async with database.session_scope() as session:
            assert await document_crud.count(session, include_deleted=True) == 0

    @pytest.mark.asyncio
    async def test_ingest_should_not_insert_row_when_pipeline_fails(
        self, database: Database, embedding_store: EmbeddingStore, tmp_path: Path
    ) -> None:
        # Arrange
        pipeline = MagicMock()
        pipeline.process = AsyncMock(side_effect=UpstreamProviderError("down", stage="chunk_embedding"))
        service = DocumentService(database, embedding_store, pipeline, tmp_path)

        # Act
        with pytest.raises(UpstreamProviderError):
            await service.ingest(tmp_path / "a.txt", "a.txt", "a-1.txt", 10)

        # Assert
        async with database.session_scope() as session:
            assert await document_crud.count(session, include_deleted=True) == 0

    def test_stored_file_name_should_keep_extension_and_be_unique(
        self, document_service: DocumentService
    ) -> None:
        first = document_service._stored_file_name("My Report (final).PDF")
        second = document_service._stored_file_name("My Report (final).PDF")

        assert first.endswith(".pdf")
        assert first.startswith("My_Report_final")
        assert first != second


class TestDocumentServiceLifecycle:
    """Test suite for listing, deleting and restoring documents."""

    @pytest.mark.asyncio
    async def test_delete_and_restore_document(self, document_service: DocumentService) -> None:
        # Arrange
        document, _ = await document_service.upload("policy.txt", POLICY_TEXT)

        # Act / Assert
        await document_service.delete_document(document.id)
        assert await document_service.list_documents() == []
        assert (await document_service.get_document(document.id)).is_deleted is True

        restored = await document_service.restore_document(document.id)
        assert restored.is_deleted is False
        assert len(await document_service.list_documents()) == 1

    @pytest.mark.asyncio
    async def test_delete_document_should_raise_for_unknown_id(
        self, document_service: DocumentService
    ) -> None:
        with pytest.raises(NotFoundError):
            await document_service.delete_document(uuid.uuid4())

    @pytest.mark.asyncio
    async def test_purge_document_should_remove_row_and_file_but_keep_embeddings(
        self, document_service: DocumentService, embedding_store: EmbeddingStore
    ) -> None:
        document, _ = await document_service.upload("policy.txt", POLICY_TEXT)

        await document_service.purge_document(document.id)

        with pytest.raises(NotFoundError):
            await document_service.get_document(document.id)
        assert not Path(document.file_path).exists()
        assert embedding_store.exists(document.embedding_doc_id)

    @pytest.mark.asyncio
    async def test_clear_documents_should_return_deleted_count(
        self, document_service: DocumentService
    ) -> None:
        await document_service.upload("a.txt", POLICY_TEXT)
        await document_service.upload("b.txt", POLICY_TEXT)

        assert await document_service.clear_documents() == 2
        assert await document_service.list_documents() == []


class TestDocumentServiceEmbeddingSets:
    """Test suite for embedding set maintenance."""

    @pytest.mark.asyncio
    async def test_embedding_set_operations(self, document_service: DocumentService) -> None:
        # Arrange
        document, _ = await document_service.upload("policy.txt", POLICY_TEXT)

        # Act
        listed = document_service.list_embedding_sets()
        loaded = document_service.get_embedding_set(document.embedding_doc_id)
        document_service.delete_embedding_set(document.embedding_doc_id)

        # Assert
        assert [s.embedding_doc_id for s in listed] == [document.embedding_doc_id]
        assert loaded.total_embeddings == document.total_embeddings
        with pytest.raises(NotFoundError):
            document_service.get_embedding_set(document.embedding_doc_id)
        with pytest.raises(NotFoundError):
            document_service.delete_embedding_set(document.embedding_doc_id)
