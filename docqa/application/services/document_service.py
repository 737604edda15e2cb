"""
Document service.

Stores uploads, runs the ingestion pipeline and records the resulting
document rows. Also exposes document and embedding set maintenance.

Dependencies: docqa.core.document_processing, docqa.boundary.cache, docqa.boundary.db
System role: Document lifecycle orchestration layer
"""

import logging
import re
import time
import uuid
from pathlib import Path
from typing import Sequence
from uuid import UUID

from docqa.boundary.cache.embedding_store import EmbeddingStore
from docqa.boundary.db.connection import Database
from docqa.boundary.db.CRUD.document_crud import document_crud
from docqa.boundary.db.models.document_model import DocumentModel
from docqa.core.document_processing import DocumentPipeline, PipelineResult
from docqa.core.exceptions import NotFoundError, ValidationError
from docqa.models.embedding import EmbeddingSet
from docqa.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


class DocumentService:
    """Coordinates upload storage, ingestion and document bookkeeping."""

    def __init__(
        self,
        database: Database,
        embedding_store: EmbeddingStore,
        pipeline: DocumentPipeline,
        documents_dir: Path | str,
        max_upload_bytes: int = 10 * 1024 * 1024,
        preview_length: int = 50,
    ) -> None:
        """
        Initialize document service.

        Args:
            database: Database component
            embedding_store: Embedding set store
            pipeline: Ingestion pipeline
            documents_dir: Directory for stored uploads
            max_upload_bytes: Maximum accepted upload size
            preview_length: Characters of chunk text shown in embedding previews
        """
        self.database = database
        self.embedding_store = embedding_store
        self.pipeline = pipeline
        self.documents_dir = Path(documents_dir)
        self.max_upload_bytes = max_upload_bytes
        self.preview_length = preview_length

    async def upload(
        self,
        original_name: str,
        content: bytes,
        mime_type: str | None = None,
    ) -> tuple[DocumentModel, PipelineResult]:
        """
        Store an uploaded file and ingest it.

        The stored file is removed again if ingestion fails.

        Args:
            original_name: Client-side file name
            content: File bytes
            mime_type: Reported content type

        Returns:
            tuple: Persisted document row and pipeline result

        Raises:
            ValidationError: Missing name, empty or oversized content
            ParsingError: Unsupported or unreadable document
            UpstreamProviderError: Embedding provider failed
            StorageError: Persisting failed
        """
        original_name = Path(original_name or "").name
        if not original_name:
            raise ValidationError("File name is required", field="file")
        if not content:
            raise ValidationError("Uploaded file is empty", field="file")
        if len(content) > self.max_upload_bytes:
            raise ValidationError(
                f"File exceeds maximum size of {self.max_upload_bytes} bytes",
                field="file",
                details={"size": len(content)},
            )

        stored_name = self._stored_file_name(original_name)
        self.documents_dir.mkdir(parents=True, exist_ok=True)
        file_path = self.documents_dir / stored_name
        file_path.write_bytes(content)

        try:
            return await self.ingest(
                file_path,
                original_name=original_name,
                stored_name=stored_name,
                size=len(content),
                mime_type=mime_type,
            )
        except Exception as e:
            log_exception_with_context(
                logger,
                "Document ingestion failed, removing stored upload",
                e,
                original_name=original_name,
            )
            file_path.unlink(missing_ok=True)
            raise

    async def ingest(
        self,
        file_path: Path | str,
        original_name: str,
        stored_name: str,
        size: int,
        mime_type: str | None = None,
    ) -> tuple[DocumentModel, PipelineResult]:
        """
        Process a stored file and record it.

        The document row is inserted and updated with its processing results
        in one transaction after the pipeline succeeds, so no row ever points
        at a missing embedding set.
        """
        result = await self.pipeline.process(file_path, original_name, size)

        async with self.database.session_scope("insert_document") as session:
            document = await document_crud.create(
                session,
                original_name=original_name,
                stored_file_name=stored_name,
                file_path=str(file_path),
                file_size=size,
                mime_type=mime_type,
            )
            document = await document_crud.update_after_processing(
                session,
                document.id,
                embedding_doc_id=result.embedding_doc_id,
                total_embeddings=result.chunk_count,
            )

        logger.info(
            f"Document {document.id} ingested ({result.chunk_count} chunks, "
            f"reused={result.reused})"
        )
        return document, result

    async def list_documents(self) -> Sequence[DocumentModel]:
        async with self.database.session_scope("list_documents") as session:
            return await document_crud.get_active(session)

    async def get_document(self, document_id: UUID) -> DocumentModel:
        """
        Raises:
            NotFoundError: Document does not exist
        """
        async with self.database.session_scope("get_document") as session:
            document = await document_crud.get_by_id(session, document_id)
        if document is None:
            raise NotFoundError("document", str(document_id))
        return document

    async def delete_document(self, document_id: UUID) -> None:
        """Soft-delete a document. Raises NotFoundError if not active."""
        async with self.database.session_scope("soft_delete_document") as session:
            deleted = await document_crud.soft_delete(session, document_id)
        if not deleted:
            raise NotFoundError("document", str(document_id))

    async def restore_document(self, document_id: UUID) -> DocumentModel:
        """Undo a soft delete. Raises NotFoundError if not soft-deleted."""
        async with self.database.session_scope("restore_document") as session:
            restored = await document_crud.restore(session, document_id)
            if not restored:
                raise NotFoundError("document", str(document_id))
            return await document_crud.get_by_id(session, document_id)

    async def purge_document(self, document_id: UUID) -> None:
        """
        Permanently remove a document row.

        The stored file is removed too; the embedding set is kept since other
        uploads of the same file share it.
        """
        async with self.database.session_scope("hard_delete_document") as session:
            document = await document_crud.get_by_id(session, document_id)
            if document is None:
                raise NotFoundError("document", str(document_id))
            file_path = Path(document.file_path)
            await document_crud.hard_delete(session, document_id)
        file_path.unlink(missing_ok=True)

    async def clear_documents(self) -> int:
        """Permanently remove every document row. Returns the count removed."""
        async with self.database.session_scope("delete_all_documents") as session:
            deleted = await document_crud.delete_all(session)
        logger.info(f"Deleted {deleted} documents")
        return deleted

    def get_embedding_set(self, embedding_doc_id: str) -> EmbeddingSet:
        embedding_set = self.embedding_store.load(embedding_doc_id)
        if embedding_set is None:
            raise NotFoundError("embedding_set", embedding_doc_id)
        return embedding_set

    def list_embedding_sets(self) -> list[EmbeddingSet]:
        """All readable embedding sets, newest first."""
        sets = [
            embedding_set
            for embedding_set in (
                self.embedding_store.load(embedding_doc_id)
                for embedding_doc_id in self.embedding_store.list_ids()
            )
            if embedding_set is not None
        ]
        sets.sort(key=lambda s: s.created_at, reverse=True)
        return sets

    def delete_embedding_set(self, embedding_doc_id: str) -> None:
        if not self.embedding_store.delete(embedding_doc_id):
            raise NotFoundError("embedding_set", embedding_doc_id)

    def _stored_file_name(self, original_name: str) -> str:
        path = Path(original_name)
        stem = _UNSAFE_FILENAME_CHARS.sub("_", path.stem).strip("._") or "document"
        suffix = _UNSAFE_FILENAME_CHARS.sub("", path.suffix.lower())
        unique = f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}"
        return f"{stem}-{unique}{suffix}"
