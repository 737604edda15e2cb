"""
Document pipeline orchestrator.

Coordinates fingerprinting, parsing, chunking, embedding and saving of one
document. An existing embedding set for the same fingerprint is reused
without touching the provider.

Dependencies: All task modules, docqa.boundary.cache
System role: Pipeline orchestration (coordinates only)
"""

import asyncio
import logging
import time
from pathlib import Path

from docqa.boundary.cache.embedding_store import EmbeddingStore
from docqa.core.chunker import DEFAULT_CHUNK_SIZE
from docqa.core.exceptions import DocumentProcessingError
from docqa.core.providers.base import EmbeddingProvider

from .models import PipelineResult
from .tasks import ChunkingTask, EmbeddingTask, ParsingTask

logger = logging.getLogger(__name__)


class DocumentPipeline:
    """Orchestrate document ingestion: parse -> chunk -> embed -> save."""

    def __init__(
        self,
        embedding_store: EmbeddingStore,
        embedding_provider: EmbeddingProvider,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        timeout_seconds: float = 30.0,
    ) -> None:
        """
        Initialize pipeline with its collaborators.

        Args:
            embedding_store: Destination for embedding sets
            embedding_provider: Provider used for chunk embeddings
            chunk_size: Maximum chunk length in characters
            timeout_seconds: Timeout per provider call
        """
        self._store = embedding_store
        self._parsing_task = ParsingTask()
        self._chunking_task = ChunkingTask(chunk_size)
        self._embedding_task = EmbeddingTask(embedding_provider, timeout_seconds)

    async def process(self, file_path: str | Path, name: str, size: int) -> PipelineResult:
        """
        Process a document through the full pipeline.

        Args:
            file_path: Local path of the stored file
            name: Original file name, used for the fingerprint
            size: File size in bytes, used for the fingerprint

        Returns:
            PipelineResult: Embedding set id and chunk count

        Raises:
            ParsingError: Document parsing failed
            DocumentProcessingError: Document produced no chunks
            UpstreamProviderError: Embedding provider failed
            StorageError: Embedding set could not be read or written
        """
        start_time = time.perf_counter()
        embedding_doc_id = self._store.compute_fingerprint(name, size)

        existing = self._store.load(embedding_doc_id)
        if existing is not None:
            logger.info(f"Reusing embedding set {embedding_doc_id}")
            return PipelineResult(
                embedding_doc_id=embedding_doc_id,
                chunk_count=existing.total_embeddings,
                reused=True,
                processing_time_ms=(time.perf_counter() - start_time) * 1000,
            )

        # PDF extraction is blocking
        text = await asyncio.to_thread(self._parsing_task.parse, file_path)
        chunks = self._chunking_task.chunk(text)
        if not chunks:
            raise DocumentProcessingError("Document produced no chunks", str(file_path))

        vectors = await self._embedding_task.embed(chunks)
        embedding_set = self._store.save(embedding_doc_id, chunks, vectors)

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"Processed {name}: {embedding_set.total_embeddings} chunks "
            f"in {elapsed_ms:.0f}ms -> {embedding_doc_id}"
        )
        return PipelineResult(
            embedding_doc_id=embedding_doc_id,
            chunk_count=embedding_set.total_embeddings,
            reused=False,
            processing_time_ms=elapsed_ms,
        )
