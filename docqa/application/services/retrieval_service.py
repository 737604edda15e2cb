"""
Retrieval service for grounded question answering.

Orchestrates the question-to-answer flow: exact-match history lookup,
document resolution, prompt embedding (cached), similarity ranking, prompt
assembly, generation and persistence.

Dependencies: docqa.core, docqa.boundary.cache, docqa.boundary.db
System role: Question answering orchestration layer
"""

import asyncio
import logging
from uuid import UUID

from docqa.boundary.cache.embedding_store import EmbeddingStore
from docqa.boundary.cache.prompt_cache import PromptCache
from docqa.boundary.db.connection import Database
from docqa.boundary.db.CRUD.document_crud import document_crud
from docqa.boundary.db.CRUD.query_crud import query_crud
from docqa.core.exceptions import NotFoundError, ValidationError
from docqa.core.prompt_builder import build_prompt
from docqa.core.providers.base import ProviderStage, call_with_timeout
from docqa.core.providers.factory import Providers
from docqa.core.similarity import DEFAULT_TOP_K, top_k
from docqa.models.embedding import EmbeddingSet
from docqa.models.query import AnswerResult
from docqa.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class RetrievalService:
    """
    Answers questions from one document's cached embeddings.

    Holds no per-request state; safe to share across concurrent requests.
    """

    def __init__(
        self,
        database: Database,
        embedding_store: EmbeddingStore,
        prompt_cache: PromptCache,
        providers: Providers,
        k: int = DEFAULT_TOP_K,
    ) -> None:
        """
        Initialize retrieval service.

        Args:
            database: Database component for document and query stores
            embedding_store: Source of chunk embeddings
            prompt_cache: Cache of prompt embeddings
            providers: Embedding and generation providers
            k: Number of chunks passed to the generator
        """
        self.database = database
        self.embedding_store = embedding_store
        self.prompt_cache = prompt_cache
        self.providers = providers
        self.k = k

    async def answer(self, prompt: str | None, doc_id: UUID | str | None) -> AnswerResult:
        """
        Answer a question about a document.

        Flow:
        1. Return a stored answer for the same normalized prompt, if any
        2. Resolve the document and load its embedding set
        3. Embed the prompt (prompt cache first)
        4. Rank chunks and assemble the grounded prompt
        5. Generate the answer
        6. Persist prompt and answer

        Args:
            prompt: Question text
            doc_id: Document UUID

        Returns:
            AnswerResult: Answer, query id, cache flag, final prompt, sources

        Raises:
            ValidationError: Blank prompt, missing or malformed doc_id
            NotFoundError: Document missing, deleted, unprocessed, or its
                embedding set is gone
            UpstreamProviderError: Embedding or generation failed
            ScoringError: Similarity scoring failed
            StorageError: A store operation failed
        """
        if prompt is None or not prompt.strip():
            raise ValidationError("Prompt is required", field="prompt")

        async with self.database.session_scope("find_by_prompt") as session:
            existing = await query_crud.find_by_prompt(session, prompt)
        if existing is not None:
            log_with_context(
                logger,
                logging.INFO,
                "Returning stored answer",
                query_id=existing.id,
            )
            return AnswerResult(
                answer=existing.answer,
                query_id=existing.id,
                cached=True,
            )

        document_id = self._parse_doc_id(doc_id)
        embedding_set = await self._load_embedding_set(document_id)

        query_vector = await self._embed_prompt(prompt)
        ranked = top_k(query_vector, embedding_set.chunks, self.k)
        final_prompt = build_prompt(prompt, ranked)

        answer = await call_with_timeout(
            self.providers.generation.generate(final_prompt),
            ProviderStage.GENERATION,
            self.providers.timeout_seconds,
        )

        async with self.database.session_scope("insert_query") as session:
            query = await query_crud.create(session, prompt=prompt, answer=answer)

        log_with_context(
            logger,
            logging.INFO,
            "Answered question",
            query_id=query.id,
            document_id=document_id,
            sources=len(ranked),
        )
        return AnswerResult(
            answer=answer,
            query_id=query.id,
            cached=False,
            final_prompt=final_prompt,
            sources=ranked,
        )

    def _parse_doc_id(self, doc_id: UUID | str | None) -> UUID:
        if doc_id is None or (isinstance(doc_id, str) and not doc_id.strip()):
            raise ValidationError("Document id is required", field="doc_id")
        if isinstance(doc_id, UUID):
            return doc_id
        try:
            return UUID(doc_id.strip())
        except ValueError as e:
            raise ValidationError(f"Invalid document id: {doc_id}", field="doc_id") from e

    async def _load_embedding_set(self, document_id: UUID) -> EmbeddingSet:
        async with self.database.session_scope("get_document") as session:
            document = await document_crud.get_by_id(session, document_id)

        if document is None or document.is_deleted:
            raise NotFoundError("document", str(document_id))
        if not document.embedding_doc_id:
            raise NotFoundError(
                "embedding_set",
                str(document_id),
                message=f"Document has not been processed: {document_id}",
            )

        embedding_set = await asyncio.to_thread(
            self.embedding_store.load, document.embedding_doc_id
        )
        if embedding_set is None:
            raise NotFoundError("embedding_set", document.embedding_doc_id)
        return embedding_set

    async def _embed_prompt(self, prompt: str) -> list[float]:
        cached = await asyncio.to_thread(self.prompt_cache.get, prompt)
        if cached is not None:
            return cached

        vector = await call_with_timeout(
            self.providers.embedding.embed(prompt),
            ProviderStage.PROMPT_EMBEDDING,
            self.providers.timeout_seconds,
        )
        await asyncio.to_thread(self.prompt_cache.put, prompt, vector)
        return vector
