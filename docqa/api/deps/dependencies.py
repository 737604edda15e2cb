"""
Dependency injection container.

ServiceCache builds the process-wide components (database, caches,
providers, pipeline) lazily from settings. Services are cheap wrappers
created per request around those components.

Dependencies: docqa.configs, docqa.application, docqa.boundary, docqa.core
System role: DI container for service injection
"""

from docqa.application.services import DocumentService, QueryService, RetrievalService
from docqa.boundary.cache import EmbeddingStore, PromptCache
from docqa.boundary.db.connection import Database
from docqa.configs import Settings, get_settings
from docqa.core.document_processing import DocumentPipeline
from docqa.core.providers import Providers, get_providers


class ServiceCache:
    """Container for cached component instances."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings
        self._database: Database | None = None
        self._embedding_store: EmbeddingStore | None = None
        self._prompt_cache: PromptCache | None = None
        self._providers: Providers | None = None
        self._document_pipeline: DocumentPipeline | None = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def database(self) -> Database:
        """Get cached database component."""
        if self._database is None:
            self._database = Database.from_settings(self.settings.database)
        return self._database

    @property
    def embedding_store(self) -> EmbeddingStore:
        if self._embedding_store is None:
            self._embedding_store = EmbeddingStore(self.settings.storage.embeddings_dir)
        return self._embedding_store

    @property
    def prompt_cache(self) -> PromptCache:
        if self._prompt_cache is None:
            self._prompt_cache = PromptCache(self.settings.storage.cache_dir)
        return self._prompt_cache

    @property
    def providers(self) -> Providers:
        """Get cached embedding/generation providers."""
        if self._providers is None:
            self._providers = get_providers(self.settings.providers)
        return self._providers

    @property
    def document_pipeline(self) -> DocumentPipeline:
        """Get cached document pipeline."""
        if self._document_pipeline is None:
            self._document_pipeline = DocumentPipeline(
                embedding_store=self.embedding_store,
                embedding_provider=self.providers.embedding,
                chunk_size=self.settings.retrieval.chunk_size,
                timeout_seconds=self.providers.timeout_seconds,
            )
        return self._document_pipeline

    async def shutdown(self) -> None:
        """Dispose the database engine and drop all cached instances."""
        if self._database is not None:
            await self._database.dispose()
        self.clear()

    def clear(self) -> None:
        """Clear all cached instances."""
        self._database = None
        self._embedding_store = None
        self._prompt_cache = None
        self._providers = None
        self._document_pipeline = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_database() -> Database:
    return get_service_cache().database


def get_retrieval_service() -> RetrievalService:
    """
    Get retrieval service instance.

    Returns:
        RetrievalService: Service bound to the shared components
    """
    cache = get_service_cache()
    return RetrievalService(
        database=cache.database,
        embedding_store=cache.embedding_store,
        prompt_cache=cache.prompt_cache,
        providers=cache.providers,
        k=cache.settings.retrieval.top_k,
    )


def get_document_service() -> DocumentService:
    """
    Get document service instance.

    Returns:
        DocumentService: Service with the shared ingestion pipeline
    """
    cache = get_service_cache()
    return DocumentService(
        database=cache.database,
        embedding_store=cache.embedding_store,
        pipeline=cache.document_pipeline,
        documents_dir=cache.settings.storage.documents_dir,
        max_upload_bytes=cache.settings.storage.max_upload_bytes,
        preview_length=cache.settings.retrieval.preview_length,
    )


def get_query_service() -> QueryService:
    cache = get_service_cache()
    return QueryService(
        database=cache.database,
        prompt_cache=cache.prompt_cache,
        history_limit=cache.settings.retrieval.history_limit,
    )
