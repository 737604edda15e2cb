"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory database, temp-dir caches, deterministic providers,
seeded documents
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

from pathlib import Path

import pytest
import pytest_asyncio

from docqa.boundary.cache.embedding_store import EmbeddingStore
from docqa.boundary.cache.prompt_cache import PromptCache
from docqa.boundary.db.connection import Database
from docqa.boundary.db.CRUD.document_crud import document_crud
from docqa.boundary.db.models.document_model import DocumentModel
from docqa.core.providers.factory import Providers
from docqa.core.providers.fixed import (
    FixedAnswerGenerationProvider,
    FixedVectorEmbeddingProvider,
)


@pytest_asyncio.fixture
async def database():
    """
    In-memory SQLite database with all tables created.

    Yields:
        Database: Component disposed after the test
    """
    db = Database("sqlite+aiosqlite:///:memory:")
    await db.create_tables()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def session(database: Database):
    """
    Session for direct CRUD tests; committed by the test when needed.

    Yields:
        AsyncSession: Session bound to the in-memory database
    """
    async with database.session_factory() as s:
        yield s
        await s.rollback()


@pytest.fixture
def embedding_store(tmp_path: Path) -> EmbeddingStore:
    return EmbeddingStore(tmp_path / "embeddings")


@pytest.fixture
def prompt_cache(tmp_path: Path) -> PromptCache:
    return PromptCache(tmp_path / "cache")


@pytest.fixture
def embedding_provider() -> FixedVectorEmbeddingProvider:
    return FixedVectorEmbeddingProvider(dimension=8)


@pytest.fixture
def generation_provider() -> FixedAnswerGenerationProvider:
    return FixedAnswerGenerationProvider("The refund window is 30 days.")


@pytest.fixture
def providers(
    embedding_provider: FixedVectorEmbeddingProvider,
    generation_provider: FixedAnswerGenerationProvider,
) -> Providers:
    return Providers(
        embedding=embedding_provider,
        generation=generation_provider,
        timeout_seconds=5.0,
    )


@pytest.fixture
def policy_chunks() -> list[str]:
    """Chunk texts of a small refund policy document."""
    return [
        "Refunds are accepted within 30 days of purchase",
        "Shipping takes five to seven business days",
        "Gift cards cannot be exchanged for cash",
    ]


@pytest_asyncio.fixture
async def processed_document(
    database: Database,
    embedding_store: EmbeddingStore,
    embedding_provider: FixedVectorEmbeddingProvider,
    policy_chunks: list[str],
) -> DocumentModel:
    """
    Document row with a saved embedding set.

    Vectors come from embedding_provider.vector_for so no provider call is
    counted.
    """
    embedding_doc_id = embedding_store.compute_fingerprint("policy.txt", 512)
    embedding_store.save(
        embedding_doc_id,
        policy_chunks,
        [embedding_provider.vector_for(text) for text in policy_chunks],
    )
    async with database.session_scope() as s:
        document = await document_crud.create(
            s,
            original_name="policy.txt",
            stored_file_name="policy-1.txt",
            file_path="/tmp/policy-1.txt",
            file_size=512,
            mime_type="text/plain",
        )
        document = await document_crud.update_after_processing(
            s, document.id, embedding_doc_id, len(policy_chunks)
        )
    return document


@pytest_asyncio.fixture
async def unprocessed_document(database: Database) -> DocumentModel:
    """Document row that was never attached to an embedding set."""
    async with database.session_scope() as s:
        return await document_crud.create(
            s,
            original_name="draft.pdf",
            stored_file_name="draft-1.pdf",
            file_path="/tmp/draft-1.pdf",
            file_size=2048,
            mime_type="application/pdf",
        )
