"""
Embedding domain models.

Chunk, EmbeddingSet and PromptCacheEntry as persisted by the embedding
cache, plus ScoredChunk as produced by similarity search.

Dependencies: pydantic
System role: Data structures for cached embeddings and ranking results
"""

from datetime import datetime

from pydantic import BaseModel, Field


class Chunk(BaseModel):
    """Document chunk with its embedding vector."""

    chunk_index: int = Field(ge=0, description="Zero-based position in the source text")
    text: str = Field(description="Chunk text content")
    embedding: list[float] = Field(default_factory=list, description="Embedding vector")


class EmbeddingSet(BaseModel):
    """All chunks and vectors derived from one processed document."""

    embedding_doc_id: str = Field(description="Content fingerprint of the source document")
    created_at: datetime
    chunks: list[Chunk] = Field(default_factory=list)

    @property
    def total_embeddings(self) -> int:
        return len(self.chunks)


class PromptCacheEntry(BaseModel):
    """Cached embedding for one normalized prompt."""

    prompt_key: str
    prompt: str
    embedding: list[float]
    timestamp: datetime

    @property
    def embedding_length(self) -> int:
        return len(self.embedding)


class ScoredChunk(BaseModel):
    """Chunk paired with its similarity score against a query vector."""

    chunk: Chunk
    score: float
