"""
Document and embedding set response schemas.

Dependencies: pydantic
System role: Data contracts for document endpoints
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class DocumentResponse(BaseModel):
    """Uploaded document metadata."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    original_name: str
    stored_file_name: str
    file_size: int | None
    mime_type: str | None
    uploaded_at: datetime
    processed_at: datetime | None
    embedding_doc_id: str | None
    total_embeddings: int
    is_deleted: bool


class DocumentUploadResponse(BaseModel):
    document: DocumentResponse
    reused_embeddings: bool = Field(description="True when an existing embedding set was reused")


class DocumentListResponse(BaseModel):
    documents: list[DocumentResponse]
    count: int


class EmbeddingChunkPreview(BaseModel):
    chunk_index: int
    preview: str
    embedding_length: int


class EmbeddingSetSummary(BaseModel):
    embedding_doc_id: str
    created_at: datetime
    total_embeddings: int


class EmbeddingSetDetail(EmbeddingSetSummary):
    chunks: list[EmbeddingChunkPreview]


class EmbeddingSetListResponse(BaseModel):
    embedding_sets: list[EmbeddingSetSummary]
    count: int
