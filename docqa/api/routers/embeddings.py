"""
Embedding set API endpoints.

Routes: GET /embeddings, GET /embeddings/{id}, DELETE /embeddings/{id}

Dependencies: docqa.application.services.document_service, docqa.models
System role: Embedding cache inspection HTTP API
"""

from fastapi import APIRouter, Depends, status

from docqa.api.deps import get_document_service
from docqa.api.routers.error_handling import handle_service_errors
from docqa.application.services.document_service import DocumentService
from docqa.models.document import (
    EmbeddingChunkPreview,
    EmbeddingSetDetail,
    EmbeddingSetListResponse,
    EmbeddingSetSummary,
)

router = APIRouter(prefix="/embeddings", tags=["embeddings"])


@router.get("", response_model=EmbeddingSetListResponse)
@handle_service_errors
async def list_embedding_sets(
    service: DocumentService = Depends(get_document_service),
) -> EmbeddingSetListResponse:
    sets = service.list_embedding_sets()
    return EmbeddingSetListResponse(
        embedding_sets=[
            EmbeddingSetSummary(
                embedding_doc_id=s.embedding_doc_id,
                created_at=s.created_at,
                total_embeddings=s.total_embeddings,
            )
            for s in sets
        ],
        count=len(sets),
    )


@router.get("/{embedding_doc_id}", response_model=EmbeddingSetDetail)
@handle_service_errors
async def get_embedding_set(
    embedding_doc_id: str,
    service: DocumentService = Depends(get_document_service),
) -> EmbeddingSetDetail:
    """Embedding set with a text preview of each chunk."""
    embedding_set = service.get_embedding_set(embedding_doc_id)
    return EmbeddingSetDetail(
        embedding_doc_id=embedding_set.embedding_doc_id,
        created_at=embedding_set.created_at,
        total_embeddings=embedding_set.total_embeddings,
        chunks=[
            EmbeddingChunkPreview(
                chunk_index=chunk.chunk_index,
                preview=chunk.text[: service.preview_length],
                embedding_length=len(chunk.embedding),
            )
            for chunk in embedding_set.chunks
        ],
    )


@router.delete("/{embedding_doc_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_service_errors
async def delete_embedding_set(
    embedding_doc_id: str,
    service: DocumentService = Depends(get_document_service),
) -> None:
    service.delete_embedding_set(embedding_doc_id)
