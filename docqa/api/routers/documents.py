"""
Document API endpoints.

Routes: POST /documents/upload, GET /documents, DELETE /documents/clear,
GET /documents/{id}, DELETE /documents/{id}, POST /documents/{id}/restore

Dependencies: docqa.application.services.document_service, docqa.models
System role: Document HTTP API
"""

import logging
from pathlib import Path
from uuid import UUID

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile, status

from docqa.api.deps import get_document_service
from docqa.api.routers.error_handling import handle_service_errors
from docqa.application.services.document_service import DocumentService
from docqa.core.document_processing.tasks.parsing_task import SUPPORTED_EXTENSIONS
from docqa.models.common import DeleteCountResponse
from docqa.models.document import (
    DocumentListResponse,
    DocumentResponse,
    DocumentUploadResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/documents", tags=["documents"])


@router.post(
    "/upload",
    response_model=DocumentUploadResponse,
    status_code=status.HTTP_201_CREATED,
)
@handle_service_errors
async def upload_document(
    document: UploadFile = File(...),
    service: DocumentService = Depends(get_document_service),
) -> DocumentUploadResponse:
    """
    Upload and process a PDF or text document.

    The multipart field is named "document".
    """
    filename = document.filename or ""
    if Path(filename).suffix.lower() not in SUPPORTED_EXTENSIONS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unsupported file type. Allowed: {', '.join(sorted(SUPPORTED_EXTENSIONS))}",
        )

    # One byte over the limit is enough to reject
    content = await document.read(service.max_upload_bytes + 1)
    logger.info(
        "Processing uploaded document",
        extra={"document_name": filename, "size": len(content)},
    )
    row, result = await service.upload(filename, content, document.content_type)
    return DocumentUploadResponse(
        document=DocumentResponse.model_validate(row),
        reused_embeddings=result.reused,
    )


@router.get("", response_model=DocumentListResponse)
@handle_service_errors
async def list_documents(
    service: DocumentService = Depends(get_document_service),
) -> DocumentListResponse:
    documents = await service.list_documents()
    return DocumentListResponse(
        documents=[DocumentResponse.model_validate(d) for d in documents],
        count=len(documents),
    )


@router.delete("/clear", response_model=DeleteCountResponse)
@handle_service_errors
async def clear_documents(
    service: DocumentService = Depends(get_document_service),
) -> DeleteCountResponse:
    """Permanently delete every document row."""
    deleted = await service.clear_documents()
    return DeleteCountResponse(message=f"Deleted {deleted} documents", deleted_count=deleted)


@router.get("/{document_id}", response_model=DocumentResponse)
@handle_service_errors
async def get_document(
    document_id: UUID,
    service: DocumentService = Depends(get_document_service),
) -> DocumentResponse:
    return DocumentResponse.model_validate(await service.get_document(document_id))


@router.delete("/{document_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_service_errors
async def delete_document(
    document_id: UUID,
    hard: bool = Query(default=False),
    service: DocumentService = Depends(get_document_service),
) -> None:
    """Soft-delete a document, or purge it with ?hard=true."""
    if hard:
        await service.purge_document(document_id)
    else:
        await service.delete_document(document_id)


@router.post("/{document_id}/restore", response_model=DocumentResponse)
@handle_service_errors
async def restore_document(
    document_id: UUID,
    service: DocumentService = Depends(get_document_service),
) -> DocumentResponse:
    return DocumentResponse.model_validate(await service.restore_document(document_id))
