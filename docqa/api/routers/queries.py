"""
Query history API endpoints.

Routes: GET /queries, GET /queries/stats, DELETE /queries/clear,
GET /queries/{id}, POST /queries/{id}/feedback, DELETE /queries/{id},
POST /queries/{id}/restore

Dependencies: docqa.application.services.query_service, docqa.models
System role: Query history HTTP API
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from docqa.api.deps import get_query_service
from docqa.api.routers.error_handling import handle_service_errors
from docqa.application.services.query_service import QueryService
from docqa.models.common import DeleteCountResponse
from docqa.models.query import (
    ClearMode,
    FeedbackRequest,
    QueryListResponse,
    QueryResponse,
    QueryStatsResponse,
)

router = APIRouter(prefix="/queries", tags=["queries"])


@router.get("", response_model=QueryListResponse)
@handle_service_errors
async def list_queries(
    service: QueryService = Depends(get_query_service),
) -> QueryListResponse:
    """Most recent questions, newest first."""
    queries = await service.list_recent()
    return QueryListResponse(
        queries=[QueryResponse.model_validate(q) for q in queries],
        count=len(queries),
    )


@router.get("/stats", response_model=QueryStatsResponse)
@handle_service_errors
async def query_stats(
    service: QueryService = Depends(get_query_service),
) -> QueryStatsResponse:
    return QueryStatsResponse(**await service.get_stats())


@router.delete("/clear", response_model=DeleteCountResponse)
@handle_service_errors
async def clear_queries(
    mode: ClearMode = Query(default=ClearMode.SOFT, alias="type"),
    service: QueryService = Depends(get_query_service),
) -> DeleteCountResponse:
    """Clear history: soft (flag), hard (delete) or truncate."""
    deleted = await service.clear_queries(mode)
    return DeleteCountResponse(
        message=f"Cleared {deleted} queries ({mode.value})",
        deleted_count=deleted,
    )


@router.get("/{query_id}", response_model=QueryResponse)
@handle_service_errors
async def get_query(
    query_id: UUID,
    service: QueryService = Depends(get_query_service),
) -> QueryResponse:
    return QueryResponse.model_validate(await service.get_query(query_id))


@router.post("/{query_id}/feedback", response_model=QueryResponse)
@handle_service_errors
async def update_feedback(
    query_id: UUID,
    request: FeedbackRequest,
    service: QueryService = Depends(get_query_service),
) -> QueryResponse:
    """Set liked and/or disliked; omitted flags keep their value."""
    query = await service.update_feedback(
        query_id, liked=request.liked, disliked=request.disliked
    )
    return QueryResponse.model_validate(query)


@router.delete("/{query_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_service_errors
async def delete_query(
    query_id: UUID,
    hard: bool = Query(default=False),
    service: QueryService = Depends(get_query_service),
) -> None:
    """Soft-delete a query, or purge it with ?hard=true."""
    if hard:
        await service.purge_query(query_id)
    else:
        await service.delete_query(query_id)


@router.post("/{query_id}/restore", response_model=QueryResponse)
@handle_service_errors
async def restore_query(
    query_id: UUID,
    service: QueryService = Depends(get_query_service),
) -> QueryResponse:
    return QueryResponse.model_validate(await service.restore_query(query_id))
