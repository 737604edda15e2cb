"""
Prompt cache API endpoints.

Routes: GET /cache/prompts, DELETE /cache/prompts

Dependencies: docqa.application.services.query_service, docqa.models
System role: Prompt embedding cache HTTP API
"""

from fastapi import APIRouter, Depends

from docqa.api.deps import get_query_service
from docqa.api.routers.error_handling import handle_service_errors
from docqa.application.services.query_service import QueryService
from docqa.models.common import DeleteCountResponse
from docqa.models.query import PromptCacheEntryResponse, PromptCacheListResponse

router = APIRouter(prefix="/cache", tags=["cache"])


@router.get("/prompts", response_model=PromptCacheListResponse)
@handle_service_errors
async def list_cached_prompts(
    service: QueryService = Depends(get_query_service),
) -> PromptCacheListResponse:
    entries = service.list_cached_prompts()
    return PromptCacheListResponse(
        entries=[
            PromptCacheEntryResponse(
                prompt_key=entry.prompt_key,
                prompt=entry.prompt,
                timestamp=entry.timestamp,
                embedding_length=entry.embedding_length,
            )
            for entry in entries
        ],
        count=len(entries),
    )


@router.delete("/prompts", response_model=DeleteCountResponse)
@handle_service_errors
async def clear_prompt_cache(
    service: QueryService = Depends(get_query_service),
) -> DeleteCountResponse:
    removed = service.clear_prompt_cache()
    return DeleteCountResponse(message=f"Cleared {removed} cached prompts", deleted_count=removed)
