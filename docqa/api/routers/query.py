"""
Question answering API endpoints.

Routes: POST /query, GET /query

Dependencies: docqa.application.services.retrieval_service, docqa.models
System role: Question answering HTTP API
"""

from fastapi import APIRouter, Depends, Query

from docqa.api.deps import get_retrieval_service
from docqa.api.routers.error_handling import handle_service_errors
from docqa.application.services.retrieval_service import RetrievalService
from docqa.models.query import AnswerResponse, AskRequest

router = APIRouter(tags=["query"])


@router.post("/query", response_model=AnswerResponse)
@handle_service_errors
async def ask(
    request: AskRequest,
    service: RetrievalService = Depends(get_retrieval_service),
) -> AnswerResponse:
    """Answer a question from one document."""
    result = await service.answer(request.prompt, request.doc_id)
    return AnswerResponse.from_result(result)


@router.get("/query", response_model=AnswerResponse)
@handle_service_errors
async def ask_via_query_string(
    prompt: str | None = Query(default=None),
    doc_id: str | None = Query(default=None, alias="docId"),
    service: RetrievalService = Depends(get_retrieval_service),
) -> AnswerResponse:
    """Query-string variant of POST /query."""
    result = await service.answer(prompt, doc_id)
    return AnswerResponse.from_result(result)
