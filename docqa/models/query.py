"""
Query request and response schemas.

Dependencies: pydantic
System role: Data contracts for question answering and query history
"""

import enum
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from docqa.models.embedding import ScoredChunk


class AskRequest(BaseModel):
    """Question about one uploaded document."""

    model_config = ConfigDict(populate_by_name=True)

    prompt: str = Field(min_length=1, description="Question text")
    doc_id: UUID = Field(alias="docId", description="Document to answer from")


class AnswerResult(BaseModel):
    """Outcome of RetrievalService.answer."""

    answer: str
    query_id: UUID
    cached: bool
    final_prompt: str | None = Field(
        default=None,
        description="Prompt sent to the generator; None for cached answers",
    )
    sources: list[ScoredChunk] = Field(default_factory=list)


class QueryResponse(BaseModel):
    """Stored question/answer row."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    prompt: str
    answer: str
    created_at: datetime
    liked: bool
    disliked: bool
    is_deleted: bool


class QueryListResponse(BaseModel):
    queries: list[QueryResponse]
    count: int


class FeedbackRequest(BaseModel):
    """Partial feedback update; omitted flags are left unchanged."""

    liked: bool | None = None
    disliked: bool | None = None


class QueryStatsResponse(BaseModel):
    total_queries: int
    total_likes: int
    total_dislikes: int
    liked_queries: int
    disliked_queries: int


class ClearMode(str, enum.Enum):
    """How /queries/clear removes history."""

    SOFT = "soft"
    HARD = "hard"
    TRUNCATE = "truncate"


class PromptCacheEntryResponse(BaseModel):
    prompt_key: str
    prompt: str
    timestamp: datetime
    embedding_length: int


class PromptCacheListResponse(BaseModel):
    entries: list[PromptCacheEntryResponse]
    count: int


class SourceResponse(BaseModel):
    """Ranked chunk used as context for an answer."""

    chunk_index: int
    score: float
    text: str


class AnswerResponse(BaseModel):
    answer: str
    query_id: UUID
    cached: bool
    final_prompt: str | None = None
    sources: list[SourceResponse] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: AnswerResult) -> "AnswerResponse":
        return cls(
            answer=result.answer,
            query_id=result.query_id,
            cached=result.cached,
            final_prompt=result.final_prompt,
            sources=[
                SourceResponse(
                    chunk_index=item.chunk.chunk_index,
                    score=item.score,
                    text=item.chunk.text,
                )
                for item in result.sources
            ],
        )
