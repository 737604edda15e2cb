"""
Pipeline result model.

Dependencies: pydantic
System role: Data contract between the pipeline and DocumentService
"""

from pydantic import BaseModel, Field


class PipelineResult(BaseModel):
    """Result of document processing pipeline execution."""

    embedding_doc_id: str = Field(description="Embedding set id for the document")
    chunk_count: int = Field(description="Number of chunks in the embedding set")
    reused: bool = Field(description="True when an existing embedding set was reused")
    processing_time_ms: float = Field(description="Total processing time in milliseconds")
