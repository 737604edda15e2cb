"""
Retrieval configuration settings.

Chunking and ranking parameters for the question answering pipeline.

Dependencies: pydantic, pydantic_settings
System role: Tuning knobs for chunking, ranking and history listing
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from docqa.configs.base import BaseSettings


class RetrievalSettings(BaseSettings):
    """Chunking and ranking configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DOCQA_RETRIEVAL_",
        case_sensitive=False,
        extra="ignore",
    )

    chunk_size: int = Field(default=700, description="Maximum chunk size in characters")
    top_k: int = Field(default=3, description="Number of chunks used as answer context")
    history_limit: int = Field(
        default=10,
        description="Number of recent queries returned by history listing",
    )
    preview_length: int = Field(
        default=50,
        description="Characters of chunk text shown in previews",
    )
