"""
File storage configuration settings.

Locations for cached embedding sets, prompt embeddings and uploaded files.

Dependencies: pydantic, pydantic_settings
System role: Filesystem layout for the embedding cache and uploads
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from docqa.configs.base import BaseSettings


class StorageSettings(BaseSettings):
    """Filesystem storage configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DOCQA_STORAGE_",
        case_sensitive=False,
        extra="ignore",
    )

    root: Path = Field(default=Path("storage"), description="Root storage directory")
    max_upload_bytes: int = Field(
        default=10 * 1024 * 1024,
        description="Maximum accepted upload size in bytes",
    )

    @property
    def embeddings_dir(self) -> Path:
        """Directory holding one JSON file per embedding set."""
        return self.root / "embeddings"

    @property
    def cache_dir(self) -> Path:
        """Directory holding prompt embedding cache entries."""
        return self.root / "cache"

    @property
    def documents_dir(self) -> Path:
        """Directory holding uploaded source documents."""
        return self.root / "documents"
