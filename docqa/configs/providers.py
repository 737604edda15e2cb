"""
Embedding and generation provider settings.

Selects between the deterministic offline providers and Google Gemini.

Dependencies: pydantic, pydantic_settings
System role: Provider selection and credentials
"""

from pydantic import Field, SecretStr
from pydantic_settings import SettingsConfigDict

from docqa.configs.base import BaseSettings


class ProviderSettings(BaseSettings):
    """Embedding/generation provider configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DOCQA_PROVIDER_",
        case_sensitive=False,
        extra="ignore",
    )

    backend: str = Field(
        default="fixed",
        description="Provider backend: 'fixed' for offline deterministic output, 'gemini' for live calls",
    )
    google_api_key: SecretStr | None = Field(
        default=None,
        description="Google API key for Gemini (required when backend is 'gemini')",
    )
    embedding_model: str = Field(
        default="models/gemini-embedding-001",
        description="Gemini embedding model ID",
    )
    generation_model: str = Field(
        default="gemini-3-flash-preview",
        description="Gemini chat model ID",
    )
    temperature: float = Field(default=0.0, description="Generation temperature")
    timeout_seconds: float = Field(
        default=30.0,
        description="Per-call timeout for provider requests",
    )
    fixed_dimension: int = Field(
        default=8,
        description="Vector dimension produced by the fixed embedding provider",
    )
    fixed_answer: str = Field(
        default="This is a mock LLM response for testing purposes.",
        description="Answer returned by the fixed generation provider",
    )
