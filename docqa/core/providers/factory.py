"""
Provider factory.

Selects provider implementations from ProviderSettings.backend so switching
between offline and live providers is a configuration change.

Dependencies: docqa.configs, docqa.core.providers
System role: Provider construction
"""

import logging
from dataclasses import dataclass

from docqa.configs.providers import ProviderSettings
from docqa.core.exceptions import ValidationError
from docqa.core.providers.base import EmbeddingProvider, GenerationProvider
from docqa.core.providers.fixed import (
    FixedAnswerGenerationProvider,
    FixedVectorEmbeddingProvider,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Providers:
    """Embedding/generation pair plus the timeout applied to each call."""

    embedding: EmbeddingProvider
    generation: GenerationProvider
    timeout_seconds: float = 30.0


def get_providers(settings: ProviderSettings) -> Providers:
    """
    Build providers for the configured backend.

    Args:
        settings: Provider settings

    Returns:
        Providers: Configured provider pair

    Raises:
        ValidationError: Unknown backend or missing Gemini API key
    """
    backend = settings.backend.lower()

    if backend == "fixed":
        logger.info("Using fixed offline providers")
        return Providers(
            embedding=FixedVectorEmbeddingProvider(settings.fixed_dimension),
            generation=FixedAnswerGenerationProvider(settings.fixed_answer),
            timeout_seconds=settings.timeout_seconds,
        )

    if backend == "gemini":
        if settings.google_api_key is None:
            raise ValidationError(
                "DOCQA_PROVIDER_GOOGLE_API_KEY is required for the gemini backend",
                field="google_api_key",
            )
        # Imported lazily so the offline backend does not load the Google client
        from docqa.core.providers.gemini import (
            GeminiEmbeddingProvider,
            GeminiGenerationProvider,
        )

        api_key = settings.google_api_key.get_secret_value()
        logger.info("Using Gemini providers")
        return Providers(
            embedding=GeminiEmbeddingProvider(settings.embedding_model, api_key),
            generation=GeminiGenerationProvider(
                settings.generation_model, api_key, settings.temperature
            ),
            timeout_seconds=settings.timeout_seconds,
        )

    raise ValidationError(f"Unknown provider backend: {settings.backend}", field="backend")
