"""
Embedding and generation providers.

Exports the provider protocols, the timeout helper and the factory that
selects an implementation from configuration.
"""

from docqa.core.providers.base import (
    EmbeddingProvider,
    GenerationProvider,
    ProviderStage,
    call_with_timeout,
)
from docqa.core.providers.factory import Providers, get_providers
from docqa.core.providers.fixed import (
    FixedAnswerGenerationProvider,
    FixedVectorEmbeddingProvider,
)

__all__ = [
    "EmbeddingProvider",
    "GenerationProvider",
    "ProviderStage",
    "call_with_timeout",
    "Providers",
    "get_providers",
    "FixedVectorEmbeddingProvider",
    "FixedAnswerGenerationProvider",
]
