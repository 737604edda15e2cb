"""
Chunk embedding task.

Embeds chunks one provider call at a time, in chunk order, each call
under the provider timeout.

Dependencies: docqa.core.providers
System role: Third stage of document ingestion pipeline
"""

import logging

from docqa.core.providers.base import EmbeddingProvider, ProviderStage, call_with_timeout

logger = logging.getLogger(__name__)


class EmbeddingTask:
    """Generate one embedding vector per chunk."""

    def __init__(self, provider: EmbeddingProvider, timeout_seconds: float = 30.0) -> None:
        """
        Args:
            provider: Embedding provider
            timeout_seconds: Timeout applied to each provider call
        """
        self._provider = provider
        self._timeout = timeout_seconds

    async def embed(self, chunks: list[str]) -> list[list[float]]:
        """
        Embed chunks in order.

        Args:
            chunks: Chunk texts

        Returns:
            list[list[float]]: Vectors aligned with chunks

        Raises:
            UpstreamProviderError: Any provider call failed
            ProviderTimeoutError: Any provider call timed out
        """
        vectors: list[list[float]] = []
        for index, chunk in enumerate(chunks):
            vector = await call_with_timeout(
                self._provider.embed(chunk),
                ProviderStage.CHUNK_EMBEDDING,
                self._timeout,
            )
            vectors.append(vector)
            logger.debug(f"Embedded chunk {index + 1}/{len(chunks)}")
        return vectors
