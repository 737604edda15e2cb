"""
Provider contracts and timeout handling.

Every external provider call goes through call_with_timeout so a slow
upstream surfaces as ProviderTimeoutError instead of blocking the request.

Dependencies: asyncio, docqa.core.exceptions
System role: Boundary between the pipeline and external model APIs
"""

import asyncio
import enum
import logging
from collections.abc import Awaitable
from typing import Protocol, TypeVar, runtime_checkable

from docqa.core.exceptions import (
    DocQAException,
    ProviderTimeoutError,
    UpstreamProviderError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ProviderStage(str, enum.Enum):
    """Pipeline stages that call providers."""

    CHUNK_EMBEDDING = "chunk_embedding"
    PROMPT_EMBEDDING = "prompt_embedding"
    GENERATION = "generation"


@runtime_checkable
class EmbeddingProvider(Protocol):
    """Turns text into a fixed-length vector."""

    async def embed(self, text: str) -> list[float]:
        ...


@runtime_checkable
class GenerationProvider(Protocol):
    """Produces an answer for an assembled prompt."""

    async def generate(self, prompt: str) -> str:
        ...


async def call_with_timeout(
    call: Awaitable[T],
    stage: ProviderStage,
    timeout_seconds: float,
) -> T:
    """
    Await a provider call under a timeout, normalizing failures.

    Cancellation of the calling task propagates unchanged.

    Args:
        call: Provider coroutine
        stage: Stage used to label errors
        timeout_seconds: Maximum time to wait

    Returns:
        The provider result

    Raises:
        ProviderTimeoutError: Call exceeded timeout_seconds
        UpstreamProviderError: Provider raised any other exception
    """
    try:
        return await asyncio.wait_for(call, timeout=timeout_seconds)
    except asyncio.TimeoutError as e:
        logger.warning(f"{stage.value} provider call timed out after {timeout_seconds}s")
        raise ProviderTimeoutError(stage.value, timeout_seconds) from e
    except DocQAException:
        raise
    except Exception as e:
        logger.error(f"{stage.value} provider call failed: {type(e).__name__}: {e}")
        raise UpstreamProviderError(
            f"{stage.value} provider call failed: {e}",
            stage=stage.value,
            details={"error_type": type(e).__name__},
        ) from e
