"""
Deterministic offline providers.

Used for local development and tests: vectors are derived from a hash of
the normalized text, answers are a configured constant. Both record how
often they were called.

Dependencies: hashlib, docqa.core.normalization
System role: Stand-in providers selected by configuration
"""

import hashlib

from docqa.core.normalization import normalize_prompt


class FixedVectorEmbeddingProvider:
    """Embedding provider returning a stable vector per normalized text."""

    def __init__(self, dimension: int = 8) -> None:
        """
        Args:
            dimension: Length of produced vectors
        """
        if dimension < 1:
            raise ValueError("dimension must be positive")
        self.dimension = dimension
        self.calls = 0

    async def embed(self, text: str) -> list[float]:
        self.calls += 1
        return self.vector_for(text)

    def vector_for(self, text: str) -> list[float]:
        """
        Compute the vector without counting a call.

        Components fall in [0.01, 1.0]; the vector is never all zero.
        """
        seed = normalize_prompt(text).encode("utf-8")
        values: list[float] = []
        counter = 0
        while len(values) < self.dimension:
            digest = hashlib.sha256(seed + counter.to_bytes(4, "big")).digest()
            values.extend(0.01 + (byte / 255) * 0.99 for byte in digest)
            counter += 1
        return [round(v, 6) for v in values[: self.dimension]]


class FixedAnswerGenerationProvider:
    """Generation provider returning the same answer for every prompt."""

    def __init__(self, answer: str = "This is a mock LLM response for testing purposes.") -> None:
        self.answer = answer
        self.calls = 0
        self.last_prompt: str | None = None

    async def generate(self, prompt: str) -> str:
        self.calls += 1
        self.last_prompt = prompt
        return self.answer
