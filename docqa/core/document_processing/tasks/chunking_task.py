"""
Chunking task.

Dependencies: docqa.core.chunker
System role: Second stage of document ingestion pipeline
"""

from docqa.core.chunker import DEFAULT_CHUNK_SIZE, chunk_text


class ChunkingTask:
    """Split extracted text into word-safe chunks."""

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        self._chunk_size = chunk_size

    def chunk(self, text: str) -> list[str]:
        return chunk_text(text, self._chunk_size)
