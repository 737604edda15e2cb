"""
Sentence-aware text chunker.

Splits document text into bounded-size chunks on sentence boundaries,
falling back to word boundaries for long sentences. Never splits a word.

Dependencies: re, docqa.core.exceptions
System role: First transformation of extracted document text
"""

import re

from docqa.core.exceptions import ValidationError

DEFAULT_CHUNK_SIZE = 700

SENTENCE_SEPARATOR = ". "
_SENTENCE_BOUNDARY = re.compile(r"[.!?]+")


def split_sentences(text: str) -> list[str]:
    """
    Split text on runs of sentence terminators.

    Args:
        text: Raw text

    Returns:
        list[str]: Trimmed, non-empty sentence segments (terminators removed)
    """
    return [segment.strip() for segment in _SENTENCE_BOUNDARY.split(text) if segment.strip()]


def chunk_text(text: str | None, max_size: int = DEFAULT_CHUNK_SIZE) -> list[str]:
    """
    Convert text into chunks of at most max_size characters.

    Sentences are accumulated into a buffer joined with ". " and the buffer
    is flushed whenever the next sentence would not fit. A sentence longer
    than max_size is accumulated word by word instead; a single word longer
    than max_size is emitted on its own.

    Args:
        text: Text to chunk
        max_size: Maximum characters per chunk

    Returns:
        list[str]: Chunks in source order

    Raises:
        ValidationError: When max_size is not positive
    """
    if max_size < 1:
        raise ValidationError("max_size must be a positive integer", field="max_size")
    if not text or not text.strip():
        return []

    chunks: list[str] = []
    buffer = ""

    for sentence in split_sentences(text):
        candidate = f"{buffer}{SENTENCE_SEPARATOR}{sentence}" if buffer else sentence
        if len(candidate) <= max_size:
            buffer = candidate
            continue

        if buffer:
            chunks.append(buffer)
            buffer = ""

        if len(sentence) <= max_size:
            buffer = sentence
        else:
            words_done, buffer = _chunk_words(sentence.split(), max_size)
            chunks.extend(words_done)

    if buffer:
        chunks.append(buffer)
    return chunks


def _chunk_words(words: list[str], max_size: int) -> tuple[list[str], str]:
    """
    Accumulate words under max_size.

    Returns:
        tuple: (completed chunks, remaining partial buffer)
    """
    completed: list[str] = []
    buffer = ""
    for word in words:
        if len(word) > max_size:
            if buffer:
                completed.append(buffer)
                buffer = ""
            completed.append(word)
            continue

        candidate = f"{buffer} {word}" if buffer else word
        if len(candidate) > max_size:
            completed.append(buffer)
            buffer = word
        else:
            buffer = candidate
    return completed, buffer
