"""
Prompt embedding cache.

Stores one embedding per normalized prompt as prompt_<md5>.json so that
repeated or trivially re-cased questions skip the embedding provider.

Dependencies: hashlib, json, pathlib
System role: Embedding reuse for incoming questions
"""

import hashlib
import logging
from datetime import datetime, timezone
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from docqa.boundary.cache.file_utils import read_json, write_json_atomic
from docqa.core.exceptions import StorageError
from docqa.core.normalization import normalize_prompt
from docqa.models.embedding import PromptCacheEntry

logger = logging.getLogger(__name__)

PROMPT_KEY_PREFIX = "prompt_"


class PromptCache:
    """File-backed cache of prompt embeddings."""

    def __init__(self, directory: Path | str) -> None:
        self._dir = Path(directory)
        self._dir.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def prompt_key(prompt: str) -> str:
        """md5 hex digest of the normalized prompt."""
        return hashlib.md5(normalize_prompt(prompt).encode("utf-8")).hexdigest()

    def get(self, prompt: str) -> list[float] | None:
        """
        Look up the cached embedding for a prompt.

        An unreadable entry is reported and treated as a miss; the next put
        overwrites it.
        """
        entry = self._read_entry(self._path_for(self.prompt_key(prompt)))
        if entry is None:
            return None
        logger.debug(f"Prompt cache hit: {entry.prompt[:50]!r}")
        return entry.embedding

    def put(self, prompt: str, embedding: list[float]) -> PromptCacheEntry:
        """
        Store the embedding for a prompt, replacing any previous entry.

        Raises:
            StorageError: When the entry cannot be written
        """
        key = self.prompt_key(prompt)
        entry = PromptCacheEntry(
            prompt_key=key,
            prompt=prompt,
            embedding=list(embedding),
            timestamp=datetime.now(timezone.utc),
        )
        path = self._path_for(key)
        try:
            write_json_atomic(
                path,
                {
                    "prompt": entry.prompt,
                    "embedding": entry.embedding,
                    "timestamp": entry.timestamp.isoformat(),
                    "embeddingLength": entry.embedding_length,
                },
            )
        except OSError as e:
            raise StorageError(
                "Failed to store prompt embedding",
                operation="put",
                details={"path": str(path)},
            ) from e
        logger.debug(f"Stored prompt embedding with key {PROMPT_KEY_PREFIX}{key}")
        return entry

    def list_entries(self) -> list[PromptCacheEntry]:
        """All readable entries, newest first."""
        entries = [
            entry
            for entry in (
                self._read_entry(path)
                for path in self._dir.glob(f"{PROMPT_KEY_PREFIX}*.json")
            )
            if entry is not None
        ]
        entries.sort(key=lambda entry: entry.timestamp, reverse=True)
        return entries

    def clear(self) -> int:
        """
        Remove every cached prompt embedding.

        Returns:
            int: Number of entries removed
        """
        removed = 0
        for path in self._dir.glob(f"{PROMPT_KEY_PREFIX}*.json"):
            try:
                path.unlink()
            except FileNotFoundError:
                continue
            except OSError as e:
                raise StorageError(
                    "Failed to clear prompt cache",
                    operation="clear",
                    details={"path": str(path)},
                ) from e
            removed += 1
        logger.info(f"Cleared {removed} prompt cache entries")
        return removed

    def _path_for(self, key: str) -> Path:
        return self._dir / f"{PROMPT_KEY_PREFIX}{key}.json"

    def _read_entry(self, path: Path) -> PromptCacheEntry | None:
        if not path.is_file():
            return None
        try:
            raw = read_json(path)
            return PromptCacheEntry(
                prompt_key=path.stem[len(PROMPT_KEY_PREFIX):],
                prompt=raw["prompt"],
                embedding=raw["embedding"],
                timestamp=raw["timestamp"],
            )
        except FileNotFoundError:
            return None
        except (OSError, ValueError, KeyError, TypeError, PydanticValidationError) as e:
            logger.warning(f"Ignoring unreadable prompt cache entry {path.name}: {e}")
            return None
