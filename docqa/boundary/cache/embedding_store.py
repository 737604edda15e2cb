"""
Content-addressed embedding set store.

One JSON file per processed document, named by a fingerprint of the
source file's basename and size:

    {"embeddingDocId": ..., "createdAt": ..., "chunks": [{"text", "embedding"}]}

Dependencies: hashlib, json, pathlib, pydantic
System role: Durable cache of chunk embeddings between ingestion and retrieval
"""

import hashlib
import logging
from datetime import datetime, timezone
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from docqa.boundary.cache.file_utils import read_json, write_json_atomic
from docqa.core.exceptions import StorageError, ValidationError
from docqa.models.embedding import Chunk, EmbeddingSet

logger = logging.getLogger(__name__)


class EmbeddingStore:
    """Read and write embedding sets under a single directory."""

    def __init__(self, directory: Path | str) -> None:
        """
        Initialize store with its directory.

        Args:
            directory: Directory holding <embedding_doc_id>.json files

        Creates directory if it does not exist.
        """
        self._dir = Path(directory)
        self._dir.mkdir(parents=True, exist_ok=True)

    @property
    def directory(self) -> Path:
        return self._dir

    @staticmethod
    def compute_fingerprint(name: str, size: int) -> str:
        """
        Derive the embedding set id for a file.

        Only the basename and byte size are hashed, so two different files
        with equal name and size collide, and a renamed copy gets a new id.

        Args:
            name: Original file name (any directory part is ignored)
            size: File size in bytes

        Returns:
            str: "<stem>_<8 hex chars>"
        """
        basename = Path(name).name
        stem = Path(basename).stem
        digest = hashlib.md5(f"{basename}-{size}".encode("utf-8")).hexdigest()
        return f"{stem}_{digest[:8]}"

    def exists(self, embedding_doc_id: str) -> bool:
        return self._path_for(embedding_doc_id).is_file()

    def save(
        self,
        embedding_doc_id: str,
        chunks: list[str],
        vectors: list[list[float]],
    ) -> EmbeddingSet:
        """
        Persist an embedding set, replacing any previous file atomically.

        Args:
            embedding_doc_id: Fingerprint id
            chunks: Chunk texts in source order
            vectors: One vector per chunk, same order

        Returns:
            EmbeddingSet: The saved set

        Raises:
            ValidationError: Unsafe id or chunk/vector count mismatch
            StorageError: When the file cannot be written
        """
        path = self._path_for(embedding_doc_id)
        if len(chunks) != len(vectors):
            raise ValidationError(
                "Chunk and vector counts differ",
                field="vectors",
                details={"chunks": len(chunks), "vectors": len(vectors)},
            )

        embedding_set = EmbeddingSet(
            embedding_doc_id=embedding_doc_id,
            created_at=datetime.now(timezone.utc),
            chunks=[
                Chunk(chunk_index=i, text=text, embedding=list(vector))
                for i, (text, vector) in enumerate(zip(chunks, vectors))
            ],
        )

        try:
            write_json_atomic(path, self._serialize(embedding_set))
        except OSError as e:
            logger.error(f"Failed to save embedding set {embedding_doc_id}: {e}")
            raise StorageError(
                f"Failed to save embedding set: {embedding_doc_id}",
                operation="save",
                details={"path": str(path)},
            ) from e

        logger.info(
            f"Saved embedding set {embedding_doc_id} with {len(chunks)} chunks"
        )
        return embedding_set

    def load(self, embedding_doc_id: str) -> EmbeddingSet | None:
        """
        Load an embedding set.

        Args:
            embedding_doc_id: Fingerprint id

        Returns:
            EmbeddingSet if the file exists, None otherwise

        Raises:
            ValidationError: Unsafe id
            StorageError: File exists but cannot be read or decoded
        """
        path = self._path_for(embedding_doc_id)
        if not path.is_file():
            return None

        try:
            raw = read_json(path)
            return EmbeddingSet(
                embedding_doc_id=raw["embeddingDocId"],
                created_at=raw["createdAt"],
                chunks=[
                    Chunk(chunk_index=i, text=item["text"], embedding=item["embedding"])
                    for i, item in enumerate(raw["chunks"])
                ],
            )
        except FileNotFoundError:
            # Deleted between the existence check and the read
            return None
        except (OSError, ValueError, KeyError, TypeError, PydanticValidationError) as e:
            logger.error(f"Malformed embedding set {embedding_doc_id}: {type(e).__name__}: {e}")
            raise StorageError(
                f"Failed to load embedding set: {embedding_doc_id}",
                operation="load",
                details={"path": str(path), "error_type": type(e).__name__},
            ) from e

    def list_ids(self) -> list[str]:
        """Return ids of all stored sets, sorted."""
        return sorted(
            path.stem
            for path in self._dir.glob("*.json")
            if not path.name.startswith(".")
        )

    def delete(self, embedding_doc_id: str) -> bool:
        """
        Remove an embedding set file.

        Returns:
            True if a file was removed, False if none existed
        """
        path = self._path_for(embedding_doc_id)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise StorageError(
                f"Failed to delete embedding set: {embedding_doc_id}",
                operation="delete",
                details={"path": str(path)},
            ) from e
        logger.info(f"Deleted embedding set {embedding_doc_id}")
        return True

    def _path_for(self, embedding_doc_id: str) -> Path:
        if (
            not embedding_doc_id
            or embedding_doc_id.startswith(".")
            or "/" in embedding_doc_id
            or "\\" in embedding_doc_id
            or "\x00" in embedding_doc_id
        ):
            raise ValidationError(
                f"Invalid embedding set id: {embedding_doc_id!r}",
                field="embedding_doc_id",
            )
        return self._dir / f"{embedding_doc_id}.json"

    def _serialize(self, embedding_set: EmbeddingSet) -> dict:
        return {
            "embeddingDocId": embedding_set.embedding_doc_id,
            "createdAt": embedding_set.created_at.isoformat(),
            "chunks": [
                {"text": chunk.text, "embedding": chunk.embedding}
                for chunk in embedding_set.chunks
            ],
        }
