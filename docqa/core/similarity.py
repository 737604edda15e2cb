"""
Cosine similarity ranking.

Ranks cached chunk vectors against a query vector. Ordering is fully
determined by (score descending, chunk_index ascending).

Dependencies: numpy, docqa.models.embedding, docqa.core.exceptions
System role: Nearest-neighbor selection for retrieval
"""

import logging
from collections.abc import Sequence

import numpy as np

from docqa.core.exceptions import ScoringError
from docqa.models.embedding import Chunk, ScoredChunk

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 3


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Cosine similarity of two vectors.

    A zero-magnitude vector scores 0.0.

    Raises:
        ScoringError: On dimension mismatch or non-finite input
    """
    va = np.asarray(a, dtype=np.float64)
    vb = np.asarray(b, dtype=np.float64)
    if va.ndim != 1 or vb.ndim != 1 or va.shape != vb.shape:
        raise ScoringError(
            "Vector dimension mismatch",
            {"query_dim": int(va.size), "candidate_dim": int(vb.size)},
        )
    if not (np.isfinite(va).all() and np.isfinite(vb).all()):
        raise ScoringError("Vector contains non-finite values")

    norm = float(np.linalg.norm(va) * np.linalg.norm(vb))
    if norm == 0.0:
        return 0.0
    return float(np.dot(va, vb) / norm)


def top_k(
    query_vector: Sequence[float] | None,
    candidates: Sequence[Chunk],
    k: int = DEFAULT_TOP_K,
) -> list[ScoredChunk]:
    """
    Rank candidates by cosine similarity to the query vector.

    Args:
        query_vector: Query embedding (None or empty yields no results)
        candidates: Chunks with embeddings
        k: Maximum number of results

    Returns:
        list[ScoredChunk]: At most k results, best first, ties by chunk_index

    Raises:
        ScoringError: When any candidate cannot be scored
    """
    if query_vector is None or len(query_vector) == 0 or not candidates or k <= 0:
        return []

    scored = []
    for chunk in candidates:
        try:
            score = cosine_similarity(query_vector, chunk.embedding)
        except ScoringError as e:
            e.details["chunk_index"] = chunk.chunk_index
            raise
        scored.append(ScoredChunk(chunk=chunk, score=score))

    scored.sort(key=lambda item: (-item.score, item.chunk.chunk_index))
    ranked = scored[:k]

    logger.debug(
        "Ranked %d candidates, kept %d: %s",
        len(candidates),
        len(ranked),
        [(item.chunk.chunk_index, round(item.score, 4)) for item in ranked],
    )
    return ranked
