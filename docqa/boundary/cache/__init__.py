"""
File-backed caches.

Exports the embedding set store and the prompt embedding cache.
"""

from docqa.boundary.cache.embedding_store import EmbeddingStore
from docqa.boundary.cache.prompt_cache import PromptCache

__all__ = ["EmbeddingStore", "PromptCache"]
