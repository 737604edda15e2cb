"""
docqa: retrieval-augmented question answering over uploaded documents.

Chunks documents, caches their embeddings on disk, ranks chunks against a
question, and records every answered question for reuse and feedback.
"""

__version__ = "0.1.0"
