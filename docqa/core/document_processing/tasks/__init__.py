"""
Task modules for document processing pipeline.

Exports: ParsingTask, ChunkingTask, EmbeddingTask
"""

from .chunking_task import ChunkingTask
from .embedding_task import EmbeddingTask
from .parsing_task import ParsingTask

__all__ = ["ParsingTask", "ChunkingTask", "EmbeddingTask"]
