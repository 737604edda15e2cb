"""
Document ingestion pipeline.

Exports: DocumentPipeline, PipelineResult
"""

from .entrypoint import DocumentPipeline
from .models import PipelineResult

__all__ = ["DocumentPipeline", "PipelineResult"]
