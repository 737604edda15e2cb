"""
Application services.

Exports: RetrievalService, DocumentService, QueryService
"""

from docqa.application.services.document_service import DocumentService
from docqa.application.services.query_service import QueryService
from docqa.application.services.retrieval_service import RetrievalService

__all__ = ["RetrievalService", "DocumentService", "QueryService"]
