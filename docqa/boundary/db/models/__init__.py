"""
ORM models.

Importing this package registers every table on Base.metadata.
"""

from docqa.boundary.db.models.document_model import DocumentModel
from docqa.boundary.db.models.query_model import QueryModel

__all__ = ["DocumentModel", "QueryModel"]
