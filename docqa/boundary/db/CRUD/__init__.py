"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from docqa.boundary.db.CRUD import query_crud, document_crud

    async with database.session_scope() as session:
        query = await query_crud.find_by_prompt(session, prompt)
"""

from docqa.boundary.db.CRUD.base_crud import BaseCRUD
from docqa.boundary.db.CRUD.document_crud import DocumentCRUD, document_crud
from docqa.boundary.db.CRUD.query_crud import QueryCRUD, query_crud

__all__ = [
    "BaseCRUD",
    "DocumentCRUD",
    "document_crud",
    "QueryCRUD",
    "query_crud",
]
