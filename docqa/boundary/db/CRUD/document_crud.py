"""
Document CRUD operations.

Provides Create, Read, Update, Delete operations for DocumentModel with
the post-processing update that attaches an embedding set.

Dependencies: sqlalchemy, docqa.boundary.db.models.document_model
System role: Document persistence operations
"""

from datetime import datetime, timezone
from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from docqa.boundary.db.CRUD.base_crud import BaseCRUD
from docqa.boundary.db.models.document_model import DocumentModel


class DocumentCRUD(BaseCRUD[DocumentModel]):
    """
    CRUD operations for DocumentModel.

    Extends BaseCRUD with listing of active documents and processing
    status updates.
    """

    def __init__(self) -> None:
        """Initialize DocumentCRUD with DocumentModel."""
        super().__init__(DocumentModel)

    async def get_active(
        self,
        session: AsyncSession,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[DocumentModel]:
        """
        Retrieve non-deleted documents, newest upload first.

        Args:
            session: Async database session
            limit: Maximum number of documents to return
            offset: Number of documents to skip

        Returns:
            Sequence of active DocumentModels
        """
        stmt = (
            select(DocumentModel)
            .where(DocumentModel.is_deleted.is_(False))
            .order_by(DocumentModel.uploaded_at.desc())
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def update_after_processing(
        self,
        session: AsyncSession,
        id: UUID,
        embedding_doc_id: str,
        total_embeddings: int,
    ) -> DocumentModel | None:
        """
        Attach the embedding set produced for a document.

        Args:
            session: Async database session
            id: Document UUID
            embedding_doc_id: Embedding set id
            total_embeddings: Number of chunks in the set

        Returns:
            Updated DocumentModel if found, None otherwise
        """
        return await self.update_by_id(
            session,
            id,
            embedding_doc_id=embedding_doc_id,
            total_embeddings=total_embeddings,
            processed_at=datetime.now(timezone.utc),
        )

    async def count_active(self, session: AsyncSession) -> int:
        return await self.count(session)


document_crud = DocumentCRUD()
