"""
Document ORM model.

One row per uploaded file, updated once after processing with the id and
size of its embedding set.

Dependencies: sqlalchemy, docqa.boundary.db.base
System role: Document metadata persistence
"""

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from docqa.boundary.db.base import Base, SoftDeleteMixin, UUIDMixin, utc_now


class DocumentModel(Base, UUIDMixin, SoftDeleteMixin):
    """
    Uploaded document record.

    Attributes:
        original_name: File name as uploaded by the client
        stored_file_name: Name of the file on local storage
        file_path: Local path of the stored file
        file_size: Size in bytes
        mime_type: Content type reported at upload
        uploaded_at: Upload timestamp (UTC)
        processed_at: Set when the embedding set is attached
        embedding_doc_id: Embedding set id, None until processed
        total_embeddings: Number of chunks in the embedding set
    """

    __tablename__ = "documents"

    original_name: Mapped[str] = mapped_column(String(512), nullable=False)
    stored_file_name: Mapped[str] = mapped_column(String(512), nullable=False)
    file_path: Mapped[str] = mapped_column(String(2048), nullable=False)
    file_size: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    mime_type: Mapped[str | None] = mapped_column(String(255), nullable=True)
    uploaded_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
        index=True,
    )
    processed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
    embedding_doc_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    total_embeddings: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    def __repr__(self) -> str:
        return f"<DocumentModel(id={self.id}, original_name={self.original_name!r})>"
