"""
Query ORM model.

Dependencies: sqlalchemy, docqa.boundary.db.base
System role: Question/answer history persistence
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column

from docqa.boundary.db.base import Base, SoftDeleteMixin, UUIDMixin, utc_now


class QueryModel(Base, UUIDMixin, SoftDeleteMixin):
    """
    Answered question.

    prompt and answer are written once at insert; only the feedback flags
    and is_deleted change afterwards. normalized_prompt holds the lookup
    form of prompt used for exact-match answers.
    """

    __tablename__ = "queries"

    prompt: Mapped[str] = mapped_column(Text, nullable=False)
    normalized_prompt: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    answer: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
        index=True,
    )
    liked: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    disliked: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    def __repr__(self) -> str:
        return f"<QueryModel(id={self.id}, prompt={self.prompt[:30]!r})>"
