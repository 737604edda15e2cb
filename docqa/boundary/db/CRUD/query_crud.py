"""
Query CRUD operations.

Question/answer history with feedback flags, prompt lookup for the
exact-match answer cache, and aggregate feedback statistics.

Dependencies: sqlalchemy, docqa.boundary.db.models.query_model
System role: Query history persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import case, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from docqa.boundary.db.CRUD.base_crud import BaseCRUD
from docqa.boundary.db.models.query_model import QueryModel
from docqa.core.exceptions import ValidationError
from docqa.core.normalization import normalize_prompt

DEFAULT_HISTORY_LIMIT = 10


class QueryCRUD(BaseCRUD[QueryModel]):
    """CRUD operations for QueryModel."""

    def __init__(self) -> None:
        """Initialize QueryCRUD with QueryModel."""
        super().__init__(QueryModel)

    async def create(self, session: AsyncSession, **kwargs) -> QueryModel:
        """Insert a query, deriving normalized_prompt from prompt."""
        kwargs["normalized_prompt"] = normalize_prompt(kwargs["prompt"])
        return await super().create(session, **kwargs)

    async def get_recent(
        self,
        session: AsyncSession,
        limit: int = DEFAULT_HISTORY_LIMIT,
    ) -> Sequence[QueryModel]:
        """
        Most recent active queries, newest first.

        Args:
            session: Async database session
            limit: Maximum number of rows

        Returns:
            Sequence of at most limit QueryModels
        """
        stmt = (
            select(QueryModel)
            .where(QueryModel.is_deleted.is_(False))
            .order_by(QueryModel.created_at.desc())
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def find_by_prompt(self, session: AsyncSession, prompt: str) -> QueryModel | None:
        """
        Most recent active query whose prompt matches ignoring case and
        surrounding whitespace.

        Args:
            session: Async database session
            prompt: Prompt as submitted

        Returns:
            Matching QueryModel or None
        """
        stmt = (
            select(QueryModel)
            .where(
                QueryModel.normalized_prompt == normalize_prompt(prompt),
                QueryModel.is_deleted.is_(False),
            )
            .order_by(QueryModel.created_at.desc())
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def update_feedback(
        self,
        session: AsyncSession,
        id: UUID,
        liked: bool | None = None,
        disliked: bool | None = None,
    ) -> QueryModel | None:
        """
        Partially update feedback flags.

        A flag is written only when supplied. Setting both flags to True in
        one call is rejected.

        Args:
            session: Async database session
            id: Query UUID
            liked: New liked value, or None to keep
            disliked: New disliked value, or None to keep

        Returns:
            Updated QueryModel, or None if the query is missing or soft-deleted

        Raises:
            ValidationError: Both liked and disliked set to True
        """
        if liked is True and disliked is True:
            raise ValidationError(
                "A query cannot be both liked and disliked",
                field="feedback",
            )

        values = {
            field: value
            for field, value in (("liked", liked), ("disliked", disliked))
            if value is not None
        }
        stmt = select(QueryModel).where(
            QueryModel.id == id,
            QueryModel.is_deleted.is_(False),
        )
        query = (await session.execute(stmt)).scalar_one_or_none()
        if query is None or not values:
            return query

        for field, value in values.items():
            setattr(query, field, value)
        await session.flush()
        await session.refresh(query)
        return query

    async def get_stats(self, session: AsyncSession) -> dict[str, int]:
        """
        Feedback statistics over active queries.

        Returns:
            dict with total_queries, total_likes, total_dislikes,
            liked_queries and disliked_queries
        """
        liked_count = func.count(case((QueryModel.liked.is_(True), 1)))
        disliked_count = func.count(case((QueryModel.disliked.is_(True), 1)))
        stmt = select(
            func.count(QueryModel.id),
            liked_count,
            disliked_count,
        ).where(QueryModel.is_deleted.is_(False))

        result = await session.execute(stmt)
        total, liked, disliked = result.one()
        # Flags are booleans, so per-query and summed counts coincide
        return {
            "total_queries": total or 0,
            "total_likes": liked or 0,
            "total_dislikes": disliked or 0,
            "liked_queries": liked or 0,
            "disliked_queries": disliked or 0,
        }


query_crud = QueryCRUD()
