"""
Base CRUD operations for SQLAlchemy models.

Provides generic create/read/update/delete plus the soft-delete state
machine (active -> soft-deleted -> purged) shared by every store. Methods
flush but never commit; the caller's Database.session_scope() owns the
transaction.

Dependencies: sqlalchemy, uuid
System role: Foundation for all database CRUD operations
"""

from typing import Generic, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import delete, func, select, text, update
from sqlalchemy.ext.asyncio import AsyncSession

from docqa.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for CRUD operations.

    Type Parameters:
        ModelT: SQLAlchemy model with UUIDMixin and SoftDeleteMixin

    Attributes:
        model: The SQLAlchemy model class to operate on
    """

    def __init__(self, model: type[ModelT]) -> None:
        """
        Initialize CRUD with target model.

        Args:
            model: SQLAlchemy model class for database operations
        """
        self.model = model

    async def create(self, session: AsyncSession, **kwargs) -> ModelT:
        """
        Insert a new row.

        Args:
            session: Async database session
            **kwargs: Model field values

        Returns:
            Persisted instance with generated ID and defaults populated
        """
        instance = self.model(**kwargs)
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def get_by_id(self, session: AsyncSession, id: UUID) -> ModelT | None:
        """
        Retrieve a single row by primary key, soft-deleted or not.

        Args:
            session: Async database session
            id: UUID primary key

        Returns:
            Model instance if found, None otherwise
        """
        stmt = select(self.model).where(self.model.id == id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_all(
        self,
        session: AsyncSession,
        limit: int | None = None,
        offset: int = 0,
        include_deleted: bool = False,
    ) -> Sequence[ModelT]:
        """
        Retrieve rows with optional pagination.

        Args:
            session: Async database session
            limit: Maximum number of rows to return (None for all)
            offset: Number of rows to skip
            include_deleted: Also return soft-deleted rows

        Returns:
            Sequence of model instances
        """
        stmt = select(self.model).offset(offset)
        if not include_deleted:
            stmt = stmt.where(self.model.is_deleted.is_(False))
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def update_by_id(
        self,
        session: AsyncSession,
        id: UUID,
        **kwargs,
    ) -> ModelT | None:
        """
        Update fields of a row by primary key.

        Args:
            session: Async database session
            id: UUID primary key
            **kwargs: Fields to update with new values

        Returns:
            Updated model instance if found, None otherwise
        """
        instance = await self.get_by_id(session, id)
        if instance is None:
            return None
        for field, value in kwargs.items():
            setattr(instance, field, value)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def exists(self, session: AsyncSession, id: UUID) -> bool:
        stmt = select(self.model.id).where(self.model.id == id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def soft_delete(self, session: AsyncSession, id: UUID) -> bool:
        """
        Mark an active row as deleted.

        Returns:
            True if an active row was flagged, False if missing or already deleted
        """
        return await self._set_deleted(session, id, True)

    async def restore(self, session: AsyncSession, id: UUID) -> bool:
        """
        Clear the deleted flag of a soft-deleted row.

        Returns:
            True if a soft-deleted row was restored, False otherwise
        """
        return await self._set_deleted(session, id, False)

    async def hard_delete(self, session: AsyncSession, id: UUID) -> bool:
        """
        Permanently remove a row in any state.

        Returns:
            True if record was deleted, False if not found
        """
        stmt = delete(self.model).where(self.model.id == id)
        result = await session.execute(stmt)
        return result.rowcount > 0

    async def soft_delete_all(self, session: AsyncSession) -> int:
        """Flag every active row as deleted. Returns the number flagged."""
        stmt = (
            update(self.model)
            .where(self.model.is_deleted.is_(False))
            .values(is_deleted=True)
            .execution_options(synchronize_session="fetch")
        )
        result = await session.execute(stmt)
        return result.rowcount

    async def delete_all(self, session: AsyncSession) -> int:
        """Permanently remove every row. Returns the number removed."""
        result = await session.execute(delete(self.model))
        session.expunge_all()
        return result.rowcount

    async def truncate(self, session: AsyncSession) -> None:
        """
        Remove every row and reset identity counters.

        PostgreSQL uses TRUNCATE ... RESTART IDENTITY. Other dialects delete
        all rows; on SQLite the table's sqlite_sequence entry is cleared when
        that table exists.
        """
        table = self.model.__tablename__
        dialect = session.bind.dialect.name

        if dialect == "postgresql":
            await session.execute(text(f'TRUNCATE TABLE "{table}" RESTART IDENTITY'))
        else:
            await session.execute(delete(self.model))
            if dialect == "sqlite":
                has_sequence = await session.execute(
                    text(
                        "SELECT 1 FROM sqlite_master "
                        "WHERE type = 'table' AND name = 'sqlite_sequence'"
                    )
                )
                if has_sequence.scalar_one_or_none() is not None:
                    await session.execute(
                        text("DELETE FROM sqlite_sequence WHERE name = :table"),
                        {"table": table},
                    )
        session.expunge_all()

    async def count(self, session: AsyncSession, include_deleted: bool = False) -> int:
        stmt = select(func.count()).select_from(self.model)
        if not include_deleted:
            stmt = stmt.where(self.model.is_deleted.is_(False))
        result = await session.execute(stmt)
        return result.scalar_one()

    async def _set_deleted(self, session: AsyncSession, id: UUID, deleted: bool) -> bool:
        stmt = (
            update(self.model)
            .where(self.model.id == id, self.model.is_deleted.is_(not deleted))
            .values(is_deleted=deleted)
            .execution_options(synchronize_session="fetch")
        )
        result = await session.execute(stmt)
        return result.rowcount > 0
