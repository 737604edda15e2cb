"""
Database connection management.

Database owns the async engine and session factory. It is constructed once
per process, injected where needed, and disposed on shutdown.

Dependencies: sqlalchemy, aiosqlite (default driver), docqa.configs
System role: Database connection lifecycle and transaction boundaries
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from docqa.boundary.db.base import Base
from docqa.configs.database import DatabaseSettings
from docqa.core.exceptions import StorageError
from docqa.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


class Database:
    """
    Async engine plus session factory.

    Usage:
        database = Database.from_settings(settings.database)
        await database.create_tables()
        async with database.session_scope() as session:
            await query_crud.create(session, prompt=..., answer=...)
    """

    def __init__(
        self,
        url: str,
        echo: bool = False,
        pool_size: int = 5,
        max_overflow: int = 10,
        pool_timeout: int = 30,
    ) -> None:
        """
        Create engine and session factory.

        Pool sizing applies to server databases only. A SQLite file URL gets
        its parent directory created; in-memory SQLite shares one connection.

        Args:
            url: SQLAlchemy async URL
            echo: Echo SQL statements
            pool_size: Connection pool size
            max_overflow: Maximum overflow connections
            pool_timeout: Pool checkout timeout in seconds
        """
        self.url = url
        sa_url = make_url(url)
        engine_kwargs: dict = {"echo": echo}

        if sa_url.get_backend_name() == "sqlite":
            database = sa_url.database
            if not database or database == ":memory:":
                engine_kwargs["poolclass"] = StaticPool
                engine_kwargs["connect_args"] = {"check_same_thread": False}
            else:
                Path(database).parent.mkdir(parents=True, exist_ok=True)
        else:
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_timeout=pool_timeout,
                pool_pre_ping=True,
            )

        self.engine: AsyncEngine = create_async_engine(url, **engine_kwargs)
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            autoflush=False,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: DatabaseSettings) -> "Database":
        return cls(
            settings.url,
            echo=settings.echo_sql,
            pool_size=settings.pool_size,
            max_overflow=settings.max_overflow,
            pool_timeout=settings.pool_timeout,
        )

    @property
    def dialect_name(self) -> str:
        return self.engine.dialect.name

    @asynccontextmanager
    async def session_scope(self, operation: str = "transaction") -> AsyncIterator[AsyncSession]:
        """
        Run a unit of work in one transaction.

        Commits on success and rolls back on any exception. SQLAlchemy
        errors are logged and re-raised as StorageError; domain errors
        raised inside the block pass through unchanged.

        Args:
            operation: Label attached to logs and StorageError

        Yields:
            AsyncSession: Session bound to this transaction
        """
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except SQLAlchemyError as e:
                await session.rollback()
                log_exception_with_context(
                    logger,
                    f"Database operation failed: {operation}",
                    e,
                    operation=operation,
                )
                raise StorageError(
                    f"Database operation failed: {operation}",
                    operation=operation,
                    details={"error_type": type(e).__name__},
                ) from e
            except Exception:
                await session.rollback()
                raise

    async def create_tables(self) -> None:
        """Create all registered tables if they do not exist."""
        # Model modules register themselves on Base.metadata when imported
        from docqa.boundary.db import models  # noqa: F401

        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as e:
            raise StorageError(
                "Failed to create tables",
                operation="create_tables",
                details={"error_type": type(e).__name__},
            ) from e
        logger.info(f"Database tables ready ({self.dialect_name})")

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()
        logger.info("Database engine disposed")
