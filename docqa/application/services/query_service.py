"""
Query history service.

Listing, feedback, deletion and statistics over answered questions, plus
maintenance of the prompt embedding cache.

Dependencies: docqa.boundary.db, docqa.boundary.cache
System role: Query history orchestration layer
"""

import logging
from typing import Sequence
from uuid import UUID

from docqa.boundary.cache.prompt_cache import PromptCache
from docqa.boundary.db.connection import Database
from docqa.boundary.db.CRUD.query_crud import DEFAULT_HISTORY_LIMIT, query_crud
from docqa.boundary.db.models.query_model import QueryModel
from docqa.core.exceptions import NotFoundError
from docqa.models.embedding import PromptCacheEntry
from docqa.models.query import ClearMode

logger = logging.getLogger(__name__)


class QueryService:
    """Query history and prompt cache operations."""

    def __init__(
        self,
        database: Database,
        prompt_cache: PromptCache,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
    ) -> None:
        self.database = database
        self.prompt_cache = prompt_cache
        self.history_limit = history_limit

    async def list_recent(self) -> Sequence[QueryModel]:
        async with self.database.session_scope("get_recent_queries") as session:
            return await query_crud.get_recent(session, self.history_limit)

    async def get_query(self, query_id: UUID) -> QueryModel:
        async with self.database.session_scope("get_query") as session:
            query = await query_crud.get_by_id(session, query_id)
        if query is None:
            raise NotFoundError("query", str(query_id))
        return query

    async def update_feedback(
        self,
        query_id: UUID,
        liked: bool | None = None,
        disliked: bool | None = None,
    ) -> QueryModel:
        """
        Apply a partial feedback update.

        Raises:
            ValidationError: Both flags set to True
            NotFoundError: Query does not exist or is soft-deleted
        """
        async with self.database.session_scope("update_feedback") as session:
            query = await query_crud.update_feedback(
                session, query_id, liked=liked, disliked=disliked
            )
        if query is None:
            raise NotFoundError("query", str(query_id))
        return query

    async def delete_query(self, query_id: UUID) -> None:
        async with self.database.session_scope("soft_delete_query") as session:
            deleted = await query_crud.soft_delete(session, query_id)
        if not deleted:
            raise NotFoundError("query", str(query_id))

    async def restore_query(self, query_id: UUID) -> QueryModel:
        async with self.database.session_scope("restore_query") as session:
            if not await query_crud.restore(session, query_id):
                raise NotFoundError("query", str(query_id))
            return await query_crud.get_by_id(session, query_id)

    async def purge_query(self, query_id: UUID) -> None:
        async with self.database.session_scope("hard_delete_query") as session:
            deleted = await query_crud.hard_delete(session, query_id)
        if not deleted:
            raise NotFoundError("query", str(query_id))

    async def clear_queries(self, mode: ClearMode = ClearMode.SOFT) -> int:
        """
        Remove query history.

        Args:
            mode: soft flags rows deleted, hard removes them, truncate
                removes them and resets identity counters

        Returns:
            int: Rows affected; for truncate, rows present before clearing
        """
        async with self.database.session_scope(f"clear_queries_{mode.value}") as session:
            if mode is ClearMode.SOFT:
                affected = await query_crud.soft_delete_all(session)
            elif mode is ClearMode.HARD:
                affected = await query_crud.delete_all(session)
            else:
                affected = await query_crud.count(session, include_deleted=True)
                await query_crud.truncate(session)
        logger.info(f"Cleared queries (mode={mode.value}, affected={affected})")
        return affected

    async def get_stats(self) -> dict[str, int]:
        async with self.database.session_scope("get_query_stats") as session:
            return await query_crud.get_stats(session)

    def list_cached_prompts(self) -> list[PromptCacheEntry]:
        return self.prompt_cache.list_entries()

    def clear_prompt_cache(self) -> int:
        return self.prompt_cache.clear()
