"""FastAPI dependency providers."""

from docqa.api.deps.dependencies import (
    ServiceCache,
    get_database,
    get_document_service,
    get_query_service,
    get_retrieval_service,
    get_service_cache,
)

__all__ = [
    "ServiceCache",
    "get_service_cache",
    "get_database",
    "get_retrieval_service",
    "get_document_service",
    "get_query_service",
]
