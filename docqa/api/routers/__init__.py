"""API routers."""

from .cache import router as cache_router
from .documents import router as documents_router
from .embeddings import router as embeddings_router
from .health import router as health_router
from .queries import router as queries_router
from .query import router as query_router

__all__ = [
    "cache_router",
    "documents_router",
    "embeddings_router",
    "health_router",
    "queries_router",
    "query_router",
]
