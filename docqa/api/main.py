"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, uvicorn, python-dotenv, docqa.api.routers
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docqa import __version__
from docqa.api.deps.dependencies import get_service_cache
from docqa.observability.logger import configure_logging
from docqa.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

from .routers import (
    cache_router,
    documents_router,
    embeddings_router,
    health_router,
    queries_router,
    query_router,
)

load_dotenv()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Startup creates tables; shutdown disposes the engine.
    """
    cache = get_service_cache()
    configure_logging(cache.settings.log_level)
    logger = logging.getLogger("uvicorn")

    # Startup
    await cache.database.create_tables()
    _ = cache.providers
    logger.info("Service cache pre-warmed")

    yield

    # Shutdown
    await cache.shutdown()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="Document Q&A API",
        description="Question answering over uploaded documents with cached embeddings",
        version=__version__,
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(query_router, prefix="/api/v1")
    app.include_router(queries_router, prefix="/api/v1")
    app.include_router(documents_router, prefix="/api/v1")
    app.include_router(embeddings_router, prefix="/api/v1")
    app.include_router(cache_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "docqa.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
