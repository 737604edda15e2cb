"""
Health check API endpoints.

Routes: GET /health, GET /health/db

Dependencies: docqa.boundary.db
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel
from sqlalchemy import text

from docqa.api.deps import get_database
from docqa.boundary.db.connection import Database
from docqa.core.exceptions import StorageError


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/db", response_model=HealthResponse)
async def health_check_db(database: Database = Depends(get_database)) -> HealthResponse:
    """Database health check."""
    try:
        async with database.session_scope("health_check") as session:
            await session.execute(text("SELECT 1"))
    except StorageError:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database unavailable",
        )
    return HealthResponse(status="healthy", message="Database connection OK")
