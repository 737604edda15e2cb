"""
Shared response schemas.

Dependencies: pydantic
System role: Generic API response shapes
"""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str


class DeleteCountResponse(BaseModel):
    """Result of a bulk delete."""

    message: str
    deleted_count: int = Field(ge=0)
