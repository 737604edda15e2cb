"""
Domain and API models.

Pydantic models for embedding sets and request/response schemas.
"""
