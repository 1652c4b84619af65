"""
Common schemas for API responses.
"""
from typing import Optional

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error response schema."""

    error: str
    details: Optional[str] = None


class HealthStatus(BaseModel):
    """Health check response."""

    status: str
