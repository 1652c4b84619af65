"""
Pydantic schemas for survey submissions.
"""
from typing import List, Optional

from pydantic import BaseModel, Field


class SurveySubmission(BaseModel):
    """A submission after validation and sanitization."""

    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=1, max_length=254)
    age: Optional[int] = Field(None, ge=10, le=99)
    cryptocurrency: str
    frequency: Optional[str] = None
    characteristics: List[str] = []
    comment: Optional[str] = Field(None, max_length=1000)


class SubmitResponse(BaseModel):
    """Body returned when a submission was stored."""

    success: bool
    message: str
