"""Schemas module - Import all schemas."""
from cryptopoll.schemas.survey import SurveySubmission, SubmitResponse
from cryptopoll.schemas.common import ErrorResponse, HealthStatus

__all__ = [
    "SurveySubmission",
    "SubmitResponse",
    "ErrorResponse",
    "HealthStatus",
]
