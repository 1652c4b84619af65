"""
Errors raised while handling a survey submission.

Each carries the HTTP status the API answers with.
"""
from typing import Optional


class SurveyError(Exception):
    """Base class for submission errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MalformedRequestError(SurveyError):
    """The request body is not a JSON object."""

    status_code = 400


class FieldValidationError(SurveyError):
    """A required field failed validation."""

    status_code = 400

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class PersistenceError(SurveyError):
    """The write transaction failed and was rolled back."""

    status_code = 500

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.details = details
