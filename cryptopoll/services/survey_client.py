"""
Client side of the survey form.

``SurveyForm`` holds the raw values typed into the form and pre-validates
them with the same validators the server runs. Pre-validation only improves
feedback; the server repeats every check. ``SurveyClient`` posts a form to
the submit endpoint and reduces the reply to a ``SubmissionOutcome``.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

import httpx

from cryptopoll.core.choices import CRYPTOCURRENCIES
from cryptopoll.core.exceptions import FieldValidationError
from cryptopoll.core.validators import (
    validate_age,
    validate_email,
    validate_enum_field,
    validate_name,
)

logger = logging.getLogger(__name__)


@dataclass
class FieldError:
    """A value the respondent has to correct."""
    field: str
    message: str


@dataclass
class SubmissionOutcome:
    """What to tell the respondent after submitting."""
    success: bool
    message: str
    status_code: Optional[int] = None


@dataclass
class SurveyForm:
    """Raw form values, as strings the way form controls hold them."""
    name: str = ""
    email: str = ""
    age: str = ""
    role: str = ""
    frequency: str = ""
    prefer: List[str] = field(default_factory=list)
    comment: str = ""

    def validate(self) -> List[FieldError]:
        """Return every required-field error, in form order."""
        checks: List[Callable[[], Any]] = [
            lambda: validate_name(self.name),
            lambda: validate_email(self.email),
            lambda: validate_age(self.age),
            lambda: validate_enum_field(self.role, CRYPTOCURRENCIES, "cryptocurrency"),
        ]
        errors: List[FieldError] = []
        for check in checks:
            try:
                check()
            except FieldValidationError as e:
                errors.append(FieldError(field=e.field, message=e.message))
        return errors

    def first_error(self) -> Optional[FieldError]:
        """Return the first required-field error, or None when the form is valid."""
        errors = self.validate()
        return errors[0] if errors else None

    def to_payload(self) -> Dict[str, Any]:
        """Build the JSON body expected by ``POST /submit``."""
        return {
            "name": self.name.strip(),
            "email": self.email.strip(),
            "age": self.age.strip() or None,
            "role": self.role.strip(),
            "frequency": self.frequency.strip() or None,
            "prefer": list(self.prefer),
            "comment": self.comment.strip() or None,
        }


class SurveyClient:
    """Posts survey forms to the backend."""

    def __init__(
        self,
        base_url: str = "",
        http_client: Optional[httpx.AsyncClient] = None,
        submit_path: str = "/submit",
    ):
        self.base_url = base_url
        self.submit_path = submit_path
        self._client = http_client

    async def submit(self, form: SurveyForm) -> SubmissionOutcome:
        """
        Pre-validate and send a form.

        Args:
            form: Values entered by the respondent

        Returns:
            SubmissionOutcome describing success or the error to show
        """
        error = form.first_error()
        if error:
            return SubmissionOutcome(success=False, message=error.message)

        payload = form.to_payload()
        try:
            if self._client is not None:
                response = await self._client.post(self.submit_path, json=payload)
            else:
                async with httpx.AsyncClient(base_url=self.base_url) as client:
                    response = await client.post(self.submit_path, json=payload)
        except httpx.HTTPError as e:
            logger.error(f"Failed to send survey: {e}")
            return SubmissionOutcome(
                success=False,
                message="Connection error while sending the survey. Please try again.",
            )

        return self.interpret_response(response)

    @staticmethod
    def interpret_response(response: httpx.Response) -> SubmissionOutcome:
        """Map a submit response to an outcome."""
        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        if body.get("success") is True:
            return SubmissionOutcome(
                success=True,
                message=body.get("message") or "Survey sent.",
                status_code=response.status_code,
            )

        message = body.get("error") or f"Error: {response.status_code} {response.reason_phrase}"
        return SubmissionOutcome(success=False, message=message, status_code=response.status_code)
