"""
Field validators for survey submissions.

Every validator is a pure function: it returns the normalized value or raises
``FieldValidationError`` with a message that is safe to show the respondent.
Optional fields never raise; bad input is logged and dropped instead.
The same functions back the server handler and the form client.
"""
import logging
import math
import re
from typing import Any, Dict, Iterable, List, Optional

from cryptopoll.core.choices import CHARACTERISTICS, CRYPTOCURRENCIES, FREQUENCIES
from cryptopoll.core.exceptions import FieldValidationError, MalformedRequestError
from cryptopoll.schemas.survey import SurveySubmission

logger = logging.getLogger(__name__)

NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 254
COMMENT_MAX_LENGTH = 1000
MIN_AGE = 10
MAX_AGE = 99

NAME_PATTERN = re.compile(r"[a-zA-ZÀ-ÿ\s'-]+")
EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
AGE_PATTERN = re.compile(r"[0-9]+")

# '&' first so entities produced by later replacements are not escaped again
COMMENT_ENTITIES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


def validate_name(raw: Any) -> str:
    """
    Validate the respondent's name.

    Args:
        raw: Value of the ``name`` key

    Returns:
        The trimmed name

    Raises:
        FieldValidationError: If missing, too long or containing characters
            other than letters, whitespace, apostrophes and hyphens
    """
    if not isinstance(raw, str) or not raw.strip():
        raise FieldValidationError("name", "Name is required.")
    name = raw.strip()
    if len(name) > NAME_MAX_LENGTH:
        raise FieldValidationError(
            "name", f"Name cannot exceed {NAME_MAX_LENGTH} characters."
        )
    if not NAME_PATTERN.fullmatch(name):
        logger.warning(f"Invalid characters detected in name: {name!r}")
        raise FieldValidationError(
            "name",
            "Name may only contain letters, spaces, apostrophes and hyphens.",
        )
    return name


def validate_email(raw: Any) -> str:
    """
    Validate the respondent's email address.

    Case is preserved; only surrounding whitespace is removed.
    """
    if not isinstance(raw, str) or not raw.strip():
        raise FieldValidationError("email", "Email is required.")
    email = raw.strip()
    if len(email) > EMAIL_MAX_LENGTH:
        raise FieldValidationError(
            "email", f"Email cannot exceed {EMAIL_MAX_LENGTH} characters."
        )
    if not EMAIL_PATTERN.fullmatch(email):
        logger.warning(f"Invalid email format detected: {email!r}")
        raise FieldValidationError(
            "email",
            "Invalid email. Please use a valid format (e.g. user@domain.com).",
        )
    return email


def validate_age(raw: Any) -> Optional[int]:
    """
    Validate the optional age.

    ``None`` and blank strings mean "not given". Integers, integral floats
    and digit-only strings are accepted when they fall within 10-99.
    """
    if raw is None:
        return None

    # bool is a subclass of int, so it has to be rejected first
    if isinstance(raw, bool):
        logger.warning(f"Invalid age type: boolean provided ({raw})")
        raise FieldValidationError("age", "Age must be a whole number.")

    if isinstance(raw, int):
        age = raw
    elif isinstance(raw, float):
        if not math.isfinite(raw):
            logger.warning(f"Invalid age: non-finite value provided ({raw})")
            raise FieldValidationError("age", "Age must be a valid whole number.")
        if not raw.is_integer():
            logger.warning(f"Invalid age: fractional value provided ({raw})")
            raise FieldValidationError("age", "Age must be a whole number.")
        age = int(raw)
    elif isinstance(raw, str):
        text = raw.strip()
        if not text:
            return None
        if not AGE_PATTERN.fullmatch(text):
            logger.warning(f"Invalid age format: {text!r}")
            raise FieldValidationError(
                "age", "Age must be a whole number without decimals."
            )
        # More than two significant digits is out of range; also keeps
        # int() clear of its digit-count limit
        if len(text.lstrip("0")) > len(str(MAX_AGE)):
            logger.warning(f"Age out of range: {len(text)}-digit value")
            raise FieldValidationError(
                "age", f"Age must be between {MIN_AGE} and {MAX_AGE}."
            )
        age = int(text)
    else:
        logger.warning(f"Invalid age type: {type(raw).__name__}")
        raise FieldValidationError("age", "Invalid data type for age.")

    if age < MIN_AGE or age > MAX_AGE:
        logger.warning(f"Age out of range: {age}")
        raise FieldValidationError(
            "age", f"Age must be between {MIN_AGE} and {MAX_AGE}."
        )
    return age


def validate_enum_field(
    raw: Any,
    allowed: Iterable[str],
    field_label: str,
    required: bool = True,
) -> Optional[str]:
    """
    Check a value against a fixed allow-list.

    Args:
        raw: Submitted value
        allowed: Accepted values
        field_label: Human-readable field name used in messages
        required: Reject missing or unknown values instead of dropping them

    Returns:
        The trimmed value, or None for an optional field that was not
        provided or could not be used

    Raises:
        FieldValidationError: Only for required fields
    """
    allowed = frozenset(allowed)
    value = raw.strip() if isinstance(raw, str) else ""

    if not value:
        if required:
            raise FieldValidationError(
                field_label, f"Missing required field ({field_label})."
            )
        if raw is not None and not isinstance(raw, str):
            logger.warning(f"Ignoring non-string {field_label}: {type(raw).__name__}")
        return None

    if value not in allowed:
        if required:
            logger.warning(f"Unknown {field_label}: {value!r}")
            raise FieldValidationError(
                field_label, f"Invalid value for {field_label}."
            )
        logger.warning(f"Ignoring unknown {field_label}: {value!r}")
        return None

    return value


def validate_characteristics(values: Any) -> List[str]:
    """Keep the allowed characteristics, in order, dropping everything else."""
    if values is None:
        return []
    if not isinstance(values, (list, tuple)):
        logger.warning(f"Ignoring characteristics of type {type(values).__name__}")
        return []

    kept: List[str] = []
    for entry in values:
        value = entry.strip() if isinstance(entry, str) else None
        if value not in CHARACTERISTICS:
            logger.warning(f"Dropping invalid characteristic: {entry!r}")
            continue
        kept.append(value)
    return kept


def sanitize_comment(raw: Any) -> Optional[str]:
    """
    HTML-escape the free-text comment and cap it at 1000 characters.

    Escaping happens before truncation, so the stored text never exceeds
    the column size.
    """
    if raw is None:
        return None
    if not isinstance(raw, str):
        logger.warning(f"Dropping non-string comment: {type(raw).__name__}")
        return None

    text = raw.strip()
    if not text:
        return None

    for char, entity in COMMENT_ENTITIES:
        text = text.replace(char, entity)
    return text[:COMMENT_MAX_LENGTH]


def validate_submission(data: Any) -> SurveySubmission:
    """
    Validate a parsed request body.

    Required fields are checked in order (name, email, age, cryptocurrency)
    and the first failure is raised. Optional fields are normalized.

    Args:
        data: Parsed JSON body

    Returns:
        SurveySubmission with normalized values

    Raises:
        MalformedRequestError: If the body is not a JSON object
        FieldValidationError: If a required field is invalid
    """
    if not isinstance(data, dict):
        raise MalformedRequestError("Request body must be a JSON object.")

    payload: Dict[str, Any] = data
    return SurveySubmission(
        name=validate_name(payload.get("name")),
        email=validate_email(payload.get("email")),
        age=validate_age(payload.get("age")),
        cryptocurrency=validate_enum_field(
            payload.get("role"), CRYPTOCURRENCIES, "cryptocurrency"
        ),
        frequency=validate_enum_field(
            payload.get("frequency"), FREQUENCIES, "frequency", required=False
        ),
        characteristics=validate_characteristics(payload.get("prefer")),
        comment=sanitize_comment(payload.get("comment")),
    )
