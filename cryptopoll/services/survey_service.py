"""
Persistence of validated survey submissions.

A submission is written as one user row plus its answer rows inside a single
transaction. Statements run in order because every answer row needs the id
generated for the user.
"""
import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from cryptopoll.core.exceptions import PersistenceError
from cryptopoll.models.survey import (
    Comment,
    CryptocurrencyPreference,
    InvestmentFrequency,
    ValuedCharacteristic,
)
from cryptopoll.models.user import User
from cryptopoll.schemas.survey import SurveySubmission

logger = logging.getLogger(__name__)


def _insert_user(db: Session, name: str, email: str, age: Optional[int]) -> int:
    user = User(name=name, email=email, age=age)
    db.add(user)
    db.flush()
    return user.id  # type: ignore


def _insert_cryptocurrency(db: Session, user_id: int, cryptocurrency: str) -> None:
    db.add(CryptocurrencyPreference(user_id=user_id, cryptocurrency=cryptocurrency))
    db.flush()


def _insert_frequency(db: Session, user_id: int, frequency: str) -> None:
    db.add(InvestmentFrequency(user_id=user_id, frequency=frequency))
    db.flush()


def _insert_characteristics(db: Session, user_id: int, characteristics: List[str]) -> None:
    for characteristic in characteristics:
        db.add(ValuedCharacteristic(user_id=user_id, characteristic=characteristic))
        db.flush()


def _insert_comment(db: Session, user_id: int, comment: str) -> None:
    db.add(Comment(user_id=user_id, comment=comment))
    db.flush()


def save_submission(db: Session, submission: SurveySubmission) -> int:
    """
    Store a validated submission atomically.

    Args:
        db: Database session owned by the current request
        submission: Normalized submission

    Returns:
        Id of the new user row

    Raises:
        PersistenceError: If any statement fails; nothing is kept
    """
    try:
        user_id = _insert_user(db, submission.name, submission.email, submission.age)
        _insert_cryptocurrency(db, user_id, submission.cryptocurrency)

        if submission.frequency is not None:
            _insert_frequency(db, user_id, submission.frequency)

        _insert_characteristics(db, user_id, submission.characteristics)

        if submission.comment is not None:
            _insert_comment(db, user_id, submission.comment)

        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database error, submission rolled back: {e}")
        raise PersistenceError(
            "Error saving to the database.",
            details=str(getattr(e, "orig", None) or e),
        ) from e

    logger.info(
        f"Stored submission for user {user_id} "
        f"({len(submission.characteristics)} characteristics, "
        f"comment={'yes' if submission.comment else 'no'})"
    )
    return user_id
