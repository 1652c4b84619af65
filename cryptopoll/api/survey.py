"""Survey submission endpoint."""
import logging

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from cryptopoll.core.exceptions import MalformedRequestError
from cryptopoll.core.validators import validate_submission
from cryptopoll.db.base import get_db
from cryptopoll.schemas.common import ErrorResponse
from cryptopoll.schemas.survey import SubmitResponse
from cryptopoll.services.survey_service import save_submission

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/submit",
    response_model=SubmitResponse,
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def submit_survey(request: Request, db: Session = Depends(get_db)):
    """
    Validate a survey submission and store it in one transaction.

    Args:
        request: Request carrying the JSON body
        db: Database session (injected by dependency)

    Returns:
        SubmitResponse confirming the submission was saved
    """
    try:
        data = await request.json()
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError
        logger.warning(f"Malformed JSON body: {e}")
        raise MalformedRequestError("Malformed JSON in request body.") from e

    submission = validate_submission(data)

    # Blocking driver calls run off the event loop, one after another
    await run_in_threadpool(save_submission, db, submission)

    return SubmitResponse(success=True, message="Survey received and saved.")
