import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from judging.core.database import get_db
from judging.core.errors import UnclassifiedFailure
from judging.reviews.schemas.review_schema import ReviewSubmit
from judging.reviews.services.review_service import ReviewService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/review")
def submit_review(body: ReviewSubmit, db: Session = Depends(get_db)):
    """Save a judge's score and feedback for a project. A later submission by the same judge replaces it."""
    try:
        ReviewService(db).submit_review(body.judge_id, body.project_id, body.score, body.feedback)
        return {"message": "Review saved"}
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Could not save review")
        raise UnclassifiedFailure("Could not save review")
