import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from judging.assignments.schemas.assignment_schema import JudgeAssignment
from judging.assignments.services.assignment_service import AssignmentService
from judging.core.database import get_db
from judging.core.errors import UnclassifiedFailure

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("")
def assign_judge(body: JudgeAssignment, db: Session = Depends(get_db)):
    """Assign a judge to an event; assigning twice is accepted and changes nothing."""
    try:
        AssignmentService(db).assign_judge(body.judge_id, body.event_id)
        return {"message": "Judge assigned"}
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Could not assign judge")
        raise UnclassifiedFailure("Could not assign judge")
