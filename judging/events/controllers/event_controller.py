import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from judging.assignments.services.assignment_service import AssignmentService
from judging.core.database import get_db
from judging.core.errors import UnclassifiedFailure
from judging.events.schemas.event_schema import EventRead, EventWrite
from judging.events.services.event_service import EventService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[EventRead])
def list_events(db: Session = Depends(get_db)):
    try:
        return EventService(db).list_events()
    except SQLAlchemyError:
        logger.exception("Could not fetch events")
        raise UnclassifiedFailure("Could not fetch events")


@router.post("")
def create_event(body: EventWrite, db: Session = Depends(get_db)):
    try:
        EventService(db).create_event(body.name, body.date)
        return {"message": "Event created"}
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Could not create event")
        raise UnclassifiedFailure("Could not create event")


@router.put("/{event_id}")
def update_event(event_id: int, body: EventWrite, db: Session = Depends(get_db)):
    try:
        EventService(db).update_event(event_id, body.name, body.date)
        return {"message": "Event updated"}
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Could not update event {event_id}")
        raise UnclassifiedFailure("Could not update event")


@router.delete("/{event_id}")
def delete_event(event_id: int, db: Session = Depends(get_db)):
    try:
        EventService(db).delete_event(event_id)
        return {"message": "Event deleted"}
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Could not delete event {event_id}")
        raise UnclassifiedFailure("Could not delete event")


@router.get("/judge/{judge_id}", response_model=List[EventRead])
def list_events_for_judge(judge_id: str, db: Session = Depends(get_db)):
    """Events the judge has been assigned to."""
    try:
        return AssignmentService(db).list_events_for_judge(judge_id)
    except SQLAlchemyError:
        logger.exception(f"Could not fetch events for judge {judge_id}")
        raise UnclassifiedFailure("Could not fetch events")
