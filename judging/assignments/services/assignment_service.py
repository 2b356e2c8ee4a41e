import logging
from typing import List

from sqlalchemy.orm import Session

from judging.assignments.models import JudgeEvent
from judging.core.errors import NotFound
from judging.core.utils import insert_ignore
from judging.events.models import Event
from judging.judges.models import Judge

logger = logging.getLogger(__name__)


class AssignmentService:
    def __init__(self, db: Session):
        self.db = db

    def assign_judge(self, judge_id: str, event_id: int):
        """Assign a judge to an event. Repeating an existing assignment changes nothing."""
        if not self.db.query(Judge).filter(Judge.id == judge_id).first():
            raise NotFound("Judge not found")
        if not self.db.query(Event).filter(Event.id == event_id).first():
            raise NotFound("Event not found")

        insert_ignore(
            self.db,
            JudgeEvent,
            {"judge_id": judge_id, "event_id": event_id},
            conflict_columns=["judge_id", "event_id"],
        )
        logger.info(f"Assigned judge {judge_id} to event {event_id}")

    def list_events_for_judge(self, judge_id: str) -> List[Event]:
        return (
            self.db.query(Event)
            .join(JudgeEvent, JudgeEvent.event_id == Event.id)
            .filter(JudgeEvent.judge_id == judge_id)
            .all()
        )
