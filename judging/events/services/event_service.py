import logging
from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from judging.assignments.models import JudgeEvent
from judging.core.config import settings
from judging.core.deletion import DeletePolicy, delete_with_policy
from judging.core.errors import NotFound
from judging.events.models import Event
from judging.projects.models import Project
from judging.reviews.models import Review

logger = logging.getLogger(__name__)


class EventService:
    def __init__(self, db: Session, delete_policy: DeletePolicy = None):
        self.db = db
        self.delete_policy = delete_policy or settings.DELETE_POLICY

    def get_event(self, event_id: int) -> Event:
        event = self.db.query(Event).filter(Event.id == event_id).first()
        if not event:
            raise NotFound("Event not found")
        return event

    def list_events(self) -> List[Event]:
        """All events, most recent date first."""
        return self.db.query(Event).order_by(Event.date.desc(), Event.id.desc()).all()

    def create_event(self, name: str, event_date: Optional[date]) -> Event:
        event = Event(name=name, date=event_date)
        self.db.add(event)
        self.db.commit()
        self.db.refresh(event)
        logger.info(f"Created event {event.id}")
        return event

    def update_event(self, event_id: int, name: str, event_date: Optional[date]) -> Event:
        event = self.get_event(event_id)
        event.name = name
        event.date = event_date
        self.db.commit()
        self.db.refresh(event)
        return event

    def delete_event(self, event_id: int):
        event = self.get_event(event_id)
        project_ids = self.db.query(Project.id).filter(Project.event_id == event_id)
        dependents = [
            ("project reviews", self.db.query(Review).filter(Review.project_id.in_(project_ids.scalar_subquery()))),
            ("projects", self.db.query(Project).filter(Project.event_id == event_id)),
            ("judge assignments", self.db.query(JudgeEvent).filter(JudgeEvent.event_id == event_id)),
        ]
        delete_with_policy(self.db, event, dependents, self.delete_policy, f"Event {event_id}")
        logger.info(f"Deleted event {event_id} ({DeletePolicy(self.delete_policy).value} policy)")
