from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from judging.core.config import settings
from judging.events.models import Event
from judging.judges.models import Judge
from judging.projects.models import Project
from judging.reviews.models import Review
from judging.students.models import Student


class AnalyticsService:
    def __init__(self, db: Session):
        self.db = db

    def _ranked_projects(self):
        """Reviewed projects ordered by mean score, best first.

        Inner joins drop projects that have no reviews. Equal means fall back
        to project id so the order is stable between calls.
        """
        avg_score = func.avg(Review.score).label("avg_score")
        return (
            self.db.query(Project.title, Event.name.label("event_name"), avg_score)
            .join(Event, Project.event_id == Event.id)
            .join(Review, Review.project_id == Project.id)
            .group_by(Project.id, Project.title, Event.name)
            .order_by(avg_score.desc(), Project.id.asc())
        )

    def leaderboard(self, limit: Optional[int] = None) -> List[dict]:
        rows = self._ranked_projects().limit(limit or settings.LEADERBOARD_SIZE).all()
        return [
            {"title": row.title, "event_name": row.event_name, "avg_score": float(row.avg_score)}
            for row in rows
        ]

    def top_event_name(self) -> Optional[str]:
        """Name of the event with the most projects, or None when no event has any."""
        project_count = func.count(Project.id).label("project_count")
        row = (
            self.db.query(Event.name, project_count)
            .join(Project, Project.event_id == Event.id)
            .group_by(Event.id, Event.name)
            .order_by(project_count.desc(), Event.id.asc())
            .first()
        )
        return row.name if row else None

    def top_project_title(self) -> Optional[str]:
        row = self._ranked_projects().first()
        return row.title if row else None

    def summary(self) -> dict:
        return {
            "totalStudents": self.db.query(func.count(Student.id)).scalar(),
            "totalJudges": self.db.query(func.count(Judge.id)).scalar(),
            "totalEvents": self.db.query(func.count(Event.id)).scalar(),
            "totalProjects": self.db.query(func.count(Project.id)).scalar(),
            "topEventName": self.top_event_name(),
            "topProjectTitle": self.top_project_title(),
        }
