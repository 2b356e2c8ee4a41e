import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from judging.core.config import settings
from judging.core.deletion import DeletePolicy, delete_with_policy
from judging.core.errors import NotFound
from judging.events.models import Event
from judging.projects.models import Project
from judging.reviews.models import Review
from judging.reviews.services.review_service import ReviewService
from judging.students.models import Student

logger = logging.getLogger(__name__)


class ProjectService:
    def __init__(self, db: Session, delete_policy: DeletePolicy = None):
        self.db = db
        self.delete_policy = delete_policy or settings.DELETE_POLICY
        self.review_service = ReviewService(db)

    def list_projects(self) -> List[Project]:
        return self.db.query(Project).order_by(Project.id).all()

    def list_projects_for_event(self, event_id: int) -> List[Project]:
        return self.db.query(Project).filter(Project.event_id == event_id).order_by(Project.id).all()

    def list_projects_for_student(self, student_id: int) -> List[dict]:
        """A student's projects, each carrying the reviews it has received so far."""
        projects = self.db.query(Project).filter(Project.user_id == student_id).order_by(Project.id).all()
        reviews = self.review_service.list_reviews_for_projects(p.id for p in projects)

        return [
            {
                "id": project.id,
                "title": project.title,
                "description": project.description,
                "event_id": project.event_id,
                "user_id": project.user_id,
                "reviews": reviews.get(project.id, []),
            }
            for project in projects
        ]

    def get_project_detail(self, project_id: int) -> dict:
        row = (
            self.db.query(Project, Event.name.label("event_name"))
            .join(Event, Project.event_id == Event.id)
            .filter(Project.id == project_id)
            .first()
        )
        if not row:
            raise NotFound("Project not found")

        project, event_name = row
        return {
            "project": {
                "id": project.id,
                "title": project.title,
                "description": project.description,
                "event_id": project.event_id,
                "user_id": project.user_id,
                "event_name": event_name,
            },
            "reviews": self.review_service.list_reviews_for_project(project_id),
        }

    def create_project(self, title: str, description: Optional[str], event_id: int, user_id: int) -> Project:
        if not self.db.query(Event).filter(Event.id == event_id).first():
            raise NotFound("Event not found")
        if not self.db.query(Student).filter(Student.id == user_id).first():
            raise NotFound("Student not found")

        project = Project(title=title, description=description, event_id=event_id, user_id=user_id)
        self.db.add(project)
        self.db.commit()
        self.db.refresh(project)
        logger.info(f"Created project {project.id} for event {event_id}")
        return project

    def delete_project(self, project_id: int):
        project = self.db.query(Project).filter(Project.id == project_id).first()
        if not project:
            raise NotFound("Project not found")

        dependents = [("reviews", self.db.query(Review).filter(Review.project_id == project_id))]
        delete_with_policy(self.db, project, dependents, self.delete_policy, f"Project {project_id}")
        logger.info(f"Deleted project {project_id} ({DeletePolicy(self.delete_policy).value} policy)")
