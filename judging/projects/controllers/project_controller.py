import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from judging.core.database import get_db
from judging.core.errors import UnclassifiedFailure
from judging.projects.schemas.project_schema import ProjectCreate, ProjectDetail, ProjectRead, ProjectWithReviews
from judging.projects.services.project_service import ProjectService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/projects", response_model=List[ProjectRead])
def list_projects(db: Session = Depends(get_db)):
    try:
        return ProjectService(db).list_projects()
    except SQLAlchemyError:
        logger.exception("Could not fetch projects")
        raise UnclassifiedFailure("Could not fetch projects")


@router.get("/projects/event/{event_id}", response_model=List[ProjectRead])
def list_projects_for_event(event_id: int, db: Session = Depends(get_db)):
    try:
        return ProjectService(db).list_projects_for_event(event_id)
    except SQLAlchemyError:
        logger.exception(f"Could not fetch projects for event {event_id}")
        raise UnclassifiedFailure("Could not fetch projects")


@router.get("/projects/student/{student_id}", response_model=List[ProjectWithReviews])
def list_projects_for_student(student_id: int, db: Session = Depends(get_db)):
    """A student's projects with the feedback judges have left on each."""
    try:
        return ProjectService(db).list_projects_for_student(student_id)
    except SQLAlchemyError:
        logger.exception(f"Could not fetch projects for student {student_id}")
        raise UnclassifiedFailure("Could not fetch student projects.")


@router.get("/project/{project_id}", response_model=ProjectDetail)
def get_project(project_id: int, db: Session = Depends(get_db)):
    try:
        return ProjectService(db).get_project_detail(project_id)
    except SQLAlchemyError:
        logger.exception(f"Could not fetch project {project_id}")
        raise UnclassifiedFailure("Could not fetch project details")


@router.post("/projects")
def create_project(body: ProjectCreate, db: Session = Depends(get_db)):
    try:
        ProjectService(db).create_project(body.title, body.description, body.event_id, body.user_id)
        return {"message": "Project added"}
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Could not create project")
        raise UnclassifiedFailure("Could not add project")


@router.delete("/projects/{project_id}")
def delete_project(project_id: int, db: Session = Depends(get_db)):
    try:
        ProjectService(db).delete_project(project_id)
        return {"message": "Project deleted"}
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Could not delete project {project_id}")
        raise UnclassifiedFailure("Could not delete project")
