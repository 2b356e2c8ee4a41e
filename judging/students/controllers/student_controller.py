import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from judging.core.database import get_db
from judging.core.errors import UnclassifiedFailure
from judging.students.schemas.student_schema import LoginResponse, StudentLogin, StudentRegister, StudentUpdate
from judging.students.services.student_service import StudentService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(body: StudentLogin, db: Session = Depends(get_db)):
    try:
        user = StudentService(db).login(body.email, body.password)
        return {"user": user}
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Student login failed")
        raise UnclassifiedFailure()


@router.post("/register", status_code=201)
def register(body: StudentRegister, db: Session = Depends(get_db)):
    """Create a student account. The email must not be registered yet."""
    try:
        StudentService(db).register(body.name, body.email, body.password)
        return {"message": "Student registered"}
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Student registration failed")
        raise UnclassifiedFailure()


@router.put("/update")
def update_profile(body: StudentUpdate, db: Session = Depends(get_db)):
    try:
        StudentService(db).update_profile(body.id, body.name, body.password)
        return {"message": "Profile updated"}
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Student profile update failed")
        raise UnclassifiedFailure("Could not update profile")
