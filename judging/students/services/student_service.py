import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from judging.core.errors import DuplicateResource, InvalidCredentials, NotFound
from judging.core.security import burn_password_check, hash_password, verify_password
from judging.students.models import Student

logger = logging.getLogger(__name__)


class StudentService:
    def __init__(self, db: Session):
        self.db = db

    def get_by_email(self, email: str) -> Optional[Student]:
        return self.db.query(Student).filter(Student.email == email).first()

    def login(self, email: str, password: str) -> dict:
        """Verify a student's credentials and return their public profile.

        Unknown email and wrong password fail with the same error, and both
        paths run one bcrypt check.
        """
        student = self.get_by_email(email)
        if student is None:
            burn_password_check(password)
            logger.warning("Failed student login")
            raise InvalidCredentials()

        if not verify_password(password, student.password):
            logger.warning(f"Failed student login for student {student.id}")
            raise InvalidCredentials()

        return {"id": student.id, "email": student.email, "name": student.name or "Student"}

    def register(self, name: str, email: str, password: str) -> Student:
        if self.get_by_email(email):
            raise DuplicateResource("Email already registered")

        student = Student(name=name, email=email, password=hash_password(password))
        self.db.add(student)
        try:
            self.db.commit()
        except IntegrityError:
            # Lost a race with a concurrent registration for the same email
            self.db.rollback()
            raise DuplicateResource("Email already registered")

        self.db.refresh(student)
        logger.info(f"Registered student {student.id}")
        return student

    def update_profile(self, student_id: int, name: str, password: Optional[str] = None) -> Student:
        """Rename a student and, when a password is given, replace its hash in the same commit."""
        student = self.db.query(Student).filter(Student.id == student_id).first()
        if not student:
            raise NotFound("Student not found")

        student.name = name
        if password:
            student.password = hash_password(password)

        self.db.commit()
        self.db.refresh(student)
        return student
