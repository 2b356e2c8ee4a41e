import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from judging.assignments.models import JudgeEvent
from judging.core.config import settings
from judging.core.deletion import DeletePolicy, delete_with_policy
from judging.core.errors import DuplicateResource, InvalidCredentials, NotFound
from judging.core.security import burn_password_check, hash_password, verify_password
from judging.judges.models import Judge
from judging.reviews.models import Review

logger = logging.getLogger(__name__)


class JudgeService:
    def __init__(self, db: Session, delete_policy: DeletePolicy = None):
        self.db = db
        self.delete_policy = delete_policy or settings.DELETE_POLICY

    def get_judge(self, judge_id: str) -> Judge:
        judge = self.db.query(Judge).filter(Judge.id == judge_id).first()
        if not judge:
            raise NotFound("Judge not found")
        return judge

    def list_judges(self) -> List[Judge]:
        return self.db.query(Judge).order_by(Judge.id).all()

    def create_judge(self, judge_id: str, password: str) -> Judge:
        if self.db.query(Judge).filter(Judge.id == judge_id).first():
            raise DuplicateResource("Judge already exists")

        judge = Judge(id=judge_id, password=hash_password(password))
        self.db.add(judge)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise DuplicateResource("Judge already exists")

        logger.info(f"Created judge {judge_id}")
        return judge

    def login(self, judge_id: str, password: str) -> Judge:
        judge = self.db.query(Judge).filter(Judge.id == judge_id).first()
        if judge is None:
            burn_password_check(password)
            logger.warning("Failed judge login")
            raise InvalidCredentials()

        if not verify_password(password, judge.password):
            logger.warning(f"Failed judge login for {judge_id}")
            raise InvalidCredentials()

        return judge

    def update_password(self, judge_id: str, password: Optional[str] = None) -> Judge:
        """Replace the judge's hash; without a password nothing changes."""
        judge = self.get_judge(judge_id)
        if password:
            judge.password = hash_password(password)
            self.db.commit()
            self.db.refresh(judge)
        return judge

    def delete_judge(self, judge_id: str):
        judge = self.get_judge(judge_id)
        dependents = [
            ("reviews", self.db.query(Review).filter(Review.judge_id == judge_id)),
            ("event assignments", self.db.query(JudgeEvent).filter(JudgeEvent.judge_id == judge_id)),
        ]
        delete_with_policy(self.db, judge, dependents, self.delete_policy, f"Judge {judge_id}")
        logger.info(f"Deleted judge {judge_id} ({DeletePolicy(self.delete_policy).value} policy)")
