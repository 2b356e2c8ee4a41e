import logging
from typing import Dict, Iterable, List, Optional

from sqlalchemy.orm import Session

from judging.core.errors import NotFound
from judging.core.utils import upsert
from judging.judges.models import Judge
from judging.projects.models import Project
from judging.reviews.models import Review
from judging.reviews.services.score_validator import ScoreValidator

logger = logging.getLogger(__name__)


class ReviewService:
    def __init__(self, db: Session, score_validator: ScoreValidator = None):
        self.db = db
        self.score_validator = score_validator or ScoreValidator.from_settings()

    def submit_review(self, judge_id: str, project_id: int, score: int, feedback: Optional[str]):
        """Record a judge's score for a project, overwriting any earlier review by the same judge."""
        self.score_validator.validate(score)

        if not self.db.query(Judge).filter(Judge.id == judge_id).first():
            raise NotFound("Judge not found")
        if not self.db.query(Project).filter(Project.id == project_id).first():
            raise NotFound("Project not found")

        upsert(
            self.db,
            Review,
            {"judge_id": judge_id, "project_id": project_id, "score": score, "feedback": feedback},
            conflict_columns=["judge_id", "project_id"],
            update_columns=["score", "feedback"],
        )
        logger.info(f"Saved review of project {project_id} by judge {judge_id}")

    def list_reviews_for_project(self, project_id: int) -> List[Review]:
        return self.db.query(Review).filter(Review.project_id == project_id).order_by(Review.id).all()

    def list_reviews_for_projects(self, project_ids: Iterable[int]) -> Dict[int, List[Review]]:
        """Group the reviews of several projects by project id.

        Projects without reviews are absent from the result. An empty id list
        returns straight away without querying.
        """
        project_ids = list(project_ids)
        if not project_ids:
            return {}

        reviews = (
            self.db.query(Review)
            .filter(Review.project_id.in_(project_ids))
            .order_by(Review.id)
            .all()
        )

        grouped: Dict[int, List[Review]] = {}
        for review in reviews:
            grouped.setdefault(review.project_id, []).append(review)
        return grouped
