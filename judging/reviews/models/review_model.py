from sqlalchemy import Column, Integer, String, Text, ForeignKey, UniqueConstraint
from judging.core.database import Base

class Review(Base):
    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True, index=True)
    judge_id = Column(String(64), ForeignKey("judges.id"), nullable=False)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)
    score = Column(Integer)
    feedback = Column(Text)

    # One review per judge per project, resubmissions overwrite it
    __table_args__ = (UniqueConstraint("judge_id", "project_id", name="uq_review_judge_project"),)
