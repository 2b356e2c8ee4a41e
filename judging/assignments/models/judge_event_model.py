from sqlalchemy import Column, Integer, String, ForeignKey
from judging.core.database import Base

class JudgeEvent(Base):
    __tablename__ = "judge_event"

    # The composite key doubles as the uniqueness constraint for idempotent assignment
    judge_id = Column(String(64), ForeignKey("judges.id"), primary_key=True)
    event_id = Column(Integer, ForeignKey("events.id"), primary_key=True)
