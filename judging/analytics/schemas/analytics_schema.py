from typing import Optional

from pydantic import BaseModel


class LeaderboardEntry(BaseModel):
    title: str
    event_name: str
    avg_score: float


class AnalyticsSummary(BaseModel):
    totalStudents: int
    totalJudges: int
    totalEvents: int
    totalProjects: int
    topEventName: Optional[str] = None
    topProjectTitle: Optional[str] = None
