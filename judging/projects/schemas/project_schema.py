from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from judging.reviews.schemas.review_schema import ReviewRead


class ProjectCreate(BaseModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    event_id: int
    user_id: int


class ProjectRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: Optional[str] = None
    event_id: int
    user_id: int


class ProjectWithReviews(ProjectRead):
    reviews: List[ReviewRead] = []


class ProjectWithEvent(ProjectRead):
    event_name: str


class ProjectDetail(BaseModel):
    project: ProjectWithEvent
    reviews: List[ReviewRead]
