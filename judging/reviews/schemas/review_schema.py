from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ReviewSubmit(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    judge_id: str = Field(..., alias="judgeId")
    project_id: int = Field(..., alias="projectId")
    score: int
    feedback: Optional[str] = None


class ReviewRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    judge_id: str
    project_id: int
    score: Optional[int] = None
    feedback: Optional[str] = None
