from pydantic import BaseModel, ConfigDict, Field


class JudgeAssignment(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    judge_id: str = Field(..., alias="judgeId")
    event_id: int = Field(..., alias="eventId")
