from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class JudgeCreate(BaseModel):
    id: str = Field(..., min_length=1, max_length=64)
    password: str = Field(..., min_length=1)


class JudgeLogin(BaseModel):
    id: str
    password: str


class JudgeUpdate(BaseModel):
    id: str
    # Judges carry no name; accepted so the profile form can post the same body as students
    name: Optional[str] = None
    password: Optional[str] = None


class JudgeRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str


class JudgeLoginResponse(BaseModel):
    judge: JudgeRead
