from datetime import date as date_type
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class EventWrite(BaseModel):
    name: str = Field(..., min_length=1)
    date: Optional[date_type] = None


class EventRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    date: Optional[date_type] = None
