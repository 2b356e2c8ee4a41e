from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class StudentLogin(BaseModel):
    email: EmailStr
    password: str


class StudentRegister(BaseModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=1)


class StudentUpdate(BaseModel):
    id: int
    name: str
    # Absent or empty leaves the stored hash alone
    password: Optional[str] = None


class StudentRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str


class LoginResponse(BaseModel):
    user: StudentRead
