from pydantic import BaseModel, Field
from typing import Optional
from datetime import date

UNIQUE_NO_MIN = -2**63
UNIQUE_NO_MAX = 2**63 - 1


class AssignmentCreate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[str] = Field(default=None, alias="dueDate")
    unique_no: Optional[int] = Field(default=None, alias="uniqueNo", ge=UNIQUE_NO_MIN, le=UNIQUE_NO_MAX)

    class Config:
        populate_by_name = True


class AssignmentUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[str] = Field(default=None, alias="dueDate")

    class Config:
        populate_by_name = True


class AssignmentOut(BaseModel):
    id: int
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: date = Field(alias="dueDate")
    unique_no: int = Field(alias="uniqueNo")

    class Config:
        from_attributes = True
        populate_by_name = True
