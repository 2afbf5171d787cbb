from typing import Annotated

from fastapi import APIRouter, Depends, Path
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session
from student_manage.database.deps import get_db
from student_manage.models.assignment import Assignment
from student_manage.schemas.assignment import (
    UNIQUE_NO_MAX,
    UNIQUE_NO_MIN,
    AssignmentCreate,
    AssignmentOut,
    AssignmentUpdate,
)
from student_manage.services import assignments as assignment_service

router = APIRouter(
    prefix="/assignments",
    tags=["assignments"]
)

UniqueNoPath = Annotated[int, Path(ge=UNIQUE_NO_MIN, le=UNIQUE_NO_MAX)]

def build_assignment_out(assignment: Assignment) -> AssignmentOut:
    return AssignmentOut(
        id=assignment.id,
        title=assignment.title,
        description=assignment.description,
        due_date=assignment.due_date,
        unique_no=assignment.unique_no,
    )

@router.post("", response_class=PlainTextResponse)
def create_assignment(payload: AssignmentCreate, db: Session = Depends(get_db)):
    assignment_service.create_assignment(
        db,
        title=payload.title,
        description=payload.description,
        due_date=payload.due_date,
        unique_no=payload.unique_no,
    )
    return "Assignment Created Successfully"

@router.get("/{unique_no}", response_model=AssignmentOut)
def read_assignment(unique_no: UniqueNoPath, db: Session = Depends(get_db)):
    return build_assignment_out(assignment_service.get_assignment(db, unique_no))

@router.put("/{unique_no}", response_model=AssignmentOut)
def update_assignment(unique_no: UniqueNoPath, payload: AssignmentUpdate, db: Session = Depends(get_db)):
    if hasattr(payload, "model_dump"):
        data = payload.model_dump(exclude_unset=True)
    else:
        data = payload.dict(exclude_unset=True)
    assignment = assignment_service.update_assignment(db, unique_no, data)
    return build_assignment_out(assignment)

@router.delete("/{unique_no}", response_class=PlainTextResponse)
def delete_assignment(unique_no: UniqueNoPath, db: Session = Depends(get_db)):
    assignment_service.delete_assignment(db, unique_no)
    return "Assignment Deleted Successfully"
