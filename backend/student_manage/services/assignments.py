from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from student_manage.core.errors import AssignmentNotFound, DuplicateIdentifier, InvalidDueDate
from student_manage.models.assignment import Assignment
from student_manage.services.allocator import allocate_unique_no

UPDATABLE_FIELDS = {"title", "description", "due_date"}


def parse_due_date(value: Any) -> date:
    """Accept ``YYYY-MM-DD`` or an ISO-8601 date-time and return the date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value or "").strip()
    if not text:
        raise InvalidDueDate()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text).date()
    except ValueError as exc:
        raise InvalidDueDate() from exc


def find_by_unique_no(db: Session, unique_no: int) -> Optional[Assignment]:
    return db.query(Assignment).filter(Assignment.unique_no == unique_no).first()


def get_assignment(db: Session, unique_no: int) -> Assignment:
    assignment = find_by_unique_no(db, unique_no)
    if not assignment:
        raise AssignmentNotFound()
    return assignment


def create_assignment(
    db: Session,
    title: Optional[str],
    description: Optional[str],
    due_date: Any,
    unique_no: Optional[int] = None,
    reconcile: Optional[bool] = None,
) -> Assignment:
    parsed_due_date = parse_due_date(due_date)

    new_unique_no = allocate_unique_no(db, unique_no, reconcile=reconcile)
    # The counter keeps its increment even if the insert below fails.
    db.commit()

    assignment = Assignment(
        title=title,
        description=description,
        due_date=parsed_due_date,
        unique_no=new_unique_no,
    )
    db.add(assignment)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise DuplicateIdentifier() from exc
    db.refresh(assignment)
    return assignment


def update_assignment(db: Session, unique_no: int, fields: dict) -> Assignment:
    data = {key: value for key, value in fields.items() if key in UPDATABLE_FIELDS}
    if "due_date" in data:
        if data["due_date"]:
            data["due_date"] = parse_due_date(data["due_date"])
        else:
            data.pop("due_date")

    assignment = get_assignment(db, unique_no)
    for key, value in data.items():
        setattr(assignment, key, value)
    db.commit()
    db.refresh(assignment)
    return assignment


def delete_assignment(db: Session, unique_no: int) -> None:
    assignment = get_assignment(db, unique_no)
    db.delete(assignment)
    db.commit()
