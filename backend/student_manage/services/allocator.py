from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from student_manage.core.config import RECONCILE_EXPLICIT_UNIQUE_NO
from student_manage.core.errors import DuplicateIdentifier
from student_manage.models.assignment import Assignment
from student_manage.services import sequence_store

logger = logging.getLogger("uvicorn.error")

ASSIGNMENT_SEQUENCE = "assignmentUniqueNo"


def unique_no_in_use(db: Session, unique_no: int) -> bool:
    stmt = select(Assignment.id).where(Assignment.unique_no == unique_no).limit(1)
    return db.execute(stmt).first() is not None


def allocate_unique_no(
    db: Session,
    requested_no: Optional[int] = None,
    reconcile: Optional[bool] = None,
) -> int:
    """Return the ``uniqueNo`` for a new assignment.

    Without ``requested_no`` the next counter value is returned as is. A
    requested number is checked against existing assignments and passed
    through; it only moves the counter forward when ``reconcile`` (or the
    ``RECONCILE_EXPLICIT_UNIQUE_NO`` setting) is on.
    """
    if requested_no is None:
        return sequence_store.increment_and_get(db, ASSIGNMENT_SEQUENCE)

    if unique_no_in_use(db, requested_no):
        raise DuplicateIdentifier()

    if reconcile is None:
        reconcile = RECONCILE_EXPLICIT_UNIQUE_NO
    if reconcile:
        counter = sequence_store.advance_to(db, ASSIGNMENT_SEQUENCE, requested_no)
        logger.debug("Sequence %s advanced to %s", ASSIGNMENT_SEQUENCE, counter)
    return requested_no


def bootstrap_assignment_sequence(db: Session) -> None:
    sequence_store.ensure_exists(db, ASSIGNMENT_SEQUENCE)
    db.commit()
