"""Named counters backed by the ``sequences`` table.

Every write is a single ``INSERT ... ON CONFLICT`` statement, so concurrent
callers never see the same post-increment value and a missing row is created
in the same step as the increment.
"""
from __future__ import annotations

from typing import Optional

from sqlalchemy import case, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from student_manage.models.sequence import Sequence

_UPSERT_DIALECTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def _insert_for(db: Session):
    dialect_name = db.get_bind().dialect.name
    insert = _UPSERT_DIALECTS.get(dialect_name)
    if insert is None:
        raise NotImplementedError(f"Atomic sequence upsert not supported for dialect '{dialect_name}'")
    return insert(Sequence)


def ensure_exists(db: Session, name: str) -> None:
    stmt = (
        _insert_for(db)
        .values(name=name, seq=0)
        .on_conflict_do_nothing(index_elements=[Sequence.name])
    )
    db.execute(stmt)


def increment_and_get(db: Session, name: str) -> int:
    stmt = _insert_for(db).values(name=name, seq=1)
    stmt = stmt.on_conflict_do_update(
        index_elements=[Sequence.name],
        set_={"seq": Sequence.seq + 1},
    ).returning(Sequence.seq)
    return db.execute(stmt).scalar_one()


def advance_to(db: Session, name: str, value: int) -> int:
    """Raise the counter to at least ``value``; never lowers it or goes below 0."""
    stmt = _insert_for(db).values(name=name, seq=max(value, 0))
    stmt = stmt.on_conflict_do_update(
        index_elements=[Sequence.name],
        set_={"seq": case((Sequence.seq < stmt.excluded.seq, stmt.excluded.seq), else_=Sequence.seq)},
    ).returning(Sequence.seq)
    return db.execute(stmt).scalar_one()


def current_value(db: Session, name: str) -> Optional[int]:
    return db.execute(select(Sequence.seq).where(Sequence.name == name)).scalar_one_or_none()
