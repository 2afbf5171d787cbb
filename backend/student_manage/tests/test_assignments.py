from datetime import date

import pytest

from student_manage.core.errors import AssignmentNotFound, DuplicateIdentifier, InvalidDueDate
from student_manage.models.assignment import Assignment
from student_manage.services import assignments as assignment_service
from student_manage.services import sequence_store
from student_manage.services.allocator import ASSIGNMENT_SEQUENCE


def create(db, unique_no=None, **overrides):
    values = {
        "title": "Essay",
        "description": "Write about FastAPI",
        "due_date": "2026-12-31",
    }
    values.update(overrides)
    return assignment_service.create_assignment(db, unique_no=unique_no, **values)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2026-12-31", date(2026, 12, 31)),
        ("2026-12-31T10:30:00", date(2026, 12, 31)),
        ("2026-12-31T23:00:00Z", date(2026, 12, 31)),
        (date(2026, 1, 2), date(2026, 1, 2)),
    ],
)
def test_parse_due_date_accepts_iso_values(raw, expected):
    assert assignment_service.parse_due_date(raw) == expected


@pytest.mark.parametrize("raw", ["", None, "tomorrow", "2026-13-40", "31/12/2026"])
def test_parse_due_date_rejects_other_values(raw):
    with pytest.raises(InvalidDueDate) as exc_info:
        assignment_service.parse_due_date(raw)
    assert exc_info.value.message == "Invalid date format. Please use YYYY-MM-DD."


def test_create_without_number_uses_sequence(db_session):
    first = create(db_session)
    second = create(db_session, title="Lab report")

    assert first.unique_no == 1
    assert second.unique_no == 2
    assert first.due_date == date(2026, 12, 31)


def test_invalid_date_is_rejected_before_persisting(db_session):
    with pytest.raises(InvalidDueDate):
        create(db_session, due_date="not a date")

    assert db_session.query(Assignment).count() == 0
    assert sequence_store.current_value(db_session, ASSIGNMENT_SEQUENCE) is None


def test_duplicate_explicit_number_is_rejected(db_session):
    create(db_session, unique_no=5)

    with pytest.raises(DuplicateIdentifier):
        create(db_session, unique_no=5)
    assert db_session.query(Assignment).filter(Assignment.unique_no == 5).count() == 1


def test_explicit_number_does_not_shift_auto_numbers(db_session):
    manual = create(db_session, unique_no=100)
    auto = create(db_session)

    assert manual.unique_no == 100
    assert auto.unique_no == 1


def test_auto_number_colliding_with_manual_one_fails_and_moves_on(db_session):
    create(db_session, unique_no=1)

    with pytest.raises(DuplicateIdentifier):
        create(db_session)

    # The counter kept its increment, so the next attempt gets a fresh number.
    assert create(db_session).unique_no == 2


def test_reconciled_explicit_number_keeps_auto_numbers_ahead(db_session):
    create(db_session, unique_no=100, reconcile=True)

    assert create(db_session).unique_no == 101


def test_find_by_unique_no(db_session):
    created = create(db_session, unique_no=42)

    found = assignment_service.find_by_unique_no(db_session, 42)
    assert found is not None
    assert found.id == created.id
    assert assignment_service.find_by_unique_no(db_session, 43) is None


def test_get_missing_assignment_raises_not_found(db_session):
    with pytest.raises(AssignmentNotFound):
        assignment_service.get_assignment(db_session, 999)


def test_partial_update_keeps_other_fields(db_session):
    create(db_session, unique_no=7)

    updated = assignment_service.update_assignment(db_session, 7, {"title": "X"})

    assert updated.title == "X"
    assert updated.description == "Write about FastAPI"
    assert updated.due_date == date(2026, 12, 31)


def test_update_parses_due_date_and_ignores_empty_one(db_session):
    create(db_session, unique_no=8)

    updated = assignment_service.update_assignment(db_session, 8, {"due_date": "2027-01-15"})
    assert updated.due_date == date(2027, 1, 15)

    updated = assignment_service.update_assignment(db_session, 8, {"due_date": ""})
    assert updated.due_date == date(2027, 1, 15)


def test_update_with_invalid_date_changes_nothing(db_session):
    create(db_session, unique_no=9)

    with pytest.raises(InvalidDueDate):
        assignment_service.update_assignment(db_session, 9, {"title": "New", "due_date": "soon"})

    assert assignment_service.get_assignment(db_session, 9).title == "Essay"


def test_update_missing_assignment_raises_not_found(db_session):
    with pytest.raises(AssignmentNotFound):
        assignment_service.update_assignment(db_session, 404, {"title": "X"})


def test_delete_removes_exactly_one_record(db_session):
    create(db_session, unique_no=10)
    create(db_session, unique_no=11)

    assignment_service.delete_assignment(db_session, 10)

    assert assignment_service.find_by_unique_no(db_session, 10) is None
    assert assignment_service.find_by_unique_no(db_session, 11) is not None


def test_delete_missing_assignment_raises_not_found(db_session):
    with pytest.raises(AssignmentNotFound):
        assignment_service.delete_assignment(db_session, 12)
