from __future__ import annotations

from datetime import date

import pytest

from club_attendance.core.exceptions import NotFoundError, ValidationError


def _student(container, n: int, **overrides):
    payload = {"name": f"Student {n}", "studentId": f"24SJCCC{n:03d}", "section": "BBA A"}
    payload.update(overrides)
    return container.student_service.create_student(payload)


def test_mark_same_value_twice_keeps_one_record(container, store):
    s = _student(container, 1)
    svc = container.attendance_service

    first = svc.mark_attendance(student_id=s.id, date="2024-03-01", is_present=True)
    second = svc.mark_attendance(student_id=s.id, date="2024-03-01", is_present=True)

    assert second.id == first.id
    assert second.is_present is True
    assert len(store.attendance) == 1


def test_mark_overwrites_existing_record(container, store):
    s = _student(container, 1)
    svc = container.attendance_service

    first = svc.mark_attendance(student_id=s.id, date=date(2024, 3, 1), is_present=True)
    second = svc.mark_attendance(student_id=s.id, date=date(2024, 3, 1), is_present=False)

    assert second.id == first.id
    assert [r.is_present for r in store.attendance.values()] == [False]


def test_mark_collects_all_field_errors(container):
    with pytest.raises(ValidationError) as exc:
        container.attendance_service.mark_attendance(student_id="", date="03/01/2024", is_present="yes")

    assert exc.value.errors == [
        "studentId is required",
        "date: expected a YYYY-MM-DD date",
        "isPresent must be a boolean",
    ]


def test_mark_from_payload_requires_object(container):
    with pytest.raises(ValidationError):
        container.attendance_service.mark_from_payload(["not", "an", "object"])


def test_bulk_mark_is_best_effort(container):
    a = _student(container, 1)
    b = _student(container, 2)
    items = [
        {"studentId": a.id, "date": "2024-03-01", "isPresent": True},
        {"studentId": b.id, "date": "bad", "isPresent": False},
        {"studentId": "unknown", "date": "2024-03-01", "isPresent": True},
        {"studentId": b.id, "date": "2024-03-01", "isPresent": False},
    ]

    result = container.attendance_service.bulk_mark(items)

    assert result.marked == 2
    assert result.errors == [
        "Row 2: date: expected a YYYY-MM-DD date",
        "Row 3: Failed to mark attendance",
    ]
    assert {r.student_id for r in result.records} == {a.id, b.id}


def test_bulk_mark_rejects_empty(container):
    with pytest.raises(ValidationError):
        container.attendance_service.bulk_mark([])


def test_get_by_date_filters_section(container):
    a = _student(container, 1, name="Amy")
    b = _student(container, 2, name="Bob", section="BBA B")
    svc = container.attendance_service
    svc.mark_attendance(student_id=a.id, date="2024-03-01", is_present=True)
    svc.mark_attendance(student_id=b.id, date="2024-03-01", is_present=False)
    svc.mark_attendance(student_id=b.id, date="2024-03-02", is_present=True)

    assert [r.student.name for r in svc.get_by_date("2024-03-01")] == ["Amy", "Bob"]
    assert [r.student.name for r in svc.get_by_date("2024-03-01", "BBA B")] == ["Bob"]


def test_get_by_range_is_inclusive_and_validated(container):
    a = _student(container, 1)
    svc = container.attendance_service
    for day in ("2024-03-01", "2024-03-02", "2024-03-03"):
        svc.mark_attendance(student_id=a.id, date=day, is_present=True)

    rows = svc.get_by_range("2024-03-01", "2024-03-02")

    assert [r.date.isoformat() for r in rows] == ["2024-03-02", "2024-03-01"]
    with pytest.raises(ValidationError):
        svc.get_by_range("2024-03-03", "2024-03-01")


def test_get_for_student_defaults_to_recent_window(container, monkeypatch):
    import club_attendance.attendance.service as attendance_service

    monkeypatch.setattr(attendance_service, "today_local", lambda: date(2024, 3, 31))
    a = _student(container, 1)
    svc = container.attendance_service
    svc.mark_attendance(student_id=a.id, date="2024-03-02", is_present=True)
    svc.mark_attendance(student_id=a.id, date="2024-03-01", is_present=False)

    records = svc.get_for_student(a.id)

    assert [r.date for r in records] == [date(2024, 3, 2)]
    with pytest.raises(NotFoundError):
        svc.get_for_student("missing")
