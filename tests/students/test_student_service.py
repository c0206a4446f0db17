from __future__ import annotations

import pytest

from club_attendance.core.exceptions import ConflictError, NotFoundError, ValidationError
from club_attendance.students.service import StudentService


def _payload(n: int, **overrides) -> dict:
    payload = {
        "name": f"Student {n}",
        "studentId": f"24SJCCC{n:03d}",
        "email": f"student{n}@example.com",
        "section": "BBA A",
        "shift": "Shift 1",
    }
    payload.update(overrides)
    return payload


def test_create_student_applies_defaults(container):
    payload = _payload(1)
    del payload["shift"]
    del payload["email"]

    student = container.student_service.create_student(payload)

    assert student.shift == "Shift 1"
    assert student.email is None
    assert student.is_active is True
    assert container.students_repo.get_by_id(student.id) == student


def test_create_student_rejects_bad_fields(container):
    with pytest.raises(ValidationError) as exc:
        container.student_service.create_student(
            {"name": " ", "studentId": "XYZ", "email": "not-an-email", "section": "Nowhere", "shift": "Shift 9"}
        )

    errors = exc.value.errors
    assert "name is required" in errors
    assert "studentId has an invalid format" in errors
    assert "email is not a valid email address" in errors
    assert any(e.startswith("section must be one of") for e in errors)
    assert any(e.startswith("shift must be one of") for e in errors)


def test_create_student_duplicate_external_id(container):
    container.student_service.create_student(_payload(1))

    with pytest.raises(ConflictError):
        container.student_service.create_student(_payload(1, name="Someone Else"))


def test_list_students_filters_inactive_and_section(container):
    svc = container.student_service
    svc.create_student(_payload(1, name="Zed", section="BBA B"))
    svc.create_student(_payload(2, name="Amy"))
    svc.create_student(_payload(3, name="Bob", isActive=False))

    assert [s.name for s in svc.list_students()] == ["Amy", "Zed"]
    assert [s.name for s in svc.list_students("BBA B")] == ["Zed"]


def test_update_student_is_partial(container):
    svc = container.student_service
    student = svc.create_student(_payload(1))

    updated = svc.update_student(student.id, {"section": "BA English"})

    assert updated.section == "BA English"
    assert updated.name == student.name
    assert updated.student_id == student.student_id


def test_update_student_rejects_taken_external_id(container):
    svc = container.student_service
    first = svc.create_student(_payload(1))
    svc.create_student(_payload(2))

    with pytest.raises(ConflictError):
        svc.update_student(first.id, {"studentId": "24SJCCC002"})

    # Keeping its own id is not a conflict.
    assert svc.update_student(first.id, {"studentId": "24SJCCC001"}).id == first.id


def test_update_missing_student(container):
    with pytest.raises(NotFoundError):
        container.student_service.update_student("missing", {"name": "X"})


def test_delete_student_cascades_attendance(container, store):
    student = container.student_service.create_student(_payload(1))
    container.attendance_service.mark_attendance(student_id=student.id, date="2024-03-01", is_present=True)

    container.student_service.delete_student(student.id)

    assert container.students_repo.get_by_id(student.id) is None
    assert store.attendance == {}
    with pytest.raises(NotFoundError):
        container.student_service.delete_student(student.id)


def test_bulk_create_reports_duplicate_row_and_keeps_others(container):
    payloads = [_payload(1), _payload(2), _payload(1, name="Dup"), _payload(3), _payload(4)]

    result = container.student_service.bulk_create(payloads)

    assert result.created == 4
    assert result.errors == ["Row 3: Student ID 24SJCCC001 already exists"]
    assert len(container.student_service.list_students()) == 4


def test_bulk_create_reports_validation_errors_per_row(container):
    result = container.student_service.bulk_create([_payload(1), {"name": "No id", "section": "BBA A"}])

    assert result.created == 1
    assert result.errors == ["Row 2: studentId is required"]


@pytest.mark.parametrize("payloads", [None, [], {"students": []}])
def test_bulk_create_rejects_empty_input(container, payloads):
    with pytest.raises(ValidationError) as exc:
        container.student_service.bulk_create(payloads)

    assert str(exc.value) == "Invalid or empty students data"


def test_import_from_sheet_reports_skipped(container, importer):
    importer.payloads = [_payload(1), _payload(2)]
    importer.skipped = 3

    result = container.student_service.import_from_sheet("https://docs.google.com/spreadsheets/d/abc/edit")

    assert result.created == 2
    assert result.skipped == 3
    assert importer.urls == ["https://docs.google.com/spreadsheets/d/abc/edit"]


def test_import_from_sheet_without_valid_rows(container, importer):
    importer.skipped = 2

    with pytest.raises(ValidationError):
        container.student_service.import_from_sheet("https://docs.google.com/spreadsheets/d/abc/edit")


def test_student_to_dict_uses_wire_names(container):
    student = container.student_service.create_student(_payload(7))

    data = student.to_dict()

    assert data["studentId"] == "24SJCCC007"
    assert data["isActive"] is True
    assert set(data) == {"id", "name", "studentId", "email", "section", "shift", "isActive", "createdAt"}


def test_student_id_pattern_must_match_whole_value(container):
    svc = StudentService(container.students_repo, student_id_pattern=r"24SJCCC\d{1,3}")

    with pytest.raises(ValidationError) as exc:
        svc.create_student(_payload(1, studentId="24SJCCC001-extra"))

    assert exc.value.errors == ["studentId has an invalid format"]
    assert svc.create_student(_payload(1)).student_id == "24SJCCC001"
