from __future__ import annotations

import uuid
from dataclasses import replace
from datetime import date

import pytest

from club_attendance.attendance.model import AttendanceRecord, AttendanceRow
from club_attendance.container import wire_container
from club_attendance.core.exceptions import ConflictError
from club_attendance.students.model import Student


class InMemoryStore:
    """Shared tables for the in-memory repositories below."""

    def __init__(self):
        self.students: dict[str, Student] = {}
        self.attendance: dict[tuple[str, date], AttendanceRecord] = {}


class InMemoryStudentRepo:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def get_by_id(self, id):
        return self._store.students.get(id)

    def get_by_external_id(self, student_id):
        return next((s for s in self._store.students.values() if s.student_id == student_id), None)

    def create(self, *, name, student_id, email, section, shift, is_active=True):
        if self.get_by_external_id(student_id):
            raise ConflictError("Student ID already exists")
        student = Student(
            id=str(uuid.uuid4()),
            name=name,
            student_id=student_id,
            email=email,
            section=section,
            shift=shift,
            is_active=is_active,
        )
        self._store.students[student.id] = student
        return student

    def update(self, id, fields):
        current = self._store.students.get(id)
        if not current:
            return None
        updated = replace(current, **fields)
        self._store.students[id] = updated
        return updated

    def delete_by_id(self, id):
        if id not in self._store.students:
            return False
        del self._store.students[id]
        for key in [k for k in self._store.attendance if k[0] == id]:
            del self._store.attendance[key]
        return True

    def list_active(self, section=None):
        rows = [s for s in self._store.students.values() if s.is_active and (not section or s.section == section)]
        return sorted(rows, key=lambda s: s.name)


class InMemoryAttendanceRepo:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def upsert(self, *, student_id, date, is_present):
        if student_id not in self._store.students:
            raise RuntimeError("foreign key violation")
        key = (student_id, date)
        current = self._store.attendance.get(key)
        if current:
            record = replace(current, is_present=is_present)
        else:
            record = AttendanceRecord(id=str(uuid.uuid4()), student_id=student_id, date=date, is_present=is_present)
        self._store.attendance[key] = record
        return record

    def _joined(self, predicate, section):
        rows = []
        for (sid, _), record in self._store.attendance.items():
            student = self._store.students[sid]
            if predicate(record) and (not section or student.section == section):
                rows.append(AttendanceRow(record=record, student=student))
        return rows

    def list_by_date(self, *, date, section=None):
        rows = self._joined(lambda r: r.date == date, section)
        return sorted(rows, key=lambda r: r.student.name)

    def list_by_range(self, *, start, end, section=None):
        rows = self._joined(lambda r: start <= r.date <= end, section)
        rows.sort(key=lambda r: r.student.name)
        rows.sort(key=lambda r: r.date, reverse=True)
        return rows

    def list_for_student(self, *, student_id, start, end):
        rows = [r for (sid, d), r in self._store.attendance.items() if sid == student_id and start <= d <= end]
        return sorted(rows, key=lambda r: r.date, reverse=True)


class InMemoryStatsRepo:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def count_active_students(self):
        return sum(1 for s in self._store.students.values() if s.is_active)

    def count_marks_on(self, day):
        marks = [r.is_present for (_, d), r in self._store.attendance.items() if d == day]
        return sum(marks), len(marks) - sum(marks)

    def count_active_sections(self):
        return len({s.section for s in self._store.students.values() if s.is_active})


class StubImporter:
    def __init__(self, payloads=None, skipped=0):
        self.payloads = payloads or []
        self.skipped = skipped
        self.urls = []

    def load_students(self, url):
        self.urls.append(url)
        return list(self.payloads), self.skipped


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def importer():
    return StubImporter()


@pytest.fixture
def container(store, importer):
    return wire_container(
        students_repo=InMemoryStudentRepo(store),
        attendance_repo=InMemoryAttendanceRepo(store),
        stats_repo=InMemoryStatsRepo(store),
        importer=importer,
    )


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    from club_attendance.main import create_app

    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()

