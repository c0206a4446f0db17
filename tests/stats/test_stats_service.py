from __future__ import annotations

from datetime import date

import pytest

from club_attendance.core.exceptions import ValidationError
from club_attendance.stats.service import StatsService


class FakeStatsRepo:
    def __init__(self, *, students=0, marks=(0, 0), sections=0):
        self._students = students
        self._marks = marks
        self._sections = sections
        self.days = []

    def count_active_students(self):
        return self._students

    def count_marks_on(self, day):
        self.days.append(day)
        return self._marks

    def count_active_sections(self):
        return self._sections


def test_unmarked_students_are_in_neither_bucket():
    svc = StatsService(FakeStatsRepo(students=3, marks=(2, 0), sections=1))

    stats = svc.compute_stats("2024-03-01")

    assert stats.to_dict() == {
        "date": "2024-03-01",
        "totalStudents": 3,
        "presentToday": 2,
        "absentToday": 0,
        "totalSections": 1,
    }


def test_defaults_to_today(monkeypatch):
    import club_attendance.stats.service as stats_service

    monkeypatch.setattr(stats_service, "today_local", lambda: date(2024, 5, 6))
    repo = FakeStatsRepo()

    StatsService(repo).compute_stats()

    assert repo.days == [date(2024, 5, 6)]


def test_rejects_malformed_date():
    with pytest.raises(ValidationError):
        StatsService(FakeStatsRepo()).compute_stats("06/05/2024")


def test_stats_follow_the_ledger(container):
    svc = container.student_service
    a = svc.create_student({"name": "A", "studentId": "24SJCCC001", "section": "BBA A"})
    b = svc.create_student({"name": "B", "studentId": "24SJCCC002", "section": "BBA B"})
    svc.create_student({"name": "C", "studentId": "24SJCCC003", "section": "BBA B"})
    svc.create_student({"name": "D", "studentId": "24SJCCC004", "section": "BA English", "isActive": False})
    container.attendance_service.mark_attendance(student_id=a.id, date="2024-03-01", is_present=True)
    container.attendance_service.mark_attendance(student_id=b.id, date="2024-03-01", is_present=False)

    stats = container.stats_service.compute_stats("2024-03-01")

    assert (stats.total_students, stats.present_today, stats.absent_today, stats.total_sections) == (3, 1, 1, 2)
    assert stats.present_today + stats.absent_today <= stats.total_students
