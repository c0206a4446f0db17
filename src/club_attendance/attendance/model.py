from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..students.model import Student


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: presence/absence of one student on one date.

    At most one record exists per (student_id, date).
    """

    id: str
    student_id: str
    date: date
    is_present: bool
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "studentId": self.student_id,
            "date": self.date.isoformat(),
            "isPresent": self.is_present,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }


@dataclass(frozen=True)
class AttendanceRow:
    """Read-model: an attendance record joined with its student (reports, daily views)."""

    record: AttendanceRecord
    student: Student

    @property
    def date(self) -> date:
        return self.record.date

    @property
    def is_present(self) -> bool:
        return self.record.is_present

    def to_dict(self) -> dict:
        data = self.record.to_dict()
        data["student"] = self.student.to_dict()
        return data


@dataclass(frozen=True)
class BulkMarkResult:
    marked: int
    errors: list[str]
    records: list[AttendanceRecord]

    def to_dict(self) -> dict:
        return {
            "marked": self.marked,
            "errors": list(self.errors),
            "records": [r.to_dict() for r in self.records],
        }
