from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord, AttendanceRow


class AttendanceRepository(Protocol):
    def upsert(self, *, student_id: str, date: date, is_present: bool) -> AttendanceRecord:
        """Create or overwrite the record for (student_id, date) in one atomic write.

        An existing record keeps its id; only is_present changes.
        """

        raise NotImplementedError

    def list_by_date(self, *, date: date, section: Optional[str] = None) -> Sequence[AttendanceRow]:
        raise NotImplementedError

    def list_by_range(self, *, start: date, end: date, section: Optional[str] = None) -> Sequence[AttendanceRow]:
        """Joined rows with start <= date <= end, newest date first, then student name."""

        raise NotImplementedError

    def list_for_student(self, *, student_id: str, start: date, end: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
