from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Any, Optional, Sequence

from ..common.datetime_utils import coerce_date, today_local
from ..common.validators import require_bool, require_non_empty
from ..core.constants import DEFAULT_HISTORY_DAYS
from ..core.exceptions import NotFoundError, ValidationError
from ..students.repository import StudentRepository
from .model import AttendanceRecord, AttendanceRow, BulkMarkResult
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def validate_range(start: date, end: date) -> None:
    if start > end:
        raise ValidationError("Invalid date range", ["startDate must not be after endDate"])


class AttendanceService:
    """Use cases of the attendance ledger."""

    def __init__(self, attendance: AttendanceRepository, students: StudentRepository):
        self._attendance = attendance
        self._students = students

    def mark_attendance(self, *, student_id: Any, date: Any, is_present: Any) -> AttendanceRecord:
        """Create or overwrite the record for (student_id, date).

        The student's existence is not checked here; an unknown id is rejected
        by the storage foreign key.
        """

        errors = []
        try:
            student_id = require_non_empty(student_id, "studentId")
        except ValidationError as e:
            errors.append(str(e))
        try:
            day = coerce_date(date, "date")
        except ValidationError as e:
            errors.extend(e.errors)
        try:
            is_present = require_bool(is_present, "isPresent")
        except ValidationError as e:
            errors.append(str(e))
        if errors:
            raise ValidationError("Invalid input data", errors)

        return self._attendance.upsert(student_id=student_id, date=day, is_present=is_present)

    def mark_from_payload(self, payload: Any) -> AttendanceRecord:
        if not isinstance(payload, dict):
            raise ValidationError("Invalid input data", ["body: expected a JSON object"])
        return self.mark_attendance(
            student_id=payload.get("studentId"),
            date=payload.get("date"),
            is_present=payload.get("isPresent"),
        )

    def bulk_mark(self, items: Any) -> BulkMarkResult:
        """Apply each mark in order and independently; a failed row never undoes earlier rows."""

        if not isinstance(items, list) or not items:
            raise ValidationError("Invalid or empty attendance data")

        records: list[AttendanceRecord] = []
        errors: list[str] = []
        for i, item in enumerate(items, start=1):
            try:
                records.append(self.mark_from_payload(item))
            except ValidationError as e:
                errors.append(f"Row {i}: {', '.join(e.errors) or str(e)}")
            except Exception:
                logger.warning("Bulk attendance failed for row %d", i, exc_info=True)
                errors.append(f"Row {i}: Failed to mark attendance")

        logger.info("Bulk attendance: %d marked, %d failed", len(records), len(errors))
        return BulkMarkResult(marked=len(records), errors=errors, records=records)

    def get_by_date(self, day: Any, section: Optional[str] = None) -> Sequence[AttendanceRow]:
        return self._attendance.list_by_date(date=coerce_date(day, "date"), section=section or None)

    def get_by_range(self, start: Any, end: Any, section: Optional[str] = None) -> Sequence[AttendanceRow]:
        start_d = coerce_date(start, "startDate")
        end_d = coerce_date(end, "endDate")
        validate_range(start_d, end_d)
        return self._attendance.list_by_range(start=start_d, end=end_d, section=section or None)

    def get_for_student(self, student_id: str, *, start: Any = None, end: Any = None) -> Sequence[AttendanceRecord]:
        if not self._students.get_by_id(student_id):
            raise NotFoundError("Student not found")

        end_d = coerce_date(end, "endDate") if end else today_local()
        start_d = coerce_date(start, "startDate") if start else end_d - timedelta(days=DEFAULT_HISTORY_DAYS - 1)
        validate_range(start_d, end_d)
        return self._attendance.list_for_student(student_id=student_id, start=start_d, end=end_d)
