from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Optional, Sequence

from ..common.validators import optional_email, require_bool, require_choice, require_non_empty, require_pattern
from ..core.constants import DEFAULT_SHIFT, SECTIONS, SHIFTS
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from .model import BulkCreateResult, Student
from .repository import StudentRepository
from .sheet_import import SheetImporter

logger = logging.getLogger(__name__)


class StudentService:
    """Use cases of the student directory."""

    def __init__(
        self,
        students: StudentRepository,
        *,
        sections: Iterable[str] = SECTIONS,
        student_id_pattern: Optional[str] = None,
        importer: Optional[SheetImporter] = None,
    ):
        self._students = students
        self._sections = tuple(sections)
        self._student_id_pattern = student_id_pattern
        self._importer = importer

    # ----- validation -----

    def validate_payload(self, payload: Any, *, partial: bool = False) -> dict:
        """Turn an API payload (camelCase keys) into repository fields.

        Collects one message per bad field and raises a single ValidationError.
        With `partial=True` only the keys present are checked.
        """

        if not isinstance(payload, dict):
            raise ValidationError("Invalid input data", ["body: expected a JSON object"])

        checks: dict[str, tuple[str, Callable[[Any], Any]]] = {
            "name": ("name", lambda v: require_non_empty(v, "name")),
            "studentId": ("student_id", lambda v: require_pattern(v, "studentId", self._student_id_pattern)),
            "email": ("email", lambda v: optional_email(v, "email")),
            "section": ("section", lambda v: require_choice(v, "section", self._sections)),
            "shift": ("shift", lambda v: require_choice(v, "shift", SHIFTS)),
            "isActive": ("is_active", lambda v: require_bool(v, "isActive")),
        }
        defaults = {"email": None, "shift": DEFAULT_SHIFT, "isActive": True}

        fields: dict = {}
        errors: list[str] = []
        for key, (field, check) in checks.items():
            if key not in payload:
                if partial:
                    continue
                if key in defaults:
                    fields[field] = defaults[key]
                    continue
            try:
                fields[field] = check(payload.get(key))
            except ValidationError as e:
                errors.append(str(e))

        if errors:
            raise ValidationError("Invalid input data", errors)
        return fields

    # ----- queries -----

    def list_students(self, section: Optional[str] = None) -> Sequence[Student]:
        return self._students.list_active(section or None)

    def get_student(self, id: str) -> Student:
        student = self._students.get_by_id(id)
        if not student:
            raise NotFoundError("Student not found")
        return student

    # ----- commands -----

    def create_student(self, payload: Any) -> Student:
        fields = self.validate_payload(payload)
        if self._students.get_by_external_id(fields["student_id"]):
            raise ConflictError("Student ID already exists")

        student = self._students.create(**fields)
        logger.info("Created student %s (%s)", student.student_id, student.id)
        return student

    def update_student(self, id: str, payload: Any) -> Student:
        fields = self.validate_payload(payload, partial=True)

        new_external_id = fields.get("student_id")
        if new_external_id:
            holder = self._students.get_by_external_id(new_external_id)
            if holder and holder.id != id:
                raise ConflictError("Student ID already exists")

        student = self._students.update(id, fields)
        if not student:
            raise NotFoundError("Student not found")
        return student

    def delete_student(self, id: str) -> None:
        if not self._students.delete_by_id(id):
            raise NotFoundError("Student not found")
        logger.info("Deleted student %s and their attendance records", id)

    def bulk_create(self, payloads: Any) -> BulkCreateResult:
        """Create each student independently; failures are reported per row, never rolled back."""

        if not isinstance(payloads, list) or not payloads:
            raise ValidationError("Invalid or empty students data")

        created: list[Student] = []
        errors: list[str] = []

        for i, payload in enumerate(payloads, start=1):
            try:
                created.append(self.create_student(payload))
            except ValidationError as e:
                errors.append(f"Row {i}: {', '.join(e.errors) or str(e)}")
            except ConflictError:
                sid = payload.get("studentId") if isinstance(payload, dict) else None
                errors.append(f"Row {i}: Student ID {sid} already exists")
            except Exception:
                logger.warning("Bulk create failed for row %d", i, exc_info=True)
                errors.append(f"Row {i}: Failed to create student")

        logger.info("Bulk student import: %d created, %d failed", len(created), len(errors))
        return BulkCreateResult(created=len(created), errors=errors, students=created)

    def import_from_sheet(self, url: Any) -> BulkCreateResult:
        if self._importer is None:
            raise RuntimeError("Sheet importer is not configured")

        url = require_non_empty(url, "url")
        payloads, skipped = self._importer.load_students(url)
        if not payloads:
            raise ValidationError("No valid student records found. Please check your data format.")

        result = self.bulk_create(payloads)
        return BulkCreateResult(
            created=result.created,
            errors=result.errors,
            students=result.students,
            skipped=skipped,
        )
