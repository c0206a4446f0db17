from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    """Repository interface for students.

    Services depend on this protocol, not on a concrete database.
    """

    def get_by_id(self, id: str) -> Optional[Student]:
        raise NotImplementedError

    def get_by_external_id(self, student_id: str) -> Optional[Student]:
        raise NotImplementedError

    def create(
        self,
        *,
        name: str,
        student_id: str,
        email: Optional[str],
        section: str,
        shift: str,
        is_active: bool = True,
    ) -> Student:
        """Insert a student; raises ConflictError when `student_id` is taken."""

        raise NotImplementedError

    def update(self, id: str, fields: dict) -> Optional[Student]:
        """Apply a partial update; returns None when the student does not exist."""

        raise NotImplementedError

    def delete_by_id(self, id: str) -> bool:
        """Hard delete, cascading to the student's attendance records."""

        raise NotImplementedError

    def list_active(self, section: Optional[str] = None) -> Sequence[Student]:
        raise NotImplementedError
