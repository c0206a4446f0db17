from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Student:
    """Domain entity: a club member whose attendance is tracked.

    `id` is the surrogate key; `student_id` is the external, human-facing ID.
    """

    id: str
    name: str
    student_id: str
    email: Optional[str]
    section: str
    shift: str
    is_active: bool = True
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "studentId": self.student_id,
            "email": self.email,
            "section": self.section,
            "shift": self.shift,
            "isActive": self.is_active,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }


@dataclass(frozen=True)
class BulkCreateResult:
    created: int
    errors: list[str]
    students: list[Student]
    skipped: int = 0

    def to_dict(self) -> dict:
        return {
            "created": self.created,
            "skipped": self.skipped,
            "errors": list(self.errors),
            "students": [s.to_dict() for s in self.students],
        }
