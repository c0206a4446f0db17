from __future__ import annotations

from enum import Enum


class AttendanceMark(str, Enum):
    """Read-side attendance state for one student on one date.

    Only PRESENT/ABSENT are ever stored (as a boolean); NOT_MARKED means no
    record exists for the pair.
    """

    PRESENT = "Present"
    ABSENT = "Absent"
    NOT_MARKED = "Not Marked"

    @classmethod
    def from_flag(cls, is_present: bool | None) -> "AttendanceMark":
        if is_present is None:
            return cls.NOT_MARKED
        return cls.PRESENT if is_present else cls.ABSENT
